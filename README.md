# gomono

A layered framework for scheduling training sessions. It has four parts:

- a domain model for trainings and users,
- command and query handlers, each wrapped in a logging decorator,
- a repository contract with an in-memory implementation,
- a request-level service facade on top.

It also has a registry of numeric error codes and a small TCP reachability helper.
It has no dependencies outside the standard library.

## Installation

```
pip install .
```

The `test` extra installs pytest.

## Modules

### `gomono.user`

- `UserType` is an enum with two members, `TRAINER` and `ATTENDEE`. Their values are
  `"trainer"` and `"attendee"`.
- `user_type_from_string(name)` converts a role name into a `UserType`. For any other
  name it raises `IncorrectInputError`, which is a `ValueError`.
- `User(uuid, type)` is a frozen dataclass. `User.is_empty()` is true for `User()`.
- `new_user(user_uuid, user_type)` requires both a non-empty identifier and a type.
  If either is missing it raises `ValueError`.
- `can_user_see_training(user, training)` decides visibility. A trainer can see every
  training. An attendee can see only their own; for any other training it raises
  `ForbiddenToSeeTrainingError`.

### `gomono.training`

`Training(uuid, user_uuid, user_name, time)` is the aggregate. Every argument is
required; a missing one raises `ValueError`. Its read-only properties are:

- `uuid`, `user_uuid`, `user_name`
- `time`, `notes`
- `proposed_new_time`, `move_proposed_by`
- `is_canceled`

Its operations are:

- `update_notes(notes)` replaces the notes. It raises `NoteTooLongError` when the UTF-8
  encoding of the notes is longer than 1000 bytes.
- `can_be_canceled_for_free()` is true while at least 24 hours remain before the training.
- `cancel()` marks the training as canceled. Calling it a second time raises
  `TrainingAlreadyCanceledError`.
- `reschedule_training(new_time)` moves the training straight away. It is only allowed
  while the training can still be canceled for free; otherwise it raises
  `CantRescheduleBeforeTimeError`.
- `propose_reschedule(new_time, proposer_type)` records a proposal to move the training.
- `is_reschedule_proposed()` tells whether a proposal is pending.
- `approve_reschedule(user_type)` accepts the pending proposal. With no proposal it raises
  `NoRescheduleRequestedError`. If the approver has the same user type as the proposer it
  raises `SameUserTypeApprovalError`.
- `reject_reschedule(user_type)` does not exist; rejection takes no arguments:
  `reject_reschedule()` drops the pending proposal, and raises `NoRescheduleRequestedError`
  when there is none.

Every error above derives from `TrainingError`.

Two module-level functions complete the module:

- `cancel_balance_delta(training, canceling_user_type)` gives the change to the
  attendee's training balance after a cancellation. It returns 1 when the cancellation is
  free. For a late cancellation it returns 2 if the trainer cancels and 0 if the attendee
  cancels.
- `unmarshal_training_from_database(...)` rebuilds a `Training` from stored state,
  including its notes, cancellation flag and pending proposal.

### `gomono.model`

`TrainingModel` is the flat, read-side view of a training.

### `gomono.repository`

`TrainingRepository` is a `Protocol` with these methods:

- `add_training`
- `get_training`
- `update_training`
- `all_training`
- `find_training_for_user`

`MemoryTrainingRepository` implements it. It is thread-safe and keeps deep copies of the
trainings it holds.

- `add_training` rejects an identifier that is already stored with `ValueError`.
- `get_training` and `update_training` raise `NotFoundError` for an unknown identifier.
  They also apply `can_user_see_training`.
- `update_training(uuid, user, update_fn)` stores whatever `update_fn` returns. If
  `update_fn` raises, the stored training is left unchanged.
- `all_training()` and `find_training_for_user(user_uuid)` return `TrainingModel`s for the
  trainings that are not canceled, earliest first.
- `remove_all_training()` empties the store.

### `gomono.decorator`

`apply_command_decorators(handler, logger)` wraps a command handler in a
`CommandLoggingDecorator`. `apply_query_decorators(handler, logger)` wraps a query handler
in a `QueryLoggingDecorator`. The `logger` may be a `logging.Logger`, a `LoggerAdapter`
or `None`; `None` uses the `gomono` logger.

Each decorator behaves the same way:

- Before the call, it logs at debug level. The log entry includes the name and `repr` of
  the command or query.
- On success, it logs at info level.
- On failure, it logs at error level and re-raises the exception.

`generate_action_name(obj)` returns the type name of `obj`.

### `gomono.services`

- `UserService` and `TrainerService` are the runtime-checkable protocols that commands
  depend on.
- `UserServiceMock` and `TrainerServiceMock` accept every call. Each records its calls in
  its `calls` list.

### `gomono.commands`

There are six commands, each a frozen dataclass:

- `ScheduleTraining`
- `CancelTraining`
- `RescheduleTraining`
- `RequestTrainingReschedule`
- `ApproveTrainingReschedule`
- `RejectTrainingReschedule`

Each command has a handler. Build it with the matching `new_..._handler(...)` factory; the
factory returns the handler already wrapped in logging. A factory raises `ValueError`
when the repository or a required service is `None`.

When a user or trainer service call fails inside `ScheduleTraining` or `CancelTraining`,
the handler raises a `RuntimeError`. Its message begins with "unable to change training
balance", "unable to schedule training" or "unable to cancel training". The original
exception is kept as its `__cause__`.

### `gomono.queries`

- `AllTraining` asks for every training. Build its handler with `new_all_training_handler`.
- `TrainingForUser(uuid)` asks for one user's trainings. Build its handler with
  `new_training_for_user_handler`.

### `gomono.app`

`new_application(repo, trainer_service, user_service)` builds an `Application`. It wires
every handler into `app.commands` and `app.queries`.
`new_component_test_application(repo)` does the same, but uses the service mocks.

### `gomono.service`

`TrainingService(app, user_uuid=..., user_name=..., user_role=...)` turns requests into
commands and queries, acting on behalf of one caller. Its methods are:

- `get_training`
- `create_training`, which returns the new identifier
- `cancel_training`
- `reschedule_training`
- `request_reschedule_training`
- `approve_reschedule_training`
- `reject_reschedule_training`

Set `user_role` to `"trainer"` or `"attendee"`, because the default role is not a valid
user type. With an invalid role:

- `cancel_training` silently does nothing,
- the other per-user methods raise `IncorrectInputError`.

`training_to_response` converts `TrainingModel`s into `TrainingResponse`s.

### `gomono.code`

The module defines numeric error-code constants, such as `ERR_SUCCESS`,
`ERR_USER_NOT_FOUND` and `ERR_DATABASE`. These constants are not registered by default.

- `register(code, http_status, message, *refs)` records an `ErrCode`. The first extra
  argument, if given, is stored as the reference. It raises `ValueError` in two cases:
  - the status is not one of 200, 400, 401, 403, 404 or 500,
  - the code is already registered.
- `lookup(code)` returns the registered `ErrCode`, or raises `KeyError`.
- `ErrCode.http_status()` returns the code's status, falling back to 500.

### `gomono.net`

`check_addr_available(addr, timeout)` tries a TCP connection to `host:port` every 0.2
seconds. It returns `True` as soon as a connection succeeds, or `False` once the timeout
runs out. The timeout is given in seconds or as a `timedelta`.

## Example

```python
from datetime import datetime, timedelta, timezone

from gomono.app import new_component_test_application
from gomono.commands import ScheduleTraining
from gomono.repository import MemoryTrainingRepository

repo = MemoryTrainingRepository()
app = new_component_test_application(repo)

app.commands.schedule_training.handle(
    ScheduleTraining(
        training_uuid="t-1",
        user_uuid="u-1",
        user_name="Alice",
        training_time=datetime.now(timezone.utc) + timedelta(days=3),
    )
)
print(repo.all_training())
```

## What it does not do

- There is no network server and no remote transport. `TrainingService` is a plain Python
  object that you call directly.
- There is no persistent storage; the only repository is in memory.
- There is no command-line program.
- The user and trainer services exist only as protocols and recording mocks.