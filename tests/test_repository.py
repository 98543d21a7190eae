from datetime import datetime, timedelta

import pytest

from gomono.repository import MemoryTrainingRepository, NotFoundError
from gomono.training import NoRescheduleRequestedError, Training
from gomono.user import ForbiddenToSeeTrainingError, UserType, new_user

ATTENDEE = new_user("attendee-1", UserType.ATTENDEE)
OTHER_ATTENDEE = new_user("attendee-2", UserType.ATTENDEE)
TRAINER = new_user("trainer-1", UserType.TRAINER)


def _training(training_uuid, user_uuid="attendee-1", days=5):
    when = datetime.now().replace(microsecond=0) + timedelta(days=days)
    return Training(training_uuid, user_uuid, "user name", when)


@pytest.fixture
def repo():
    return MemoryTrainingRepository()


def test_add_and_get_round_trip(repo):
    tr = _training("t-1")
    repo.add_training(tr)

    stored = repo.get_training("t-1", ATTENDEE)
    assert stored.uuid == tr.uuid
    assert stored.user_uuid == tr.user_uuid
    assert stored.time == tr.time


def test_add_duplicate_raises(repo):
    repo.add_training(_training("t-1"))
    with pytest.raises(ValueError):
        repo.add_training(_training("t-1"))


def test_get_missing_raises_not_found(repo):
    with pytest.raises(NotFoundError) as excinfo:
        repo.get_training("missing", TRAINER)
    assert str(excinfo.value) == "training 'missing' not found"
    assert excinfo.value.training_uuid == "missing"


def test_get_forbidden_for_other_attendee(repo):
    repo.add_training(_training("t-1"))
    with pytest.raises(ForbiddenToSeeTrainingError):
        repo.get_training("t-1", OTHER_ATTENDEE)


def test_trainer_sees_any_training(repo):
    repo.add_training(_training("t-1"))
    assert repo.get_training("t-1", TRAINER).user_uuid == "attendee-1"


def test_returned_training_is_a_copy(repo):
    repo.add_training(_training("t-1"))
    fetched = repo.get_training("t-1", ATTENDEE)
    fetched.update_notes("changed")
    assert repo.get_training("t-1", ATTENDEE).notes == ""


def test_update_training_stores_result(repo):
    repo.add_training(_training("t-1"))

    def update(tr):
        tr.update_notes("new notes")
        return tr

    repo.update_training("t-1", ATTENDEE, update)
    assert repo.get_training("t-1", ATTENDEE).notes == "new notes"


def test_update_training_failure_leaves_state(repo):
    repo.add_training(_training("t-1"))

    def update(tr):
        tr.update_notes("partial")
        tr.reject_reschedule()
        return tr

    with pytest.raises(NoRescheduleRequestedError):
        repo.update_training("t-1", ATTENDEE, update)
    assert repo.get_training("t-1", ATTENDEE).notes == ""


def test_update_missing_raises_not_found(repo):
    with pytest.raises(NotFoundError):
        repo.update_training("missing", TRAINER, lambda tr: tr)


def test_update_forbidden(repo):
    repo.add_training(_training("t-1"))
    with pytest.raises(ForbiddenToSeeTrainingError):
        repo.update_training("t-1", OTHER_ATTENDEE, lambda tr: tr)


def test_all_training_sorted_and_skips_canceled(repo):
    repo.add_training(_training("late", days=9))
    repo.add_training(_training("early", days=3))
    repo.add_training(_training("gone", days=4))

    def cancel(tr):
        tr.cancel()
        return tr

    repo.update_training("gone", TRAINER, cancel)

    models = repo.all_training()
    assert [m.uuid for m in models] == ["early", "late"]
    assert all(m.can_be_cancelled for m in models)


def test_model_carries_proposal(repo):
    repo.add_training(_training("t-1"))
    proposed = datetime.now().replace(microsecond=0) + timedelta(days=8)

    def propose(tr):
        tr.propose_reschedule(proposed, UserType.TRAINER)
        return tr

    repo.update_training("t-1", TRAINER, propose)
    (model,) = repo.all_training()
    assert model.proposed_time == proposed
    assert model.move_proposed_by == "trainer"
    assert model.user == "user name"


def test_find_training_for_user(repo):
    repo.add_training(_training("mine", user_uuid="attendee-1"))
    repo.add_training(_training("theirs", user_uuid="attendee-2"))

    models = repo.find_training_for_user("attendee-1")
    assert [m.uuid for m in models] == ["mine"]
    assert repo.find_training_for_user("nobody") == []


def test_remove_all_training(repo):
    repo.add_training(_training("t-1"))
    repo.add_training(_training("t-2"))
    repo.remove_all_training()

    assert repo.all_training() == []
    with pytest.raises(NotFoundError):
        repo.get_training("t-1", TRAINER)