"""Storage of trainings: the repository contract and an in-memory implementation."""

from __future__ import annotations

import copy
import threading
from typing import Callable, Protocol

from gomono.model import TrainingModel
from gomono.training import Training
from gomono.user import User, can_user_see_training

UpdateFn = Callable[[Training], Training]


class NotFoundError(LookupError):
    """Raised when no training with the given identifier is stored."""

    def __init__(self, training_uuid: str) -> None:
        super().__init__(f"training '{training_uuid}' not found")
        self.training_uuid = training_uuid


class TrainingRepository(Protocol):
    """What the application needs from a training store."""

    def add_training(self, training: Training) -> None: ...

    def get_training(self, training_uuid: str, user: User) -> Training: ...

    def update_training(self, training_uuid: str, user: User, update_fn: UpdateFn) -> None: ...

    def all_training(self) -> list[TrainingModel]: ...

    def find_training_for_user(self, user_uuid: str) -> list[TrainingModel]: ...


def _to_model(training: Training) -> TrainingModel:
    proposed_by = training.move_proposed_by
    return TrainingModel(
        uuid=training.uuid,
        user_uuid=training.user_uuid,
        user=training.user_name,
        time=training.time,
        notes=training.notes,
        proposed_time=training.proposed_new_time,
        move_proposed_by=str(proposed_by) if proposed_by is not None else None,
        can_be_cancelled=training.can_be_canceled_for_free(),
    )


class MemoryTrainingRepository:
    """A thread-safe training store kept in memory."""

    def __init__(self) -> None:
        self._trainings: dict[str, Training] = {}
        self._lock = threading.Lock()

    def add_training(self, training: Training) -> None:
        """Store a new training; raises ValueError if its identifier is taken."""
        with self._lock:
            if training.uuid in self._trainings:
                raise ValueError(f"training '{training.uuid}' already exists")
            self._trainings[training.uuid] = copy.deepcopy(training)

    def get_training(self, training_uuid: str, user: User) -> Training:
        """Return a copy of the training, if the user may see it."""
        with self._lock:
            return self._load(training_uuid, user)

    def update_training(self, training_uuid: str, user: User, update_fn: UpdateFn) -> None:
        """Apply update_fn to a copy of the training and store its result.

        If update_fn raises, the stored training is left unchanged.
        """
        with self._lock:
            training = self._load(training_uuid, user)
            updated = update_fn(training)
            self._trainings[training_uuid] = copy.deepcopy(updated)

    def all_training(self) -> list[TrainingModel]:
        """Every training not canceled, earliest first."""
        with self._lock:
            return self._models(lambda _: True)

    def find_training_for_user(self, user_uuid: str) -> list[TrainingModel]:
        """The user's trainings not canceled, earliest first."""
        with self._lock:
            return self._models(lambda tr: tr.user_uuid == user_uuid)

    def remove_all_training(self) -> None:
        """Delete everything; meant for cleaning up between tests."""
        with self._lock:
            self._trainings.clear()

    def _load(self, training_uuid: str, user: User) -> Training:
        try:
            training = self._trainings[training_uuid]
        except KeyError:
            raise NotFoundError(training_uuid) from None
        can_user_see_training(user, training)
        return copy.deepcopy(training)

    def _models(self, keep: Callable[[Training], bool]) -> list[TrainingModel]:
        selected = (
            tr for tr in self._trainings.values() if not tr.is_canceled and keep(tr)
        )
        return [_to_model(tr) for tr in sorted(selected, key=lambda tr: tr.time)]