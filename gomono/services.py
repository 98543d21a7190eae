"""Services the training commands depend on, and do-nothing stand-ins for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Protocol, Tuple, runtime_checkable


@runtime_checkable
class UserService(Protocol):
    """Keeps track of how many trainings a user may still book."""

    def update_training_balance(self, user_id: str, amount_change: int) -> None:
        """Change the user's training balance by ``amount_change``."""


@runtime_checkable
class TrainerService(Protocol):
    """Keeps the trainer's schedule in step with trainings."""

    def schedule_training(self, training_time: datetime) -> None:
        """Book the trainer's hour at ``training_time``."""

    def cancel_training(self, training_time: datetime) -> None:
        """Free the trainer's hour at ``training_time``."""

    def move_training(self, new_time: datetime, original_training_time: datetime) -> None:
        """Move a booked hour from ``original_training_time`` to ``new_time``."""


@dataclass
class TrainerServiceMock:
    """A trainer service that accepts everything and records the calls."""

    calls: List[Tuple[Any, ...]] = field(default_factory=list)

    def schedule_training(self, training_time: datetime) -> None:
        self.calls.append(("schedule_training", training_time))

    def cancel_training(self, training_time: datetime) -> None:
        self.calls.append(("cancel_training", training_time))

    def move_training(self, new_time: datetime, original_training_time: datetime) -> None:
        self.calls.append(("move_training", new_time, original_training_time))


@dataclass
class UserServiceMock:
    """A user service that accepts everything and records the calls."""

    calls: List[Tuple[Any, ...]] = field(default_factory=list)

    def update_training_balance(self, user_id: str, amount_change: int) -> None:
        self.calls.append(("update_training_balance", user_id, amount_change))