"""Users as seen by the training domain, and who may see which training."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class UserType(Enum):
    """The role of a user in a training."""

    TRAINER = "trainer"
    ATTENDEE = "attendee"

    def __str__(self) -> str:
        return self.value


class IncorrectInputError(ValueError):
    """Raised for a role name that is not a known user type."""

    def __init__(self, user_type: str) -> None:
        super().__init__(f"invalid '{user_type}' role")
        self.user_type = user_type


def user_type_from_string(user_type: str) -> UserType:
    """Convert a role name to a UserType; raises IncorrectInputError if unknown."""
    try:
        return UserType(user_type)
    except ValueError:
        raise IncorrectInputError(user_type) from None


@dataclass(frozen=True)
class User:
    """A user of the training domain: an identifier and a role."""

    uuid: str = ""
    type: Optional[UserType] = None

    def is_empty(self) -> bool:
        return self == User()


def new_user(user_uuid: str, user_type: Optional[UserType]) -> User:
    """Create a User; both the identifier and the type are required."""
    if not user_uuid:
        raise ValueError("missing user UUID")
    if user_type is None:
        raise ValueError("missing user type")
    return User(uuid=user_uuid, type=user_type)


class ForbiddenToSeeTrainingError(PermissionError):
    """Raised when a user asks for someone else's training."""

    def __init__(self, requesting_user_uuid: str, training_owner_uuid: str) -> None:
        super().__init__(
            f"user '{requesting_user_uuid}' can't see user '{training_owner_uuid}' training"
        )
        self.requesting_user_uuid = requesting_user_uuid
        self.training_owner_uuid = training_owner_uuid


def can_user_see_training(user: User, training: Any) -> None:
    """Trainers see every training, attendees only their own; raise otherwise."""
    if user.type is UserType.TRAINER:
        return
    if user.uuid == training.user_uuid:
        return
    raise ForbiddenToSeeTrainingError(user.uuid, training.user_uuid)