"""The training aggregate: scheduling, notes, cancellation and rescheduling."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from gomono.user import UserType

MAX_NOTES_BYTES = 1000
FREE_CANCELLATION_WINDOW = timedelta(hours=24)


class TrainingError(Exception):
    """Base class for business-rule violations on a training."""


class TrainingAlreadyCanceledError(TrainingError):
    """Raised when canceling a training that is already canceled."""

    def __init__(self) -> None:
        super().__init__("training is already canceled")


class NoteTooLongError(TrainingError, ValueError):
    """Raised when notes exceed the allowed length."""

    def __init__(self) -> None:
        super().__init__("Note too long")


class CantRescheduleBeforeTimeError(TrainingError):
    """Raised when rescheduling with less than a day left before the training."""

    def __init__(self, training_time: datetime) -> None:
        super().__init__(
            "can't reschedule training, not enough time before, "
            f"training time: {training_time}"
        )
        self.training_time = training_time


class NoRescheduleRequestedError(TrainingError):
    """Raised when approving or rejecting a reschedule nobody proposed."""

    def __init__(self) -> None:
        super().__init__("no training reschedule was requested yet")


class SameUserTypeApprovalError(TrainingError):
    """Raised when the proposer of a reschedule tries to approve it too."""

    def __init__(self, user_type: UserType) -> None:
        super().__init__(
            "trying to approve reschedule by the same user type which proposed "
            f"reschedule ({user_type})"
        )
        self.user_type = user_type


def _now_like(moment: datetime) -> datetime:
    """The current time, aware or naive to match moment."""
    if moment.tzinfo is not None:
        return datetime.now(moment.tzinfo)
    return datetime.now()


class Training:
    """A scheduled training between an attendee and a trainer."""

    def __init__(
        self,
        uuid: str,
        user_uuid: str,
        user_name: str,
        time: Optional[datetime],
    ) -> None:
        if not uuid:
            raise ValueError("empty training uuid")
        if not user_uuid:
            raise ValueError("empty userUUID")
        if not user_name:
            raise ValueError("empty userName")
        if time is None:
            raise ValueError("zero training time")

        self._uuid = uuid
        self._user_uuid = user_uuid
        self._user_name = user_name
        self._time = time
        self._notes = ""
        self._proposed_new_time: Optional[datetime] = None
        self._move_proposed_by: Optional[UserType] = None
        self._canceled = False

    def __repr__(self) -> str:
        return (
            f"Training(uuid={self._uuid!r}, user_uuid={self._user_uuid!r}, "
            f"user_name={self._user_name!r}, time={self._time!r}, "
            f"notes={self._notes!r}, proposed_new_time={self._proposed_new_time!r}, "
            f"move_proposed_by={self._move_proposed_by!r}, canceled={self._canceled!r})"
        )

    @property
    def uuid(self) -> str:
        return self._uuid

    @property
    def user_uuid(self) -> str:
        return self._user_uuid

    @property
    def user_name(self) -> str:
        return self._user_name

    @property
    def time(self) -> datetime:
        return self._time

    @property
    def notes(self) -> str:
        return self._notes

    @property
    def proposed_new_time(self) -> Optional[datetime]:
        return self._proposed_new_time

    @property
    def move_proposed_by(self) -> Optional[UserType]:
        return self._move_proposed_by

    @property
    def is_canceled(self) -> bool:
        return self._canceled

    def update_notes(self, notes: str) -> None:
        """Replace the notes; raises NoteTooLongError above 1000 bytes of UTF-8."""
        if len(notes.encode("utf-8")) > MAX_NOTES_BYTES:
            raise NoteTooLongError()
        self._notes = notes

    def can_be_canceled_for_free(self) -> bool:
        """True while at least 24 hours remain before the training."""
        return self._time - _now_like(self._time) >= FREE_CANCELLATION_WINDOW

    def cancel(self) -> None:
        """Mark the training canceled; raises if it already is."""
        if self._canceled:
            raise TrainingAlreadyCanceledError()
        self._canceled = True

    def reschedule_training(self, new_time: datetime) -> None:
        """Move the training directly; only allowed while it can be canceled for free."""
        if not self.can_be_canceled_for_free():
            raise CantRescheduleBeforeTimeError(self._time)
        self._time = new_time

    def propose_reschedule(self, new_time: datetime, proposer_type: UserType) -> None:
        """Record a proposal to move the training, to be approved by the other side."""
        self._move_proposed_by = proposer_type
        self._proposed_new_time = new_time

    def is_reschedule_proposed(self) -> bool:
        return self._move_proposed_by is not None and self._proposed_new_time is not None

    def approve_reschedule(self, user_type: UserType) -> None:
        """Accept the pending proposal; the proposer's own side may not approve it."""
        if not self.is_reschedule_proposed():
            raise NoRescheduleRequestedError()
        if self._move_proposed_by == user_type:
            raise SameUserTypeApprovalError(user_type)
        assert self._proposed_new_time is not None
        self._time = self._proposed_new_time
        self._clear_proposal()

    def reject_reschedule(self) -> None:
        """Drop the pending proposal."""
        if not self.is_reschedule_proposed():
            raise NoRescheduleRequestedError()
        self._clear_proposal()

    def _clear_proposal(self) -> None:
        self._proposed_new_time = None
        self._move_proposed_by = None


def unmarshal_training_from_database(
    uuid: str,
    user_uuid: str,
    user_name: str,
    training_time: Optional[datetime],
    notes: str,
    canceled: bool,
    proposed_new_time: Optional[datetime],
    move_proposed_by: Optional[UserType],
) -> Training:
    """Rebuild a Training from stored state; meant for repositories only."""
    training = Training(uuid, user_uuid, user_name, training_time)
    training._notes = notes
    training._proposed_new_time = proposed_new_time
    training._move_proposed_by = move_proposed_by
    training._canceled = canceled
    return training


def cancel_balance_delta(training: Training, canceling_user_type: UserType) -> int:
    """Training balance change owed to the attendee after a cancellation."""
    if training.can_be_canceled_for_free():
        return 1
    if canceling_user_type is UserType.TRAINER:
        # The training back plus one as a fine for a late cancellation by the trainer.
        return 2
    if canceling_user_type is UserType.ATTENDEE:
        # A late cancellation by the attendee forfeits the training.
        return 0
    raise ValueError(f"not supported user type {canceling_user_type}")