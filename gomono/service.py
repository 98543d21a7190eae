"""The training service as exposed to remote callers."""

from __future__ import annotations

import uuid as uuid_lib
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from gomono.app import Application
from gomono.commands import (
    ApproveTrainingReschedule,
    CancelTraining,
    RejectTrainingReschedule,
    RequestTrainingReschedule,
    RescheduleTraining,
    ScheduleTraining,
)
from gomono.model import TrainingModel
from gomono.queries import AllTraining
from gomono.user import User, new_user, user_type_from_string


@dataclass(frozen=True)
class TrainingResponse:
    """One training as returned to callers."""

    uuid: str
    user_uuid: str
    user: str
    time: datetime
    notes: str
    proposed_time: Optional[datetime]
    move_proposed_by: Optional[str]
    can_be_cancelled: bool
    move_requires_accept: bool


def training_to_response(trainings: Iterable[TrainingModel]) -> list[TrainingResponse]:
    """Convert read models to responses."""
    return [
        TrainingResponse(
            uuid=tm.uuid,
            user_uuid=tm.user_uuid,
            user=tm.user,
            time=tm.time,
            notes=tm.notes,
            proposed_time=tm.proposed_time,
            move_proposed_by=tm.move_proposed_by,
            can_be_cancelled=tm.can_be_cancelled,
            move_requires_accept=tm.can_be_cancelled,
        )
        for tm in trainings
    ]


@dataclass
class TrainingService:
    """Turns requests into application commands and queries on behalf of one caller."""

    app: Application
    user_uuid: str = "user.UUID"
    user_name: str = "user.DisplayName"
    user_role: str = "user.Role"

    def _domain_user(self) -> User:
        return new_user(self.user_uuid, user_type_from_string(self.user_role))

    def get_training(self) -> list[TrainingResponse]:
        """Every training."""
        return training_to_response(self.app.queries.all_training.handle(AllTraining()))

    def create_training(self, time: Optional[datetime], notes: str) -> str:
        """Schedule a training for the caller and return its new identifier."""
        cmd = ScheduleTraining(
            training_uuid=str(uuid_lib.uuid4()),
            user_uuid=self.user_uuid,
            user_name=self.user_name,
            training_time=time,
            notes=notes,
        )
        self.app.commands.schedule_training.handle(cmd)
        return cmd.training_uuid

    def cancel_training(self, training_uuid: str) -> None:
        """Cancel a training; does nothing when the caller cannot be identified."""
        try:
            user = self._domain_user()
        except ValueError:
            return
        self.app.commands.cancel_training.handle(CancelTraining(training_uuid, user))

    def reschedule_training(self, training_uuid: str, time: datetime, notes: str) -> None:
        """Move a training directly."""
        user = self._domain_user()
        self.app.commands.reschedule_training.handle(
            RescheduleTraining(
                training_uuid=training_uuid, new_time=time, user=user, new_notes=notes
            )
        )

    def request_reschedule_training(self, training_uuid: str, time: datetime, notes: str) -> None:
        """Propose moving a training."""
        user = self._domain_user()
        self.app.commands.request_training_reschedule.handle(
            RequestTrainingReschedule(
                training_uuid=training_uuid, new_time=time, user=user, new_notes=notes
            )
        )

    def approve_reschedule_training(self, training_uuid: str) -> None:
        """Accept a pending reschedule proposal."""
        user = self._domain_user()
        self.app.commands.approve_training_reschedule.handle(
            ApproveTrainingReschedule(training_uuid=training_uuid, user=user)
        )

    def reject_reschedule_training(self, training_uuid: str) -> None:
        """Turn down a pending reschedule proposal."""
        user = self._domain_user()
        self.app.commands.reject_training_reschedule.handle(
            RejectTrainingReschedule(training_uuid=training_uuid, user=user)
        )