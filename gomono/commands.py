"""Commands that change trainings, and the handlers that carry them out."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from gomono.decorator import CommandLoggingDecorator, LoggerLike, apply_command_decorators
from gomono.repository import TrainingRepository
from gomono.services import TrainerService, UserService
from gomono.training import Training, cancel_balance_delta
from gomono.user import User


def _wrap(message: str, err: Exception) -> RuntimeError:
    wrapped = RuntimeError(f"{message}: {err}")
    wrapped.__cause__ = err
    return wrapped


def _require(value: Any, message: str) -> None:
    if value is None:
        raise ValueError(message)


@dataclass(frozen=True)
class ApproveTrainingReschedule:
    training_uuid: str
    user: User


@dataclass(frozen=True)
class CancelTraining:
    training_uuid: str
    user: User


@dataclass(frozen=True)
class RejectTrainingReschedule:
    training_uuid: str
    user: User


@dataclass(frozen=True)
class RequestTrainingReschedule:
    training_uuid: str
    new_time: datetime
    user: User
    new_notes: str = ""


@dataclass(frozen=True)
class RescheduleTraining:
    training_uuid: str
    new_time: datetime
    user: User
    new_notes: str = ""


@dataclass(frozen=True)
class ScheduleTraining:
    training_uuid: str
    user_uuid: str
    user_name: str
    training_time: Optional[datetime]
    notes: str = ""


@dataclass
class ApproveTrainingRescheduleHandler:
    repo: TrainingRepository
    user_service: UserService
    trainer_service: TrainerService

    def handle(self, cmd: ApproveTrainingReschedule) -> None:
        def update(tr: Training) -> Training:
            original_training_time = tr.time
            tr.approve_reschedule(cmd.user.type)
            self.trainer_service.move_training(tr.time, original_training_time)
            return tr

        self.repo.update_training(cmd.training_uuid, cmd.user, update)


@dataclass
class CancelTrainingHandler:
    repo: TrainingRepository
    user_service: UserService
    trainer_service: TrainerService

    def handle(self, cmd: CancelTraining) -> None:
        def update(tr: Training) -> Training:
            tr.cancel()
            balance_delta = cancel_balance_delta(tr, cmd.user.type)
            if balance_delta != 0:
                try:
                    self.user_service.update_training_balance(tr.user_uuid, balance_delta)
                except Exception as err:
                    raise _wrap("unable to change training balance", err) from err
            try:
                self.trainer_service.cancel_training(tr.time)
            except Exception as err:
                raise _wrap("unable to cancel training", err) from err
            return tr

        self.repo.update_training(cmd.training_uuid, cmd.user, update)


@dataclass
class RejectTrainingRescheduleHandler:
    repo: TrainingRepository

    def handle(self, cmd: RejectTrainingReschedule) -> None:
        def update(tr: Training) -> Training:
            tr.reject_reschedule()
            return tr

        self.repo.update_training(cmd.training_uuid, cmd.user, update)


@dataclass
class RequestTrainingRescheduleHandler:
    repo: TrainingRepository

    def handle(self, cmd: RequestTrainingReschedule) -> None:
        def update(tr: Training) -> Training:
            tr.update_notes(cmd.new_notes)
            tr.propose_reschedule(cmd.new_time, cmd.user.type)
            return tr

        self.repo.update_training(cmd.training_uuid, cmd.user, update)


@dataclass
class RescheduleTrainingHandler:
    repo: TrainingRepository
    user_service: UserService
    trainer_service: TrainerService

    def handle(self, cmd: RescheduleTraining) -> None:
        def update(tr: Training) -> Training:
            original_training_time = tr.time
            tr.update_notes(cmd.new_notes)
            tr.reschedule_training(cmd.new_time)
            self.trainer_service.move_training(cmd.new_time, original_training_time)
            return tr

        self.repo.update_training(cmd.training_uuid, cmd.user, update)


@dataclass
class ScheduleTrainingHandler:
    repo: TrainingRepository
    user_service: UserService
    trainer_service: TrainerService

    def handle(self, cmd: ScheduleTraining) -> None:
        tr = Training(cmd.training_uuid, cmd.user_uuid, cmd.user_name, cmd.training_time)
        self.repo.add_training(tr)
        try:
            self.user_service.update_training_balance(tr.user_uuid, -1)
        except Exception as err:
            raise _wrap("unable to change training balance", err) from err
        try:
            self.trainer_service.schedule_training(tr.time)
        except Exception as err:
            raise _wrap("unable to schedule training", err) from err


def new_approve_training_reschedule_handler(
    repo: TrainingRepository,
    user_service: UserService,
    trainer_service: TrainerService,
    logger: Optional[LoggerLike],
) -> CommandLoggingDecorator[ApproveTrainingReschedule]:
    _require(repo, "nil repo")
    _require(user_service, "nil userService")
    _require(trainer_service, "nil trainerService")
    return apply_command_decorators(
        ApproveTrainingRescheduleHandler(repo, user_service, trainer_service), logger
    )


def new_cancel_training_handler(
    repo: TrainingRepository,
    user_service: UserService,
    trainer_service: TrainerService,
    logger: Optional[LoggerLike],
) -> CommandLoggingDecorator[CancelTraining]:
    _require(repo, "nil repo")
    _require(user_service, "nil user service")
    _require(trainer_service, "nil trainer service")
    return apply_command_decorators(
        CancelTrainingHandler(repo, user_service, trainer_service), logger
    )


def new_reject_training_reschedule_handler(
    repo: TrainingRepository, logger: Optional[LoggerLike]
) -> CommandLoggingDecorator[RejectTrainingReschedule]:
    _require(repo, "nil repo service")
    return apply_command_decorators(RejectTrainingRescheduleHandler(repo), logger)


def new_request_training_reschedule_handler(
    repo: TrainingRepository, logger: Optional[LoggerLike]
) -> CommandLoggingDecorator[RequestTrainingReschedule]:
    _require(repo, "nil repo service")
    return apply_command_decorators(RequestTrainingRescheduleHandler(repo), logger)


def new_reschedule_training_handler(
    repo: TrainingRepository,
    user_service: UserService,
    trainer_service: TrainerService,
    logger: Optional[LoggerLike],
) -> CommandLoggingDecorator[RescheduleTraining]:
    _require(repo, "nil repo")
    _require(user_service, "nil userService")
    _require(trainer_service, "nil trainerService")
    return apply_command_decorators(
        RescheduleTrainingHandler(repo, user_service, trainer_service), logger
    )


def new_schedule_training_handler(
    repo: TrainingRepository,
    user_service: UserService,
    trainer_service: TrainerService,
    logger: Optional[LoggerLike],
) -> CommandLoggingDecorator[ScheduleTraining]:
    _require(repo, "nil repo")
    _require(user_service, "nil repo")
    _require(trainer_service, "nil trainerService")
    return apply_command_decorators(
        ScheduleTrainingHandler(repo, user_service, trainer_service), logger
    )