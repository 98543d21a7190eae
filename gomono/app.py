"""The application layer: every command and query handler, wired together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from gomono.commands import (
    new_approve_training_reschedule_handler,
    new_cancel_training_handler,
    new_reject_training_reschedule_handler,
    new_request_training_reschedule_handler,
    new_reschedule_training_handler,
    new_schedule_training_handler,
)
from gomono.decorator import CommandLoggingDecorator, QueryLoggingDecorator
from gomono.queries import new_all_training_handler, new_training_for_user_handler
from gomono.repository import TrainingRepository
from gomono.services import TrainerService, TrainerServiceMock, UserService, UserServiceMock


@dataclass(frozen=True)
class Commands:
    """The handlers of all commands."""

    approve_training_reschedule: CommandLoggingDecorator[Any]
    cancel_training: CommandLoggingDecorator[Any]
    reject_training_reschedule: CommandLoggingDecorator[Any]
    reschedule_training: CommandLoggingDecorator[Any]
    request_training_reschedule: CommandLoggingDecorator[Any]
    schedule_training: CommandLoggingDecorator[Any]


@dataclass(frozen=True)
class Queries:
    """The handlers of all queries."""

    all_training: QueryLoggingDecorator[Any, Any]
    training_for_user: QueryLoggingDecorator[Any, Any]


@dataclass(frozen=True)
class Application:
    """Commands and queries of the training application."""

    commands: Commands
    queries: Queries


def new_application(
    repo: TrainingRepository,
    trainer_service: TrainerService,
    user_service: UserService,
) -> Application:
    """Wire every handler to the given repository and services."""
    logger = logging.LoggerAdapter(logging.getLogger("gomono"), {"layer": "application"})
    return Application(
        commands=Commands(
            approve_training_reschedule=new_approve_training_reschedule_handler(
                repo, user_service, trainer_service, logger
            ),
            cancel_training=new_cancel_training_handler(
                repo, user_service, trainer_service, logger
            ),
            reject_training_reschedule=new_reject_training_reschedule_handler(repo, logger),
            reschedule_training=new_reschedule_training_handler(
                repo, user_service, trainer_service, logger
            ),
            request_training_reschedule=new_request_training_reschedule_handler(repo, logger),
            schedule_training=new_schedule_training_handler(
                repo, user_service, trainer_service, logger
            ),
        ),
        queries=Queries(
            all_training=new_all_training_handler(repo, logger),
            training_for_user=new_training_for_user_handler(repo, logger),
        ),
    )


def new_component_test_application(repo: TrainingRepository) -> Application:
    """An application whose outside services accept everything, for component tests."""
    return new_application(repo, TrainerServiceMock(), UserServiceMock())