"""Queries that read trainings, and the handlers that answer them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from gomono.decorator import LoggerLike, QueryLoggingDecorator, apply_query_decorators
from gomono.model import TrainingModel


class _AllTrainingReadModel(Protocol):
    def all_training(self) -> list[TrainingModel]: ...


class _TrainingForUserReadModel(Protocol):
    def find_training_for_user(self, user_uuid: str) -> list[TrainingModel]: ...


@dataclass(frozen=True)
class AllTraining:
    """Ask for every training."""


@dataclass(frozen=True)
class TrainingForUser:
    """Ask for the trainings of one user."""

    uuid: str


@dataclass
class AllTrainingHandler:
    """Answers AllTraining from a read model."""

    read_model: _AllTrainingReadModel

    def handle(self, query: AllTraining) -> list[TrainingModel]:
        return self.read_model.all_training()


@dataclass
class TrainingForUserHandler:
    """Answers TrainingForUser from a read model."""

    read_model: _TrainingForUserReadModel

    def handle(self, query: TrainingForUser) -> list[TrainingModel]:
        return self.read_model.find_training_for_user(query.uuid)


def new_all_training_handler(
    read_model: Optional[_AllTrainingReadModel], logger: Optional[LoggerLike]
) -> QueryLoggingDecorator[AllTraining, list[TrainingModel]]:
    """Build a logged AllTraining handler; raises ValueError without a read model."""
    if read_model is None:
        raise ValueError("nil readModel")
    return apply_query_decorators(AllTrainingHandler(read_model), logger)


def new_training_for_user_handler(
    read_model: Optional[_TrainingForUserReadModel], logger: Optional[LoggerLike]
) -> QueryLoggingDecorator[TrainingForUser, list[TrainingModel]]:
    """Build a logged TrainingForUser handler; raises ValueError without a read model."""
    if read_model is None:
        raise ValueError("nil readModel")
    return apply_query_decorators(TrainingForUserHandler(read_model), logger)