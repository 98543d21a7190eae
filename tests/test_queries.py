from datetime import datetime, timedelta

import pytest

from gomono.queries import (
    AllTraining,
    TrainingForUser,
    new_all_training_handler,
    new_training_for_user_handler,
)
from gomono.repository import MemoryTrainingRepository
from gomono.training import Training


def _future(days):
    return (datetime.now() + timedelta(days=days)).replace(microsecond=0)


@pytest.fixture
def repo():
    repository = MemoryTrainingRepository()
    repository.add_training(Training("t-2", "u-1", "alice", _future(6)))
    repository.add_training(Training("t-1", "u-1", "alice", _future(5)))
    repository.add_training(Training("t-3", "u-2", "bob", _future(7)))
    return repository


class _FailingReadModel:
    def all_training(self):
        raise RuntimeError("storage down")

    def find_training_for_user(self, user_uuid):
        raise RuntimeError("storage down")


def test_all_training_returns_every_training_in_time_order(repo):
    handler = new_all_training_handler(repo, None)
    result = handler.handle(AllTraining())
    assert [tr.uuid for tr in result] == ["t-1", "t-2", "t-3"]


def test_training_for_user_filters_by_user(repo):
    handler = new_training_for_user_handler(repo, None)
    result = handler.handle(TrainingForUser(uuid="u-1"))
    assert [tr.uuid for tr in result] == ["t-1", "t-2"]
    assert all(tr.user_uuid == "u-1" for tr in result)


def test_training_for_unknown_user_is_empty(repo):
    handler = new_training_for_user_handler(repo, None)
    assert handler.handle(TrainingForUser(uuid="nobody")) == []


def test_nil_read_model_rejected():
    with pytest.raises(ValueError, match="nil readModel"):
        new_all_training_handler(None, None)
    with pytest.raises(ValueError, match="nil readModel"):
        new_training_for_user_handler(None, None)


def test_errors_from_read_model_propagate():
    with pytest.raises(RuntimeError, match="storage down"):
        new_all_training_handler(_FailingReadModel(), None).handle(AllTraining())
    with pytest.raises(RuntimeError, match="storage down"):
        new_training_for_user_handler(_FailingReadModel(), None).handle(TrainingForUser("u"))