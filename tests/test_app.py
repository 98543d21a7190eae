from datetime import datetime, timedelta

import pytest

from gomono.app import new_application, new_component_test_application
from gomono.commands import CancelTraining, ScheduleTraining
from gomono.queries import AllTraining, TrainingForUser
from gomono.repository import MemoryTrainingRepository
from gomono.services import TrainerServiceMock, UserServiceMock
from gomono.user import UserType, new_user


def _future(days):
    return (datetime.now() + timedelta(days=days)).replace(microsecond=0)


def test_component_application_schedules_and_lists():
    app = new_component_test_application(MemoryTrainingRepository())
    when = _future(5)
    app.commands.schedule_training.handle(ScheduleTraining("t-1", "u-1", "alice", when))
    result = app.queries.all_training.handle(AllTraining())
    assert [(tr.uuid, tr.time) for tr in result] == [("t-1", when)]
    assert [tr.uuid for tr in app.queries.training_for_user.handle(TrainingForUser("u-1"))] == ["t-1"]


def test_application_uses_given_services():
    trainer = TrainerServiceMock()
    users = UserServiceMock()
    app = new_application(MemoryTrainingRepository(), trainer, users)
    when = _future(5)
    app.commands.schedule_training.handle(ScheduleTraining("t-1", "u-1", "alice", when))
    assert users.calls == [("update_training_balance", "u-1", -1)]
    assert trainer.calls == [("schedule_training", when)]


def test_application_cancel_gives_training_back():
    trainer = TrainerServiceMock()
    users = UserServiceMock()
    app = new_application(MemoryTrainingRepository(), trainer, users)
    when = _future(5)
    app.commands.schedule_training.handle(ScheduleTraining("t-1", "u-1", "alice", when))
    attendee = new_user("u-1", UserType.ATTENDEE)
    app.commands.cancel_training.handle(CancelTraining("t-1", attendee))
    assert users.calls[-1] == ("update_training_balance", "u-1", 1)
    assert trainer.calls[-1] == ("cancel_training", when)
    assert app.queries.all_training.handle(AllTraining()) == []


def test_application_requires_services():
    with pytest.raises(ValueError, match="nil trainerService"):
        new_application(MemoryTrainingRepository(), None, UserServiceMock())
    with pytest.raises(ValueError, match="nil repo"):
        new_application(None, TrainerServiceMock(), UserServiceMock())