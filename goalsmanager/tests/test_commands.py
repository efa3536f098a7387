"""Tests for the flask CLI commands."""

from datetime import date

import pytest

from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.domains.tasks.models.task_models import Task
from goalsmanager.extensions import db

pytestmark = pytest.mark.integration


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()


def test_generate_tasks(runner, habit):
    args = ["generate-tasks", "--user", str(habit.user_id), "--start", "2025-10-20", "--end", "2025-10-26"]
    result = runner.invoke(args=args)
    assert result.exit_code == 0, result.output
    assert "Created 3 tasks" in result.output

    again = runner.invoke(args=args)
    assert "Created 0 tasks" in again.output
    assert Task.query.count() == 3


def test_generate_tasks_unknown_user(runner):
    result = runner.invoke(args=["generate-tasks", "--user", "99", "--start", "2025-10-20", "--end", "2025-10-26"])
    assert result.exit_code != 0
    assert "User not found with id: 99" in result.output


def test_recompute_streaks(runner, habit):
    for day in (date(2025, 10, 22), date(2025, 10, 24)):
        db.session.add(Task(name="Run", date=day, completed=True, habit_id=habit.id, user_id=habit.user_id))
    db.session.commit()

    result = runner.invoke(args=["recompute-streaks", "--user", str(habit.user_id)])
    assert result.exit_code == 0, result.output
    db.session.expire_all()
    assert db.session.get(Habit, habit.id).streak_status == 2


def test_seed_demo_is_repeatable(runner):
    first = runner.invoke(args=["seed-demo"])
    second = runner.invoke(args=["seed-demo"])
    assert first.exit_code == 0, first.output
    assert second.exit_code == 0, second.output
    assert Habit.query.count() == 1
