import sys
from datetime import date
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from goalsmanager import create_app
from goalsmanager.core.users.models import User
from goalsmanager.domains.goals.models.goal_models import Goal, GoalStatus
from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.extensions import db

# Saturday after the Mon 2025-10-20 .. Fri 2025-10-24 week used throughout.
FIXED_TODAY = date(2025, 10, 25)


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app():
    """Per-test app bound to a fresh in-memory database with a pinned clock."""
    app = create_app("testing")
    app.extensions["clock"] = lambda: FIXED_TODAY
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    counter = {"n": 0}

    def _make(username: str | None = None, provider: str = "github") -> User:
        counter["n"] += 1
        username = username or f"user{counter['n']}"
        user = User(provider=provider, provider_id=f"{provider}-{username}", username=username)
        db.session.add(user)
        db.session.commit()
        return user

    return _make


@pytest.fixture()
def user(make_user):
    return make_user("alice")


@pytest.fixture()
def make_goal(app):
    def _make(user: User, **fields) -> Goal:
        goal = Goal(
            user_id=user.id,
            title=fields.pop("title", "Get fit"),
            start_date=fields.pop("start_date", date(2025, 10, 1)),
            end_date=fields.pop("end_date", date(2025, 12, 31)),
            status=fields.pop("status", GoalStatus.NOT_STARTED),
            **fields,
        )
        db.session.add(goal)
        db.session.commit()
        return goal

    return _make


@pytest.fixture()
def goal(user, make_goal):
    return make_goal(user)


@pytest.fixture()
def make_habit(app):
    def _make(goal: Goal, **fields) -> Habit:
        habit = Habit(
            goal_id=goal.id,
            user_id=goal.user_id,
            name=fields.pop("name", "Run"),
            days_of_week=fields.pop("days_of_week", "Mon,Wed,Fri"),
            start_date=fields.pop("start_date", date(2025, 10, 1)),
            end_date=fields.pop("end_date", date(2025, 12, 31)),
            streak_status=fields.pop("streak_status", 0),
            **fields,
        )
        db.session.add(habit)
        db.session.commit()
        return habit

    return _make


@pytest.fixture()
def habit(goal, make_habit):
    return make_habit(goal)


@pytest.fixture()
def today():
    return FIXED_TODAY
