"""Habit services: CRUD and counts."""

from __future__ import annotations

import logging
from datetime import date
from typing import List

from goalsmanager.core.errors import NotFoundError
from goalsmanager.core.users.models import User
from goalsmanager.core.users.services import require_user
from goalsmanager.core.utils.validation import (
    apply_fields,
    optional_text,
    require_text,
    validate_date_order,
)
from goalsmanager.domains.goals.models.goal_models import Goal
from goalsmanager.domains.goals.services.goal_service import require_goal
from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.domains.habits.services.schedule import unknown_day_tokens
from goalsmanager.extensions import db

logger = logging.getLogger(__name__)


def create_habit(
    *,
    name: str,
    start_date: date,
    end_date: date,
    goal_id: int,
    user_id: int,
    description: str | None = None,
    days_of_week: str | None = None,
    color: str | None = None,
) -> Habit:
    goal = db.session.get(Goal, goal_id)
    if not goal:
        raise NotFoundError.for_entity("Goal", goal_id)
    user = db.session.get(User, user_id)
    if not user:
        raise NotFoundError.for_entity("User", user_id)
    name_norm = require_text(name, "Name")
    validate_date_order(start_date, end_date)
    _warn_unknown_days(days_of_week)

    habit = Habit(
        name=name_norm,
        description=optional_text(description),
        days_of_week=optional_text(days_of_week),
        start_date=start_date,
        end_date=end_date,
        streak_status=0,
        color=optional_text(color),
        goal=goal,
        user=user,
    )
    db.session.add(habit)
    db.session.commit()
    return habit


def get_habit(habit_id: int) -> Habit:
    habit = db.session.get(Habit, habit_id)
    if not habit:
        raise NotFoundError.for_entity("Habit", habit_id)
    return habit


def require_habit(habit_id: int) -> None:
    if not habit_exists(habit_id):
        raise NotFoundError.for_entity("Habit", habit_id)


def habit_exists(habit_id: int) -> bool:
    return db.session.query(Habit.id).filter_by(id=habit_id).first() is not None


def list_habits() -> List[Habit]:
    return Habit.query.order_by(Habit.id.asc()).all()


def list_habits_for_user(user_id: int) -> List[Habit]:
    require_user(user_id)
    return Habit.query.filter_by(user_id=user_id).order_by(Habit.id.asc()).all()


def list_habits_for_goal(goal_id: int) -> List[Habit]:
    require_goal(goal_id)
    return Habit.query.filter_by(goal_id=goal_id).order_by(Habit.id.asc()).all()


def update_habit(habit_id: int, **fields) -> Habit:
    """Partial update. ``streak_status`` is only ever written by the streak calculator."""
    habit = get_habit(habit_id)
    if "name" in fields and fields["name"] is not None:
        fields["name"] = require_text(fields["name"], "Name")
    if fields.get("days_of_week") is not None:
        _warn_unknown_days(fields["days_of_week"])
    apply_fields(
        habit,
        fields,
        (
            "name",
            "description",
            "days_of_week",
            "start_date",
            "end_date",
            "color",
        ),
    )
    try:
        validate_date_order(habit.start_date, habit.end_date)
    except ValueError:
        db.session.rollback()
        raise
    db.session.commit()
    return habit


def delete_habit(habit_id: int) -> None:
    """Delete a habit and every task generated from it."""
    habit = get_habit(habit_id)
    db.session.delete(habit)
    db.session.commit()


def count_habits_for_user(user_id: int) -> int:
    return Habit.query.filter_by(user_id=user_id).count()


def count_habits_for_goal(goal_id: int) -> int:
    return Habit.query.filter_by(goal_id=goal_id).count()


def _warn_unknown_days(days_of_week: str | None) -> None:
    unknown = unknown_day_tokens(days_of_week)
    if unknown:
        # Unknown tokens are kept in the stored text but never scheduled.
        logger.warning("Ignoring unrecognized weekday tokens %s in %r", unknown, days_of_week)
