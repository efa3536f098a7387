"""Goal service: CRUD, status transitions, and date-based views."""

from __future__ import annotations

from datetime import date
from typing import List

from goalsmanager.core.errors import NotFoundError
from goalsmanager.core.users.services import require_user
from goalsmanager.core.utils import clock
from goalsmanager.core.utils.validation import (
    apply_fields,
    optional_text,
    require_text,
    validate_date_order,
)
from goalsmanager.domains.goals.models.goal_models import Goal, GoalStatus
from goalsmanager.extensions import db

_OPEN_STATUSES = (GoalStatus.NOT_STARTED, GoalStatus.IN_PROGRESS)
_CLOSED_STATUSES = (GoalStatus.COMPLETED, GoalStatus.CANCELLED)


def create_goal(
    user_id: int,
    *,
    title: str,
    start_date: date,
    end_date: date,
    description: str | None = None,
    image_url: str | None = None,
    emoji: str | None = None,
    status: GoalStatus | None = None,
) -> Goal:
    require_user(user_id)
    title_norm = require_text(title, "Title")
    validate_date_order(start_date, end_date)

    goal = Goal(
        user_id=user_id,
        title=title_norm,
        description=optional_text(description),
        image_url=optional_text(image_url),
        emoji=optional_text(emoji),
        start_date=start_date,
        end_date=end_date,
        status=status or GoalStatus.NOT_STARTED,
    )
    db.session.add(goal)
    db.session.commit()
    return goal


def get_goal(goal_id: int) -> Goal:
    goal = db.session.get(Goal, goal_id)
    if not goal:
        raise NotFoundError.for_entity("Goal", goal_id)
    return goal


def require_goal(goal_id: int) -> None:
    if not goal_exists(goal_id):
        raise NotFoundError.for_entity("Goal", goal_id)


def goal_exists(goal_id: int) -> bool:
    return db.session.query(Goal.id).filter_by(id=goal_id).first() is not None


def list_goals() -> List[Goal]:
    return Goal.query.order_by(Goal.id.asc()).all()


def list_goals_for_user(user_id: int) -> List[Goal]:
    require_user(user_id)
    return Goal.query.filter_by(user_id=user_id).order_by(Goal.id.asc()).all()


def list_goals_for_user_by_status(user_id: int, status: GoalStatus) -> List[Goal]:
    require_user(user_id)
    return Goal.query.filter_by(user_id=user_id, status=status).order_by(Goal.id.asc()).all()


def list_goals_by_status(status: GoalStatus) -> List[Goal]:
    return Goal.query.filter_by(status=status).order_by(Goal.id.asc()).all()


def update_goal(goal_id: int, **fields) -> Goal:
    goal = get_goal(goal_id)
    if "title" in fields and fields["title"] is not None:
        fields["title"] = require_text(fields["title"], "Title")
    apply_fields(
        goal,
        fields,
        ("title", "description", "image_url", "emoji", "start_date", "end_date", "status"),
    )
    try:
        validate_date_order(goal.start_date, goal.end_date)
    except ValueError:
        db.session.rollback()
        raise
    db.session.commit()
    return goal


def update_goal_status(goal_id: int, status: GoalStatus) -> Goal:
    goal = get_goal(goal_id)
    goal.status = status
    db.session.commit()
    return goal


def delete_goal(goal_id: int) -> None:
    """Delete a goal together with its habits, their tasks, and its notes."""
    goal = get_goal(goal_id)
    db.session.delete(goal)
    db.session.commit()


def count_goals_for_user(user_id: int) -> int:
    return Goal.query.filter_by(user_id=user_id).count()


def count_goals_for_user_by_status(user_id: int, status: GoalStatus) -> int:
    return Goal.query.filter_by(user_id=user_id, status=status).count()


def list_overdue_goals(user_id: int, today: date | None = None) -> List[Goal]:
    """Goals past their end date that were neither completed nor cancelled."""
    today = today or clock.today()
    return (
        Goal.query.filter_by(user_id=user_id)
        .filter(Goal.end_date < today, Goal.status.notin_(_CLOSED_STATUSES))
        .order_by(Goal.end_date.asc(), Goal.id.asc())
        .all()
    )


def list_active_goals(user_id: int, today: date | None = None) -> List[Goal]:
    today = today or clock.today()
    return (
        Goal.query.filter_by(user_id=user_id)
        .filter(Goal.status.in_(_OPEN_STATUSES), Goal.end_date >= today)
        .order_by(Goal.end_date.asc(), Goal.id.asc())
        .all()
    )


def list_completed_goals(user_id: int) -> List[Goal]:
    return (
        Goal.query.filter_by(user_id=user_id, status=GoalStatus.COMPLETED)
        .order_by(Goal.id.asc())
        .all()
    )
