"""Task service: CRUD, completion toggling, and range listing with generation."""

from __future__ import annotations

import logging
from datetime import date
from typing import List

from sqlalchemy.exc import IntegrityError

from goalsmanager.core.errors import ConflictError, NotFoundError
from goalsmanager.core.users.models import User
from goalsmanager.core.users.services import require_user
from goalsmanager.core.utils.validation import apply_fields, require_text, validate_date_order
from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.domains.habits.services import require_habit
from goalsmanager.domains.tasks.models.task_models import Task
from goalsmanager.domains.tasks.services.streak_service import update_habit_streak
from goalsmanager.domains.tasks.services.task_generator import generate_tasks_for_habits
from goalsmanager.extensions import db

logger = logging.getLogger(__name__)


def create_task(*, name: str, date: date, habit_id: int, user_id: int) -> Task:
    habit = db.session.get(Habit, habit_id)
    if not habit:
        raise NotFoundError.for_entity("Habit", habit_id)
    if not db.session.get(User, user_id):
        raise NotFoundError.for_entity("User", user_id)
    name_norm = require_text(name, "Name")
    _ensure_date_free(habit_id, date)

    task = Task(name=name_norm, date=date, completed=False, habit_id=habit_id, user_id=user_id)
    db.session.add(task)
    _commit_or_conflict(habit_id, date)
    return task


def get_task(task_id: int) -> Task:
    task = db.session.get(Task, task_id)
    if not task:
        raise NotFoundError.for_entity("Task", task_id)
    return task


def task_exists(task_id: int) -> bool:
    return db.session.query(Task.id).filter_by(id=task_id).first() is not None


def list_tasks() -> List[Task]:
    return Task.query.order_by(Task.date.asc(), Task.id.asc()).all()


def list_tasks_for_user(user_id: int) -> List[Task]:
    require_user(user_id)
    return Task.query.filter_by(user_id=user_id).order_by(Task.date.asc(), Task.id.asc()).all()


def list_tasks_for_habit(habit_id: int) -> List[Task]:
    require_habit(habit_id)
    return Task.query.filter_by(habit_id=habit_id).order_by(Task.date.asc(), Task.id.asc()).all()


def list_completed_tasks_for_user(user_id: int) -> List[Task]:
    require_user(user_id)
    return (
        Task.query.filter_by(user_id=user_id, completed=True)
        .order_by(Task.date.asc(), Task.id.asc())
        .all()
    )


def list_pending_tasks_for_user(user_id: int) -> List[Task]:
    require_user(user_id)
    return (
        Task.query.filter_by(user_id=user_id, completed=False)
        .order_by(Task.date.asc(), Task.id.asc())
        .all()
    )


def generate_missing_tasks_for_user(user_id: int, start_date: date, end_date: date) -> int:
    """Materialize scheduled tasks for every habit of the user; returns rows created."""
    require_user(user_id)
    validate_date_order(start_date, end_date)
    habits = Habit.query.filter_by(user_id=user_id).order_by(Habit.id.asc()).all()
    created = generate_tasks_for_habits(habits, start_date, end_date)
    db.session.commit()
    if created:
        logger.info(
            "Generated %d tasks for user %s between %s and %s",
            created,
            user_id,
            start_date.isoformat(),
            end_date.isoformat(),
        )
    return created


def get_tasks_for_user_in_range(user_id: int, start_date: date, end_date: date) -> List[Task]:
    """Return the user's tasks dated within ``[start_date, end_date]``.

    This is a read with lazy materialization: before querying, any task a
    habit schedule calls for in the window and that does not exist yet is
    inserted. Repeating the call is harmless.
    """
    generate_missing_tasks_for_user(user_id, start_date, end_date)
    return (
        Task.query.filter(
            Task.user_id == user_id,
            Task.date >= start_date,
            Task.date <= end_date,
        )
        .order_by(Task.date.asc(), Task.id.asc())
        .all()
    )


def update_task(task_id: int, *, today: date | None = None, **fields) -> Task:
    task = get_task(task_id)
    if "name" in fields and fields["name"] is not None:
        fields["name"] = require_text(fields["name"], "Name")
    new_date = fields.get("date")
    if new_date is not None and new_date != task.date:
        _ensure_date_free(task.habit_id, new_date)
    completed_before = task.completed
    date_before = task.date
    apply_fields(task, fields, ("name", "completed", "date"))
    habit_id, day = task.habit_id, task.date
    try:
        if task.completed != completed_before or day != date_before:
            db.session.flush()
            update_habit_streak(task.habit, today=today)
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise _date_taken(habit_id, day) from exc
    return task


def toggle_task_completion(task_id: int, *, today: date | None = None) -> Task:
    """Flip a task's completed flag and recompute its habit's streak."""
    task = get_task(task_id)
    task.completed = not task.completed
    db.session.flush()
    update_habit_streak(task.habit, today=today)
    db.session.commit()
    return task


def delete_task(task_id: int) -> None:
    task = get_task(task_id)
    db.session.delete(task)
    db.session.commit()


def count_tasks_for_user(user_id: int) -> int:
    return Task.query.filter_by(user_id=user_id).count()


def count_tasks_for_habit(habit_id: int) -> int:
    return Task.query.filter_by(habit_id=habit_id).count()


def _date_taken(habit_id: int, day: date) -> ConflictError:
    return ConflictError(f"Task already exists for habit {habit_id} on {day.isoformat()}")


def _ensure_date_free(habit_id: int, day: date) -> None:
    if db.session.query(Task.id).filter_by(habit_id=habit_id, date=day).first() is not None:
        raise _date_taken(habit_id, day)


def _commit_or_conflict(habit_id: int, day: date) -> None:
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        raise _date_taken(habit_id, day) from exc
