"""Materialize task rows from habit schedules.

Generation is idempotent: a (habit, date) pair that already has a task is
left untouched, so re-running over an overlapping window creates nothing new
and never resets a completed flag.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterator, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError

from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.domains.habits.services.schedule import parse_days_of_week
from goalsmanager.domains.tasks.models.task_models import Task
from goalsmanager.extensions import db

logger = logging.getLogger(__name__)


def effective_window(habit: Habit, range_start: date, range_end: date) -> Optional[Tuple[date, date]]:
    """Intersect the requested range with the habit's active period."""
    start = max(range_start, habit.start_date)
    end = min(range_end, habit.end_date)
    if start > end:
        return None
    return start, end


def iter_scheduled_dates(habit: Habit, range_start: date, range_end: date) -> Iterator[date]:
    days = parse_days_of_week(habit.days_of_week)
    if not days:
        return
    window = effective_window(habit, range_start, range_end)
    if window is None:
        return
    current, end = window
    while current <= end:
        if current.weekday() in days:
            yield current
        current += timedelta(days=1)


def generate_tasks_for_habit(habit: Habit, range_start: date, range_end: date) -> List[Task]:
    """Create the missing tasks of ``habit`` between ``range_start`` and ``range_end``.

    Returns only the rows created by this call. The caller owns the commit.
    """
    scheduled = list(iter_scheduled_dates(habit, range_start, range_end))
    if not scheduled:
        return []

    existing = {
        row.date
        for row in db.session.query(Task.date)
        .filter(Task.habit_id == habit.id)
        .filter(Task.date >= scheduled[0], Task.date <= scheduled[-1])
        .all()
    }
    pending = [_new_task(habit, day) for day in scheduled if day not in existing]
    if not pending:
        return []

    try:
        with db.session.begin_nested():
            db.session.add_all(pending)
    except IntegrityError:
        # Another writer inserted some of these dates first; keep whatever is new.
        logger.info("Task batch for habit %s hit an existing date, retrying row by row", habit.id)
        pending = _insert_one_by_one(habit, [task.date for task in pending])

    logger.debug("Generated %d tasks for habit %s", len(pending), habit.id)
    return pending


def _new_task(habit: Habit, day: date) -> Task:
    return Task(name=habit.name, date=day, completed=False, habit_id=habit.id, user_id=habit.user_id)


def _insert_one_by_one(habit: Habit, dates: List[date]) -> List[Task]:
    created = []
    for day in dates:
        task = _new_task(habit, day)
        try:
            with db.session.begin_nested():
                db.session.add(task)
        except IntegrityError:
            continue
        created.append(task)
    return created


def generate_tasks_for_habits(habits: List[Habit], range_start: date, range_end: date) -> int:
    created = 0
    for habit in habits:
        created += len(generate_tasks_for_habit(habit, range_start, range_end))
    return created
