"""Habit streaks computed from task history."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from goalsmanager.core.utils import clock
from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.domains.tasks.models.task_models import Task

logger = logging.getLogger(__name__)


def calculate_streak(tasks_newest_first: Iterable[Task]) -> int:
    """Count leading completed tasks; an incomplete newest task means no streak."""
    streak = 0
    for task in tasks_newest_first:
        if not task.completed:
            break
        streak += 1
    return streak


def due_tasks(habit: Habit, today: date) -> list[Task]:
    return (
        Task.query.filter(Task.habit_id == habit.id, Task.date <= today)
        .order_by(Task.date.desc())
        .all()
    )


def update_habit_streak(habit: Habit, *, today: date | None = None) -> int:
    """Recompute ``habit.streak_status`` from its due tasks. The caller owns the commit.

    Tasks dated after ``today`` are not due yet and do not count either way.
    """
    today = today or clock.today()
    streak = calculate_streak(due_tasks(habit, today))
    if habit.streak_status != streak:
        logger.debug("Habit %s streak %s -> %s", habit.id, habit.streak_status, streak)
    habit.streak_status = streak
    return streak
