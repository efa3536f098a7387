"""DTO mappers for habits."""

from __future__ import annotations

from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.domains.habits.schemas.habit_schemas import HabitResponse


def map_habit(habit: Habit) -> dict:
    return HabitResponse(
        id=habit.id,
        name=habit.name,
        description=habit.description,
        days_of_week=habit.days_of_week,
        start_date=habit.start_date,
        end_date=habit.end_date,
        streak_status=habit.streak_status or 0,
        color=habit.color,
        goal_id=habit.goal_id,
        goal_title=habit.goal.title,
        user_id=habit.user_id,
        username=habit.user.username,
        created_at=habit.created_at,
        updated_at=habit.updated_at,
    ).model_dump(mode="json")
