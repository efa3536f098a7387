"""Seed demo data for GoalsManager."""

from __future__ import annotations

from datetime import date, timedelta

from goalsmanager.core.users.models import User
from goalsmanager.core.users.schemas import UserUpsertRequest
from goalsmanager.core.users.services import create_or_update_user
from goalsmanager.core.utils import clock
from goalsmanager.domains.goals.models.goal_models import Goal, GoalStatus
from goalsmanager.domains.goals.services.goal_service import create_goal
from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.domains.habits.services import create_habit
from goalsmanager.domains.habits.services.schedule import format_days_of_week
from goalsmanager.domains.notes.services.note_service import create_note
from goalsmanager.domains.tasks.services.task_service import get_tasks_for_user_in_range


def seed_demo_user() -> User:
    return create_or_update_user(
        UserUpsertRequest(
            provider="demo",
            provider_id="demo-1",
            username="demo",
            email="demo@goalsmanager.test",
            name="Demo User",
        )
    )


def seed_goal(user: User, today: date) -> Goal:
    goal = Goal.query.filter_by(user_id=user.id, title="Run a half marathon").first()
    if goal:
        return goal
    goal = create_goal(
        user.id,
        title="Run a half marathon",
        description="Build up to 21km by the end of the quarter.",
        emoji="🏃",
        start_date=today - timedelta(days=today.weekday()),
        end_date=today + timedelta(days=90),
        status=GoalStatus.IN_PROGRESS,
    )
    create_note(goal.id, "Bought new running shoes.")
    return goal


def seed_habit(user: User, goal: Goal) -> Habit:
    habit = Habit.query.filter_by(goal_id=goal.id, name="Morning run").first()
    if habit:
        return habit
    return create_habit(
        name="Morning run",
        description="5km easy pace",
        days_of_week=format_days_of_week([0, 2, 4]),
        start_date=goal.start_date,
        end_date=goal.end_date,
        color="#22c55e",
        goal_id=goal.id,
        user_id=user.id,
    )


def seed_all() -> dict:
    today = clock.today()
    user = seed_demo_user()
    goal = seed_goal(user, today)
    habit = seed_habit(user, goal)
    week_start = today - timedelta(days=today.weekday())
    tasks = get_tasks_for_user_in_range(user.id, week_start, week_start + timedelta(days=6))
    return {"user_id": user.id, "goal_id": goal.id, "habit_id": habit.id, "tasks": len(tasks)}
