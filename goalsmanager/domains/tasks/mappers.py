"""DTO mappers for tasks."""

from __future__ import annotations

from goalsmanager.domains.tasks.models.task_models import Task
from goalsmanager.domains.tasks.schemas.task_schemas import TaskResponse


def map_task(task: Task) -> dict:
    return TaskResponse(
        id=task.id,
        name=task.name,
        completed=task.completed,
        date=task.date,
        habit_id=task.habit_id,
        habit_name=task.habit.name,
        habit_color=task.habit.color,
        user_id=task.user_id,
        username=task.user.username,
        created_at=task.created_at,
        updated_at=task.updated_at,
    ).model_dump(mode="json")
