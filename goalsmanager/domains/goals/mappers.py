"""DTO mappers for goals."""

from __future__ import annotations

from goalsmanager.domains.goals.models.goal_models import Goal
from goalsmanager.domains.goals.schemas.goal_schemas import GoalResponse


def map_goal(goal: Goal) -> dict:
    return GoalResponse(
        id=goal.id,
        title=goal.title,
        description=goal.description,
        image_url=goal.image_url,
        emoji=goal.emoji,
        start_date=goal.start_date,
        end_date=goal.end_date,
        status=goal.status,
        user_id=goal.user_id,
        username=goal.user.username,
        created_at=goal.created_at,
        updated_at=goal.updated_at,
    ).model_dump(mode="json")
