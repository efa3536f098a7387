"""Goals JSON API controllers (thin, schema-validated)."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from goalsmanager.core.errors import ValidationFailed
from goalsmanager.domains.goals.mappers import map_goal
from goalsmanager.domains.goals.models.goal_models import GoalStatus
from goalsmanager.domains.goals.schemas.goal_schemas import (
    GoalCreate,
    GoalStatusUpdate,
    GoalUpdate,
)
from goalsmanager.domains.goals.services import goal_service

goal_api_bp = Blueprint("goal_api", __name__)


def _status(value: str) -> GoalStatus:
    try:
        return GoalStatus(value.upper())
    except ValueError:
        raise ValidationFailed(f"Unknown goal status: {value}") from None


def _goals(goals):
    return jsonify({"ok": True, "goals": [map_goal(goal) for goal in goals]})


@goal_api_bp.post("")
def create_goal():
    data = GoalCreate.model_validate(request.get_json(silent=True) or {})
    goal = goal_service.create_goal(**data.model_dump())
    return jsonify({"ok": True, "goal": map_goal(goal)}), 201


@goal_api_bp.get("")
def list_goals():
    return _goals(goal_service.list_goals())


@goal_api_bp.get("/<int:goal_id>")
def goal_detail(goal_id: int):
    return jsonify({"ok": True, "goal": map_goal(goal_service.get_goal(goal_id))})


@goal_api_bp.get("/user/<int:user_id>")
def goals_for_user(user_id: int):
    return _goals(goal_service.list_goals_for_user(user_id))


@goal_api_bp.get("/user/<int:user_id>/status/<status>")
def goals_for_user_by_status(user_id: int, status: str):
    return _goals(goal_service.list_goals_for_user_by_status(user_id, _status(status)))


@goal_api_bp.get("/status/<status>")
def goals_by_status(status: str):
    return _goals(goal_service.list_goals_by_status(_status(status)))


@goal_api_bp.put("/<int:goal_id>")
def update_goal(goal_id: int):
    data = GoalUpdate.model_validate(request.get_json(silent=True) or {})
    goal = goal_service.update_goal(goal_id, **data.model_dump(exclude_none=True))
    return jsonify({"ok": True, "goal": map_goal(goal)})


@goal_api_bp.patch("/<int:goal_id>/status")
def update_goal_status(goal_id: int):
    payload = request.get_json(silent=True)
    if payload is None:
        # Also accept ?status=IN_PROGRESS
        payload = {"status": (request.args.get("status") or "").upper()}
    data = GoalStatusUpdate.model_validate(payload)
    goal = goal_service.update_goal_status(goal_id, data.status)
    return jsonify({"ok": True, "goal": map_goal(goal)})


@goal_api_bp.delete("/<int:goal_id>")
def delete_goal(goal_id: int):
    goal_service.delete_goal(goal_id)
    return jsonify({"ok": True})


@goal_api_bp.get("/exists/<int:goal_id>")
def goal_exists(goal_id: int):
    return jsonify({"ok": True, "exists": goal_service.goal_exists(goal_id)})


@goal_api_bp.get("/user/<int:user_id>/count")
def count_goals(user_id: int):
    return jsonify({"ok": True, "count": goal_service.count_goals_for_user(user_id)})


@goal_api_bp.get("/user/<int:user_id>/count/<status>")
def count_goals_by_status(user_id: int, status: str):
    count = goal_service.count_goals_for_user_by_status(user_id, _status(status))
    return jsonify({"ok": True, "count": count})


@goal_api_bp.get("/user/<int:user_id>/overdue")
def overdue_goals(user_id: int):
    return _goals(goal_service.list_overdue_goals(user_id))


@goal_api_bp.get("/user/<int:user_id>/active")
def active_goals(user_id: int):
    return _goals(goal_service.list_active_goals(user_id))


@goal_api_bp.get("/user/<int:user_id>/completed")
def completed_goals(user_id: int):
    return _goals(goal_service.list_completed_goals(user_id))
