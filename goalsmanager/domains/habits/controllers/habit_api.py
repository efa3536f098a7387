"""Habits JSON API controllers (thin, schema-validated)."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from goalsmanager.domains.habits.mappers import map_habit
from goalsmanager.domains.habits.schemas.habit_schemas import HabitCreate, HabitUpdate
from goalsmanager.domains.habits import services as habit_services

habit_api_bp = Blueprint("habit_api", __name__)


def _habits(items):
    return jsonify({"ok": True, "habits": [map_habit(habit) for habit in items]})


@habit_api_bp.post("")
def create_habit():
    data = HabitCreate.model_validate(request.get_json(silent=True) or {})
    habit = habit_services.create_habit(**data.model_dump())
    return jsonify({"ok": True, "habit": map_habit(habit)}), 201


@habit_api_bp.get("")
def list_habits():
    return _habits(habit_services.list_habits())


@habit_api_bp.get("/<int:habit_id>")
def habit_detail(habit_id: int):
    return jsonify({"ok": True, "habit": map_habit(habit_services.get_habit(habit_id))})


@habit_api_bp.get("/user/<int:user_id>")
def habits_for_user(user_id: int):
    return _habits(habit_services.list_habits_for_user(user_id))


@habit_api_bp.get("/goal/<int:goal_id>")
def habits_for_goal(goal_id: int):
    return _habits(habit_services.list_habits_for_goal(goal_id))


@habit_api_bp.put("/<int:habit_id>")
def update_habit(habit_id: int):
    data = HabitUpdate.model_validate(request.get_json(silent=True) or {})
    habit = habit_services.update_habit(habit_id, **data.model_dump(exclude_none=True))
    return jsonify({"ok": True, "habit": map_habit(habit)})


@habit_api_bp.delete("/<int:habit_id>")
def delete_habit(habit_id: int):
    habit_services.delete_habit(habit_id)
    return jsonify({"ok": True})


@habit_api_bp.get("/exists/<int:habit_id>")
def habit_exists(habit_id: int):
    return jsonify({"ok": True, "exists": habit_services.habit_exists(habit_id)})


@habit_api_bp.get("/user/<int:user_id>/count")
def count_for_user(user_id: int):
    return jsonify({"ok": True, "count": habit_services.count_habits_for_user(user_id)})


@habit_api_bp.get("/goal/<int:goal_id>/count")
def count_for_goal(goal_id: int):
    return jsonify({"ok": True, "count": habit_services.count_habits_for_goal(goal_id)})
