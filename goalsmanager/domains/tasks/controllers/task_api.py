"""Tasks JSON API controllers (thin, schema-validated)."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from goalsmanager.core.errors import ValidationFailed
from goalsmanager.domains.tasks.mappers import map_task
from goalsmanager.domains.tasks.schemas.task_schemas import TaskCreate, TaskRangeQuery, TaskUpdate
from goalsmanager.domains.tasks.services import task_service

task_api_bp = Blueprint("task_api", __name__)


def _tasks(items):
    return jsonify({"ok": True, "tasks": [map_task(task) for task in items]})


@task_api_bp.post("")
def create_task():
    data = TaskCreate.model_validate(request.get_json(silent=True) or {})
    task = task_service.create_task(**data.model_dump())
    return jsonify({"ok": True, "task": map_task(task)}), 201


@task_api_bp.get("")
def list_tasks():
    return _tasks(task_service.list_tasks())


@task_api_bp.get("/<int:task_id>")
def task_detail(task_id: int):
    return jsonify({"ok": True, "task": map_task(task_service.get_task(task_id))})


@task_api_bp.get("/user/<int:user_id>")
def tasks_for_user(user_id: int):
    return _tasks(task_service.list_tasks_for_user(user_id))


@task_api_bp.get("/habit/<int:habit_id>")
def tasks_for_habit(habit_id: int):
    return _tasks(task_service.list_tasks_for_habit(habit_id))


@task_api_bp.get("/user/<int:user_id>/week")
def tasks_for_user_in_range(user_id: int):
    """List tasks in ``startDate..endDate``, creating any the user's habits call for.

    Not a pure read: missing scheduled tasks are inserted before listing.
    """
    query = TaskRangeQuery.model_validate(request.args.to_dict())
    span = (query.end_date - query.start_date).days + 1
    if span > current_app.config.get("TASK_RANGE_MAX_DAYS", 366):
        raise ValidationFailed(f"Date range too large: {span} days")
    tasks = task_service.get_tasks_for_user_in_range(user_id, query.start_date, query.end_date)
    return _tasks(tasks)


@task_api_bp.get("/user/<int:user_id>/completed")
def completed_tasks(user_id: int):
    return _tasks(task_service.list_completed_tasks_for_user(user_id))


@task_api_bp.get("/user/<int:user_id>/pending")
def pending_tasks(user_id: int):
    return _tasks(task_service.list_pending_tasks_for_user(user_id))


@task_api_bp.put("/<int:task_id>")
def update_task(task_id: int):
    data = TaskUpdate.model_validate(request.get_json(silent=True) or {})
    task = task_service.update_task(task_id, **data.model_dump(exclude_none=True))
    return jsonify({"ok": True, "task": map_task(task)})


@task_api_bp.patch("/<int:task_id>/toggle")
def toggle_task(task_id: int):
    task = task_service.toggle_task_completion(task_id)
    return jsonify({"ok": True, "task": map_task(task), "streak": task.habit.streak_status})


@task_api_bp.delete("/<int:task_id>")
def delete_task(task_id: int):
    task_service.delete_task(task_id)
    return jsonify({"ok": True})


@task_api_bp.get("/exists/<int:task_id>")
def task_exists(task_id: int):
    return jsonify({"ok": True, "exists": task_service.task_exists(task_id)})


@task_api_bp.get("/user/<int:user_id>/count")
def count_for_user(user_id: int):
    return jsonify({"ok": True, "count": task_service.count_tasks_for_user(user_id)})


@task_api_bp.get("/habit/<int:habit_id>/count")
def count_for_habit(habit_id: int):
    return jsonify({"ok": True, "count": task_service.count_tasks_for_habit(habit_id)})
