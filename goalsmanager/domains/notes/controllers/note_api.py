"""Notes JSON API controllers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from goalsmanager.domains.notes.mappers import map_note
from goalsmanager.domains.notes.schemas.note_schemas import NoteCreate, NoteUpdate
from goalsmanager.domains.notes.services import note_service

note_api_bp = Blueprint("note_api", __name__)


@note_api_bp.post("")
def create_note():
    data = NoteCreate.model_validate(request.get_json(silent=True) or {})
    note = note_service.create_note(data.goal_id, data.content)
    return jsonify({"ok": True, "note": map_note(note)}), 201


@note_api_bp.get("/<int:note_id>")
def note_detail(note_id: int):
    return jsonify({"ok": True, "note": map_note(note_service.get_note(note_id))})


@note_api_bp.get("/goal/<int:goal_id>")
def notes_for_goal(goal_id: int):
    notes = note_service.list_notes_for_goal(goal_id)
    return jsonify({"ok": True, "notes": [map_note(note) for note in notes]})


@note_api_bp.put("/<int:note_id>")
def update_note(note_id: int):
    data = NoteUpdate.model_validate(request.get_json(silent=True) or {})
    note = note_service.update_note(note_id, data.content)
    return jsonify({"ok": True, "note": map_note(note)})


@note_api_bp.delete("/<int:note_id>")
def delete_note(note_id: int):
    note_service.delete_note(note_id)
    return jsonify({"ok": True})


@note_api_bp.delete("/goal/<int:goal_id>")
def delete_notes_for_goal(goal_id: int):
    deleted = note_service.delete_notes_for_goal(goal_id)
    return jsonify({"ok": True, "deleted": deleted})


@note_api_bp.get("/goal/<int:goal_id>/count")
def count_for_goal(goal_id: int):
    return jsonify({"ok": True, "count": note_service.count_notes_for_goal(goal_id)})
