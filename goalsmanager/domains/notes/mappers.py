"""DTO mappers for notes."""

from __future__ import annotations

from goalsmanager.domains.notes.models.note_models import Note
from goalsmanager.domains.notes.schemas.note_schemas import NoteResponse


def map_note(note: Note) -> dict:
    return NoteResponse(
        id=note.id,
        content=note.content,
        goal_id=note.goal_id,
        created_at=note.created_at,
    ).model_dump(mode="json")
