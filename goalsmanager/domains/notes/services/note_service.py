"""Note service."""

from __future__ import annotations

from typing import List

from goalsmanager.core.errors import NotFoundError
from goalsmanager.core.utils.validation import require_text
from goalsmanager.domains.goals.services.goal_service import get_goal, require_goal
from goalsmanager.domains.notes.models.note_models import Note
from goalsmanager.extensions import db


def create_note(goal_id: int, content: str) -> Note:
    goal = get_goal(goal_id)
    note = Note(goal_id=goal.id, content=require_text(content, "Content"))
    db.session.add(note)
    db.session.commit()
    return note


def get_note(note_id: int) -> Note:
    note = db.session.get(Note, note_id)
    if not note:
        raise NotFoundError.for_entity("Note", note_id)
    return note


def list_notes_for_goal(goal_id: int) -> List[Note]:
    """Newest first."""
    require_goal(goal_id)
    return (
        Note.query.filter_by(goal_id=goal_id)
        .order_by(Note.created_at.desc(), Note.id.desc())
        .all()
    )


def update_note(note_id: int, content: str | None) -> Note:
    note = get_note(note_id)
    # Blank content leaves the note as it was.
    if content is not None and content.strip():
        note.content = content.strip()
        db.session.commit()
    return note


def delete_note(note_id: int) -> None:
    note = get_note(note_id)
    db.session.delete(note)
    db.session.commit()


def delete_notes_for_goal(goal_id: int) -> int:
    deleted = Note.query.filter_by(goal_id=goal_id).delete(synchronize_session="fetch")
    db.session.commit()
    return deleted


def count_notes_for_goal(goal_id: int) -> int:
    return Note.query.filter_by(goal_id=goal_id).count()
