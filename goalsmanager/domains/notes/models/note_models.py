"""Free-text notes attached to a goal."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from goalsmanager.domains.goals.models.goal_models import Goal
from goalsmanager.extensions import db


class Note(db.Model):
    __tablename__ = "notes"
    __table_args__ = (db.Index("ix_notes_goal_created_at", "goal_id", "created_at"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    goal_id: Mapped[int] = mapped_column(
        db.ForeignKey("goals.id", ondelete="CASCADE"), index=True, nullable=False
    )
    content: Mapped[str] = mapped_column(db.Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, nullable=False)

    goal: Mapped[Goal] = relationship("Goal", back_populates="notes")
