"""Goal model and its status enum."""

from __future__ import annotations

import enum
from datetime import date

from sqlalchemy.orm import Mapped, mapped_column, relationship

from goalsmanager.core.users.models import TimestampMixin, User
from goalsmanager.extensions import db


class GoalStatus(str, enum.Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class Goal(db.Model, TimestampMixin):
    __tablename__ = "goals"
    __table_args__ = (db.Index("ix_goals_user_status", "user_id", "status"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(
        db.ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(db.String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(db.Text)
    image_url: Mapped[str | None] = mapped_column(db.String(1024))
    emoji: Mapped[str | None] = mapped_column(db.String(16))
    start_date: Mapped[date] = mapped_column(nullable=False)
    end_date: Mapped[date] = mapped_column(nullable=False)
    status: Mapped[GoalStatus] = mapped_column(
        db.Enum(GoalStatus, name="goal_status", native_enum=False, length=32),
        nullable=False,
        default=GoalStatus.NOT_STARTED,
    )

    user: Mapped[User] = relationship("User", back_populates="goals")
    habits: Mapped[list["Habit"]] = relationship(
        "Habit", back_populates="goal", cascade="all, delete-orphan"
    )
    notes: Mapped[list["Note"]] = relationship(
        "Note",
        back_populates="goal",
        cascade="all, delete-orphan",
        order_by="desc(Note.created_at)",
    )
