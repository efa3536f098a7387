"""Task model: one dated instance of a habit."""

from __future__ import annotations

import datetime as dt

from sqlalchemy.orm import Mapped, mapped_column, relationship

from goalsmanager.core.users.models import TimestampMixin, User
from goalsmanager.domains.habits.models.habit_models import Habit
from goalsmanager.extensions import db


class Task(db.Model, TimestampMixin):
    __tablename__ = "tasks"
    __table_args__ = (
        # At most one task per habit per day; generation relies on it under races.
        db.UniqueConstraint("habit_id", "date", name="ux_tasks_habit_date"),
        db.Index("ix_tasks_user_date", "user_id", "date"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    habit_id: Mapped[int] = mapped_column(
        db.ForeignKey("habits.id", ondelete="CASCADE"), index=True, nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        db.ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    date: Mapped[dt.date] = mapped_column(nullable=False)
    completed: Mapped[bool] = mapped_column(nullable=False, default=False)

    habit: Mapped[Habit] = relationship("Habit", back_populates="tasks")
    user: Mapped[User] = relationship("User", back_populates="tasks")
