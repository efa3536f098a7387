"""Habit model: a weekday schedule attached to a goal."""

from __future__ import annotations

from datetime import date

from sqlalchemy.orm import Mapped, mapped_column, relationship

from goalsmanager.core.users.models import TimestampMixin, User
from goalsmanager.domains.goals.models.goal_models import Goal
from goalsmanager.extensions import db


class Habit(db.Model, TimestampMixin):
    __tablename__ = "habits"

    id: Mapped[int] = mapped_column(primary_key=True)
    goal_id: Mapped[int] = mapped_column(
        db.ForeignKey("goals.id", ondelete="CASCADE"), index=True, nullable=False
    )
    user_id: Mapped[int] = mapped_column(
        db.ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(db.Text)
    # Comma separated weekday abbreviations, e.g. "Mon, Wed, Fri"
    days_of_week: Mapped[str | None] = mapped_column(db.String(64))
    start_date: Mapped[date] = mapped_column(nullable=False)
    end_date: Mapped[date] = mapped_column(nullable=False)
    streak_status: Mapped[int] = mapped_column(nullable=False, default=0)
    color: Mapped[str | None] = mapped_column(db.String(32))

    goal: Mapped[Goal] = relationship("Goal", back_populates="habits")
    user: Mapped[User] = relationship("User", back_populates="habits")
    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="habit", cascade="all, delete-orphan"
    )
