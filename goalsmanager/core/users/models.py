"""User model keyed by external identity provider."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column, relationship

from goalsmanager.extensions import db


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=datetime.utcnow, onupdate=datetime.utcnow)


class User(db.Model, TimestampMixin):
    __tablename__ = "users"
    __table_args__ = (
        db.UniqueConstraint("provider", "provider_id", name="ux_users_provider_provider_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    # "github", "google", "jwt", ...
    provider: Mapped[str] = mapped_column(db.String(32), nullable=False)
    provider_id: Mapped[str] = mapped_column(db.String(255), nullable=False)
    username: Mapped[str] = mapped_column(db.String(255), unique=True, nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(db.String(255), index=True)
    name: Mapped[str | None] = mapped_column(db.String(255))
    avatar_url: Mapped[str | None] = mapped_column(db.String(1024))
    bio: Mapped[str | None] = mapped_column(db.Text)
    location: Mapped[str | None] = mapped_column(db.String(255))

    goals: Mapped[list["Goal"]] = relationship(
        "Goal", back_populates="user", cascade="all, delete-orphan"
    )
    habits: Mapped[list["Habit"]] = relationship(
        "Habit", back_populates="user", cascade="all, delete-orphan"
    )
    tasks: Mapped[list["Task"]] = relationship(
        "Task", back_populates="user", cascade="all, delete-orphan"
    )
