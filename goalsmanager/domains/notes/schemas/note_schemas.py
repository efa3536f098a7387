"""Note DTOs and schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class NoteCreate(BaseModel):
    content: str = Field(min_length=1)
    goal_id: int = Field(validation_alias=AliasChoices("goal_id", "goalId"))


class NoteUpdate(BaseModel):
    content: Optional[str] = None


class NoteResponse(BaseModel):
    id: int
    content: str
    goal_id: int
    created_at: Optional[datetime]
