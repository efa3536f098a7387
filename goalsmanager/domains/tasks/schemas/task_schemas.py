"""Task DTOs and schemas."""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class TaskCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    date: dt.date
    habit_id: int = Field(validation_alias=AliasChoices("habit_id", "habitId"))
    user_id: int = Field(validation_alias=AliasChoices("user_id", "userId"))


class TaskUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255)
    completed: Optional[bool] = None
    date: Optional[dt.date] = None


class TaskRangeQuery(BaseModel):
    start_date: dt.date = Field(validation_alias=AliasChoices("start_date", "startDate"))
    end_date: dt.date = Field(validation_alias=AliasChoices("end_date", "endDate"))


class TaskResponse(BaseModel):
    id: int
    name: str
    completed: bool
    date: dt.date
    habit_id: int
    habit_name: str
    habit_color: Optional[str]
    user_id: int
    username: str
    created_at: Optional[dt.datetime]
    updated_at: Optional[dt.datetime]
