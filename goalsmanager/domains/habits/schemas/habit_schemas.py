"""Habit DTOs and schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class HabitCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=4096)
    days_of_week: Optional[str] = Field(
        default=None, max_length=64, validation_alias=AliasChoices("days_of_week", "daysOfWeek")
    )
    start_date: date = Field(validation_alias=AliasChoices("start_date", "startDate"))
    end_date: date = Field(validation_alias=AliasChoices("end_date", "endDate"))
    color: Optional[str] = Field(default=None, max_length=32)
    goal_id: int = Field(validation_alias=AliasChoices("goal_id", "goalId"))
    user_id: int = Field(validation_alias=AliasChoices("user_id", "userId"))


class HabitUpdate(BaseModel):
    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=4096)
    days_of_week: Optional[str] = Field(
        default=None, max_length=64, validation_alias=AliasChoices("days_of_week", "daysOfWeek")
    )
    start_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("start_date", "startDate"))
    end_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("end_date", "endDate"))
    color: Optional[str] = Field(default=None, max_length=32)


class HabitResponse(BaseModel):
    id: int
    name: str
    description: Optional[str]
    days_of_week: Optional[str]
    start_date: date
    end_date: date
    streak_status: int
    color: Optional[str]
    goal_id: int
    goal_title: str
    user_id: int
    username: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
