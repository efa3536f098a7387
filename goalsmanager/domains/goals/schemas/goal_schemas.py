"""Goal DTOs and schemas."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from goalsmanager.domains.goals.models.goal_models import GoalStatus


class GoalCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, max_length=4096)
    image_url: Optional[str] = Field(
        default=None, max_length=1024, validation_alias=AliasChoices("image_url", "imageUrl")
    )
    emoji: Optional[str] = Field(default=None, max_length=16)
    start_date: date = Field(validation_alias=AliasChoices("start_date", "startDate"))
    end_date: date = Field(validation_alias=AliasChoices("end_date", "endDate"))
    status: Optional[GoalStatus] = None
    user_id: int = Field(validation_alias=AliasChoices("user_id", "userId"))


class GoalUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None, max_length=4096)
    image_url: Optional[str] = Field(
        default=None, max_length=1024, validation_alias=AliasChoices("image_url", "imageUrl")
    )
    emoji: Optional[str] = Field(default=None, max_length=16)
    start_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("start_date", "startDate"))
    end_date: Optional[date] = Field(default=None, validation_alias=AliasChoices("end_date", "endDate"))
    status: Optional[GoalStatus] = None


class GoalStatusUpdate(BaseModel):
    status: GoalStatus


class GoalResponse(BaseModel):
    id: int
    title: str
    description: Optional[str]
    image_url: Optional[str]
    emoji: Optional[str]
    start_date: date
    end_date: date
    status: GoalStatus
    user_id: int
    username: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]
