"""Typed schemas for user IO."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class UserUpsertRequest(BaseModel):
    provider: str = Field(min_length=1, max_length=32)
    provider_id: str = Field(
        min_length=1, max_length=255, validation_alias=AliasChoices("provider_id", "providerId")
    )
    username: str = Field(min_length=1, max_length=255)
    email: Optional[str] = Field(default=None, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = Field(
        default=None, max_length=1024, validation_alias=AliasChoices("avatar_url", "avatarUrl")
    )
    bio: Optional[str] = None
    location: Optional[str] = Field(default=None, max_length=255)


class UserResponse(BaseModel):
    id: int
    provider: str
    provider_id: str
    username: str
    email: Optional[str] = None
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
