"""Schemas for submissions and the messages exchanged on them."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .user import UserSummaryRead


class SubmissionCreate(BaseModel):
    competition_id: int = Field(..., ge=1)
    title: str = Field(..., min_length=1, max_length=200)
    file_url: str = Field(..., max_length=500, description="Shared Drive or Docs link")
    description: str | None = None


class SubmissionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    competition_id: int
    user_id: int
    title: str
    file_url: str
    description: str | None = None
    status: str
    created_at: datetime | None
    updated_at: datetime | None


class SubmissionMessageCreate(BaseModel):
    content: str


class SubmissionMessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    submission_id: int
    author_id: int
    content: str
    is_from_admin: bool
    created_at: datetime | None
    author: UserSummaryRead | None = None
