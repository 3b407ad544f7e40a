"""Schemas for forum posts, comments and reactions."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .user import UserSummaryRead

ReactionType = Literal["LIKE", "SUPPORT", "LOVE", "CELEBRATE", "FUNNY", "ANGRY", "DOWNVOTE"]


class ForumPostCreate(BaseModel):
    title: str = Field(..., max_length=200)
    content: str


class ForumPostStatusUpdate(BaseModel):
    is_resolved: bool


class ForumPostRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    author_id: int
    title: str
    content: str
    status: str
    is_resolved: bool
    created_at: datetime | None
    updated_at: datetime | None
    author: UserSummaryRead | None = None
    comment_count: int = 0
    reaction_summary: dict[str, int] = Field(default_factory=dict)


class ForumPageMeta(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int


class ForumPostPageRead(BaseModel):
    data: list[ForumPostRead]
    meta: ForumPageMeta


class ForumCommentCreate(BaseModel):
    content: str
    parent_id: int | None = None


class ForumCommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    author_id: int
    parent_id: int | None = None
    content: str
    created_at: datetime | None
    author: UserSummaryRead | None = None
    reaction_summary: dict[str, int] = Field(default_factory=dict)


class ReactionRequest(BaseModel):
    type: ReactionType
