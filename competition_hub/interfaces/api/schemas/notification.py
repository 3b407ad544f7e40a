"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Payload used by administrators to author a notification."""

    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., min_length=1, max_length=200)
    body: str = Field(..., min_length=1)
    target_all: bool = False
    target_admin_only: bool = False
    target_institutions: list[str] = Field(default_factory=list)
    target_user_ids: list[int] = Field(default_factory=list)


class NotificationRead(BaseModel):
    """Representation of an authored notification."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str
    target_all: bool
    target_admin_only: bool
    target_institutions: list[str]
    target_user_ids: list[int]
    created_by_id: int | None = None
    created_at: datetime


class NotificationContent(BaseModel):
    title: str
    body: str
    created_at: datetime | None = None


class NotificationInboxItemRead(BaseModel):
    """Receipt of the authenticated user together with its notification."""

    id: int
    notification_id: int
    user_id: int
    is_read: bool
    read_at: datetime | None = None
    created_at: datetime | None = None
    notification: NotificationContent


class NotificationMarkReadRequest(BaseModel):
    notification_id: int = Field(..., ge=1, description="Notification to acknowledge")


class NotificationMarkReadResponse(BaseModel):
    success: bool = True


class AdminNotificationSummaryRead(BaseModel):
    unread_admin_notifications: int
    recent_participant_messages: int
    recent_forum_comments: int
    total: int


__all__ = [
    "AdminNotificationSummaryRead",
    "NotificationContent",
    "NotificationCreate",
    "NotificationInboxItemRead",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
]
