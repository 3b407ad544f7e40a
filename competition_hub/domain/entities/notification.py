"""Domain entities for notifications and their per-user receipts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Notification:
    """Titled message with an addressing specification.

    The target fields are fixed when the notification is created; per-user
    state lives in :class:`NotificationReceipt`.
    """

    id: int | None
    title: str
    body: str
    target_all: bool = True
    target_admin_only: bool = False
    target_institutions: frozenset[str] = field(default_factory=frozenset)
    target_user_ids: frozenset[int] = field(default_factory=frozenset)
    created_by_id: int | None = None
    created_at: datetime | None = None


@dataclass
class NotificationReceipt:
    """Delivery and read record of one notification for one user."""

    id: int | None
    notification_id: int
    user_id: int
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime | None = None


@dataclass
class NotificationInboxItem:
    """Receipt joined with the content of its notification."""

    receipt: NotificationReceipt
    title: str
    body: str
    notification_created_at: datetime | None


__all__ = ["Notification", "NotificationInboxItem", "NotificationReceipt"]
