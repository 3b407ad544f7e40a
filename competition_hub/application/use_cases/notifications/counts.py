"""Counters shown on the administration dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from competition_hub.infrastructure.repositories import (
    ForumRepository,
    NotificationReceiptRepository,
    SubmissionRepository,
)


@dataclass(frozen=True)
class AdminNotificationSummary:
    unread_admin_notifications: int
    recent_participant_messages: int
    recent_forum_comments: int

    @property
    def total(self) -> int:
        return (
            self.unread_admin_notifications
            + self.recent_participant_messages
            + self.recent_forum_comments
        )


def count_unread_admin_notifications(session: Session, *, user_id: int) -> int:
    """Return the unread admin-only receipts of ``user_id``."""

    return NotificationReceiptRepository(session).count_where(
        user_id=user_id, is_read=False, admin_only=True
    )


def get_admin_notification_summary(session: Session, *, user_id: int) -> AdminNotificationSummary:
    return AdminNotificationSummary(
        unread_admin_notifications=count_unread_admin_notifications(session, user_id=user_id),
        recent_participant_messages=SubmissionRepository(session).count_participant_messages(),
        recent_forum_comments=ForumRepository(session).count_comments_by_participants(),
    )
