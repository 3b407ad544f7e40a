"""Public helpers for authoring, delivering and acknowledging notifications."""

from .counts import (
    AdminNotificationSummary,
    count_unread_admin_notifications,
    get_admin_notification_summary,
)
from .create_notification import create_notification
from .events import (
    notify_forum_comment_created,
    notify_forum_post_created,
    notify_submission_message_created,
)
from .fetch_notifications import fetch_notifications_for_user
from .mark_read import mark_notification_read

__all__ = [
    "AdminNotificationSummary",
    "count_unread_admin_notifications",
    "create_notification",
    "fetch_notifications_for_user",
    "get_admin_notification_summary",
    "mark_notification_read",
    "notify_forum_comment_created",
    "notify_forum_post_created",
    "notify_submission_message_created",
]
