"""Use case acknowledging a notification."""

from sqlalchemy.orm import Session

from competition_hub.domain.errors import NotFoundError, ValidationError
from competition_hub.infrastructure.repositories import (
    NotificationReceiptRepository,
    NotificationRepository,
)
from competition_hub.utils import now_in_app_timezone


def mark_notification_read(session: Session, *, user_id: int, notification_id: int) -> None:
    """Mark the receipt of ``user_id`` for ``notification_id`` as read.

    The transition is one way: there is no operation that marks a receipt
    unread again. Calling it twice leaves the receipt read.
    """

    if notification_id is None:
        raise ValidationError("notification_id is required")
    if not NotificationRepository(session).exists(notification_id):
        raise NotFoundError("Notification not found")

    NotificationReceiptRepository(session).mark_read(
        user_id=user_id,
        notification_id=notification_id,
        read_at=now_in_app_timezone(),
    )
