"""Use case returning the notification inbox of a user."""

from __future__ import annotations

from collections.abc import Sequence

import logging

from sqlalchemy.orm import Session

from competition_hub.config import get_settings
from competition_hub.domain.entities import NotificationInboxItem
from competition_hub.domain.targeting import NotificationAudience, select_visible
from competition_hub.infrastructure.repositories import (
    NotificationReceiptRepository,
    NotificationRepository,
)

logger = logging.getLogger(__name__)


def fetch_notifications_for_user(
    session: Session,
    *,
    user_id: int,
    institution: str | None = None,
    is_admin: bool = False,
) -> Sequence[NotificationInboxItem]:
    """Materialize receipts for visible notifications and return the inbox.

    The query narrows candidates in SQL; :func:`select_visible` then applies
    the targeting rule itself, so both must agree on every notification.
    Only the most recent visible notifications are considered
    (``NOTIFICATION_FETCH_LIMIT``). Receipts are created with insert-if-absent
    semantics, so repeated or concurrent fetches keep a single receipt per
    notification and never reset its read state.
    """

    audience = NotificationAudience(
        user_id=user_id, is_admin=bool(is_admin), institution=institution or None
    )
    limit = get_settings().notification_fetch_limit
    candidates = NotificationRepository(session).find_visible(audience, limit=limit)
    notifications = select_visible(candidates, audience, limit=limit)
    notification_ids = [notification.id for notification in notifications]
    if not notification_ids:
        return []

    receipts = NotificationReceiptRepository(session)
    receipts.insert_if_absent(user_id, notification_ids)
    logger.debug(
        "Ensured %d notification receipts for user %s", len(notification_ids), user_id
    )
    return receipts.list_inbox(user_id, notification_ids)
