"""Use case for authoring notifications."""

from __future__ import annotations

from collections.abc import Iterable

import logging

from sqlalchemy.orm import Session

from competition_hub.domain.entities import Notification
from competition_hub.domain.errors import ValidationError
from competition_hub.infrastructure.repositories import (
    NotificationReceiptRepository,
    NotificationRepository,
)
from competition_hub.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    title: str,
    body: str,
    target_all: bool = True,
    target_admin_only: bool = False,
    target_institutions: Iterable[str] = (),
    target_user_ids: Iterable[int] = (),
    created_by_id: int | None = None,
) -> Notification:
    """Persist a notification and pre-create receipts for explicit targets.

    The notification and the eager receipts are two separate writes. When the
    second one does not happen, the receipts are materialized on the next
    inbox fetch of each targeted user.
    """

    title = (title or "").strip()
    body = (body or "").strip()
    if not title:
        raise ValidationError("Title is required")
    if not body:
        raise ValidationError("Body is required")

    institutions = frozenset(
        name.strip() for name in target_institutions if name and name.strip()
    )
    user_ids = frozenset(int(user_id) for user_id in target_user_ids)

    notification = NotificationRepository(session).create(
        Notification(
            id=None,
            title=title,
            body=body,
            target_all=target_all,
            target_admin_only=target_admin_only,
            target_institutions=institutions,
            target_user_ids=user_ids,
            created_by_id=created_by_id,
            created_at=now_in_app_timezone(),
        )
    )
    logger.info(
        "Notification %s created (all=%s, admin_only=%s, institutions=%d, users=%d)",
        notification.id,
        notification.target_all,
        notification.target_admin_only,
        len(institutions),
        len(user_ids),
    )

    if user_ids:
        NotificationReceiptRepository(session).insert_for_users(notification.id, user_ids)

    return notification
