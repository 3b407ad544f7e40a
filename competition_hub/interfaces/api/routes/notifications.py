"""Endpoints of the notification inbox."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from competition_hub.application.use_cases.notifications import (
    fetch_notifications_for_user,
    mark_notification_read,
)
from competition_hub.domain.entities import NotificationInboxItem, User
from competition_hub.domain.errors import DomainError
from competition_hub.infrastructure.database import get_db
from competition_hub.interfaces.api.dependencies import get_current_active_user
from competition_hub.interfaces.api.routes_helpers import http_error_from
from competition_hub.interfaces.api.schemas import (
    NotificationContent,
    NotificationInboxItemRead,
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def _inbox_item_to_schema(item: NotificationInboxItem) -> NotificationInboxItemRead:
    receipt = item.receipt
    return NotificationInboxItemRead(
        id=receipt.id or 0,
        notification_id=receipt.notification_id,
        user_id=receipt.user_id,
        is_read=receipt.is_read,
        read_at=receipt.read_at,
        created_at=receipt.created_at,
        notification=NotificationContent(
            title=item.title,
            body=item.body,
            created_at=item.notification_created_at,
        ),
    )


@router.get("/", response_model=list[NotificationInboxItemRead])
def list_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationInboxItemRead]:
    """Return the notifications addressed to the authenticated user."""

    items = fetch_notifications_for_user(
        db,
        user_id=current_user.id,
        institution=current_user.institution,
        is_admin=current_user.is_admin,
    )
    return [_inbox_item_to_schema(item) for item in items]


@router.post("/read", response_model=NotificationMarkReadResponse)
def read_notification(
    payload: NotificationMarkReadRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationMarkReadResponse:
    """Acknowledge a notification for the authenticated user."""

    try:
        mark_notification_read(
            db, user_id=current_user.id, notification_id=payload.notification_id
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return NotificationMarkReadResponse(success=True)
