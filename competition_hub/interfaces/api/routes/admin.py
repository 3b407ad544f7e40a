"""Administrative endpoints for notifications and competitions."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from competition_hub.application.use_cases.competitions import (
    create_competition,
    list_all_competitions,
    update_competition,
)
from competition_hub.application.use_cases.notifications import (
    create_notification,
    get_admin_notification_summary,
)
from competition_hub.domain.entities import Notification, User
from competition_hub.domain.errors import DomainError
from competition_hub.infrastructure.database import get_db
from competition_hub.interfaces.api.dependencies import require_admin
from competition_hub.interfaces.api.routes_helpers import http_error_from
from competition_hub.interfaces.api.schemas import (
    AdminNotificationSummaryRead,
    CompetitionCreate,
    CompetitionRead,
    CompetitionUpdate,
    NotificationCreate,
    NotificationRead,
)

router = APIRouter(prefix="/admin", tags=["admin"])


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or 0,
        title=notification.title,
        body=notification.body,
        target_all=notification.target_all,
        target_admin_only=notification.target_admin_only,
        target_institutions=sorted(notification.target_institutions),
        target_user_ids=sorted(notification.target_user_ids),
        created_by_id=notification.created_by_id,
        created_at=notification.created_at,
    )


@router.get("/notifications/", response_model=AdminNotificationSummaryRead)
def read_notification_summary(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> AdminNotificationSummaryRead:
    """Return the counters shown on the admin dashboard badge."""

    summary = get_admin_notification_summary(db, user_id=current_user.id)
    return AdminNotificationSummaryRead(
        unread_admin_notifications=summary.unread_admin_notifications,
        recent_participant_messages=summary.recent_participant_messages,
        recent_forum_comments=summary.recent_forum_comments,
        total=summary.total,
    )


@router.post(
    "/notifications/",
    response_model=NotificationRead,
    status_code=status.HTTP_201_CREATED,
)
def author_notification(
    payload: NotificationCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> NotificationRead:
    """Publish a notification addressed to the given audience."""

    try:
        notification = create_notification(
            db,
            title=payload.title,
            body=payload.body,
            target_all=payload.target_all,
            target_admin_only=payload.target_admin_only,
            target_institutions=payload.target_institutions,
            target_user_ids=payload.target_user_ids,
            created_by_id=current_user.id,
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return _notification_to_schema(notification)


@router.get("/competitions/", response_model=list[CompetitionRead])
def read_all_competitions(
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """List every competition, including unpublished drafts."""

    return [CompetitionRead.model_validate(item) for item in list_all_competitions(db)]


@router.post(
    "/competitions/",
    response_model=CompetitionRead,
    status_code=status.HTTP_201_CREATED,
)
def add_competition(
    payload: CompetitionCreate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    try:
        competition = create_competition(db, **payload.model_dump())
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return CompetitionRead.model_validate(competition)


@router.patch("/competitions/{competition_id}", response_model=CompetitionRead)
def edit_competition(
    competition_id: int,
    payload: CompetitionUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    try:
        competition = update_competition(
            db, competition_id, payload.model_dump(exclude_unset=True)
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return CompetitionRead.model_validate(competition)
