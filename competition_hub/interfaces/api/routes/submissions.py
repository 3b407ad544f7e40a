"""Endpoints for submissions and the judge/participant message thread."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from competition_hub.application.use_cases.submissions import (
    create_submission,
    get_submission,
    list_submission_messages,
    list_submissions,
    post_submission_message,
)
from competition_hub.domain.entities import User
from competition_hub.domain.errors import DomainError
from competition_hub.infrastructure.database import get_db
from competition_hub.interfaces.api.dependencies import get_current_active_user
from competition_hub.interfaces.api.routes_helpers import http_error_from
from competition_hub.interfaces.api.schemas import (
    SubmissionCreate,
    SubmissionMessageCreate,
    SubmissionMessageRead,
    SubmissionRead,
)

router = APIRouter(prefix="/submissions", tags=["submissions"])


@router.get("/", response_model=list[SubmissionRead])
def read_my_submissions(
    competition_id: int | None = Query(None, ge=1),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """List the submissions of the authenticated user."""

    submissions = list_submissions(db, user_id=current_user.id, competition_id=competition_id)
    return [SubmissionRead.model_validate(item) for item in submissions]


@router.post("/", response_model=SubmissionRead, status_code=status.HTTP_201_CREATED)
def hand_in_submission(
    payload: SubmissionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        submission = create_submission(
            db,
            owner=current_user,
            competition_id=payload.competition_id,
            title=payload.title,
            file_url=payload.file_url,
            description=payload.description,
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return SubmissionRead.model_validate(submission)


@router.get("/{submission_id}", response_model=SubmissionRead)
def read_submission(
    submission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        submission = get_submission(db, submission_id, viewer=current_user)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return SubmissionRead.model_validate(submission)


@router.get("/{submission_id}/messages", response_model=list[SubmissionMessageRead])
def read_submission_messages(
    submission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        messages = list_submission_messages(db, submission_id, viewer=current_user)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return [SubmissionMessageRead.model_validate(message) for message in messages]


@router.post(
    "/{submission_id}/messages",
    response_model=SubmissionMessageRead,
    status_code=status.HTTP_201_CREATED,
)
def send_submission_message(
    submission_id: int,
    payload: SubmissionMessageCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Post a message on a submission; the owner or the judges are notified."""

    try:
        message = post_submission_message(
            db, submission_id, author=current_user, content=payload.content
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return SubmissionMessageRead.model_validate(message)
