"""Use cases for the message thread between a participant and the judges."""

from __future__ import annotations

from collections.abc import Sequence
import logging

from sqlalchemy.orm import Session

from competition_hub.application.use_cases.notifications import (
    notify_submission_message_created,
)
from competition_hub.domain.entities import SubmissionMessage, User
from competition_hub.domain.errors import ValidationError
from competition_hub.domain.moderation import ensure_clean_content
from competition_hub.infrastructure.repositories import SubmissionRepository

from .submissions import get_submission

logger = logging.getLogger(__name__)


def list_submission_messages(
    session: Session, submission_id: int, *, viewer: User
) -> Sequence[SubmissionMessage]:
    get_submission(session, submission_id, viewer=viewer)
    return SubmissionRepository(session).list_messages(submission_id)


def post_submission_message(
    session: Session, submission_id: int, *, author: User, content: str
) -> SubmissionMessage:
    """Append a message to the thread and notify the other side."""

    submission = get_submission(session, submission_id, viewer=author)

    content = (content or "").strip()
    if not content:
        raise ValidationError("Content is required")
    try:
        ensure_clean_content(content)
    except ValidationError:
        logger.warning(
            "Blocked submission message from user %s on submission %s",
            author.id,
            submission_id,
        )
        raise

    message = SubmissionRepository(session).create_message(
        SubmissionMessage(
            id=None,
            submission_id=submission_id,
            author_id=author.id,
            content=content,
            is_from_admin=bool(author.is_admin),
        )
    )
    notify_submission_message_created(session, submission=submission, author=author)
    return message
