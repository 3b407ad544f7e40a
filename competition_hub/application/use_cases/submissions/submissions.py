"""Use cases for handing in and viewing submissions."""

from __future__ import annotations

from collections.abc import Sequence
import logging
import re

from sqlalchemy.orm import Session

from competition_hub.domain.entities import Submission, User
from competition_hub.domain.errors import NotFoundError, PermissionDeniedError, ValidationError
from competition_hub.infrastructure.repositories import (
    CompetitionRepository,
    SubmissionRepository,
)

logger = logging.getLogger(__name__)

_SHARED_FILE_PATTERNS = (
    re.compile(r"^https://drive\.google\.com/file/d/[a-zA-Z0-9_-]+"),
    re.compile(r"^https://drive\.google\.com/drive/folders/[a-zA-Z0-9_-]+"),
    re.compile(r"^https://docs\.google\.com/(document|spreadsheets|presentation)/d/[a-zA-Z0-9_-]+"),
)


def is_shared_file_url(url: str) -> bool:
    return any(pattern.match(url) for pattern in _SHARED_FILE_PATTERNS)


def create_submission(
    session: Session,
    *,
    owner: User,
    competition_id: int,
    title: str,
    file_url: str,
    description: str | None = None,
) -> Submission:
    """Record a submission pointing at a shared Drive or Docs link.

    The link is only checked for its shape; the file itself is never fetched.
    """

    title = (title or "").strip()
    file_url = (file_url or "").strip()
    if not title:
        raise ValidationError("Title is required")
    if not is_shared_file_url(file_url):
        raise ValidationError("Invalid Google Drive URL format")

    competition = CompetitionRepository(session).get(competition_id)
    if competition is None or not competition.is_published:
        raise NotFoundError("Competition not found")

    submission = SubmissionRepository(session).create(
        Submission(
            id=None,
            competition_id=competition_id,
            user_id=owner.id,
            title=title,
            file_url=file_url,
            description=(description or "").strip() or None,
        )
    )
    logger.info(
        "Submission %s created by user %s for competition %s",
        submission.id,
        owner.id,
        competition_id,
    )
    return submission


def list_submissions(
    session: Session, *, user_id: int, competition_id: int | None = None
) -> Sequence[Submission]:
    """Return the submissions of ``user_id``, newest first."""

    return SubmissionRepository(session).list_for_user(user_id, competition_id=competition_id)


def get_submission(session: Session, submission_id: int, *, viewer: User) -> Submission:
    """Return a submission visible to its owner and to administrators."""

    submission = SubmissionRepository(session).get(submission_id)
    if submission is None:
        raise NotFoundError("Submission not found")
    if submission.user_id != viewer.id and not viewer.is_admin:
        raise PermissionDeniedError("Access denied")
    return submission
