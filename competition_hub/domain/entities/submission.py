"""Domain entities for competition submissions and their discussion thread."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .forum import ForumAuthor

SUBMISSION_STATUS_PENDING = "PENDING"


@dataclass
class Submission:
    """Entry a participant handed in for a competition."""

    id: int | None
    competition_id: int
    user_id: int
    title: str
    file_url: str
    description: str | None = None
    status: str = SUBMISSION_STATUS_PENDING
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class SubmissionMessage:
    id: int | None
    submission_id: int
    author_id: int
    content: str
    is_from_admin: bool = False
    created_at: datetime | None = None
    author: ForumAuthor | None = None


__all__ = ["SUBMISSION_STATUS_PENDING", "Submission", "SubmissionMessage"]
