"""Repository implementations for infrastructure layer."""

from .competition_repository import CompetitionRepository
from .forum_repository import ForumRepository
from .notification_repository import NotificationReceiptRepository, NotificationRepository
from .submission_repository import SubmissionRepository
from .user_repository import UserRepository

__all__ = [
    "CompetitionRepository",
    "ForumRepository",
    "NotificationReceiptRepository",
    "NotificationRepository",
    "SubmissionRepository",
    "UserRepository",
]
