"""Domain entities exposed by the application."""

from .competition import Competition
from .forum import (
    POST_STATUS_OPEN,
    POST_STATUS_RESOLVED,
    REACTION_TYPES,
    ForumAuthor,
    ForumComment,
    ForumPost,
    ForumPostPage,
    summarize_reactions,
)
from .notification import Notification, NotificationInboxItem, NotificationReceipt
from .submission import SUBMISSION_STATUS_PENDING, Submission, SubmissionMessage
from .user import User

__all__ = [
    "Competition",
    "ForumAuthor",
    "ForumComment",
    "ForumPost",
    "ForumPostPage",
    "Notification",
    "NotificationInboxItem",
    "NotificationReceipt",
    "POST_STATUS_OPEN",
    "POST_STATUS_RESOLVED",
    "REACTION_TYPES",
    "SUBMISSION_STATUS_PENDING",
    "Submission",
    "SubmissionMessage",
    "User",
    "summarize_reactions",
]
