"""Use cases for competition submissions and their message threads."""

from .messages import list_submission_messages, post_submission_message
from .submissions import create_submission, get_submission, list_submissions

__all__ = [
    "create_submission",
    "get_submission",
    "list_submission_messages",
    "list_submissions",
    "post_submission_message",
]
