"""ORM models used by the application infrastructure."""

from .competition import CompetitionModel
from .forum import (
    ForumCommentModel,
    ForumCommentReactionModel,
    ForumPostModel,
    ForumPostReactionModel,
)
from .notification import (
    NotificationModel,
    NotificationReceiptModel,
    NotificationTargetInstitutionModel,
    NotificationTargetUserModel,
)
from .submission import SubmissionMessageModel, SubmissionModel
from .user import UserModel

__all__ = [
    "CompetitionModel",
    "ForumCommentModel",
    "ForumCommentReactionModel",
    "ForumPostModel",
    "ForumPostReactionModel",
    "NotificationModel",
    "NotificationReceiptModel",
    "NotificationTargetInstitutionModel",
    "NotificationTargetUserModel",
    "SubmissionMessageModel",
    "SubmissionModel",
    "UserModel",
]
