from .auth import Token
from .competition import CompetitionCreate, CompetitionRead, CompetitionUpdate
from .forum import (
    ForumCommentCreate,
    ForumCommentRead,
    ForumPageMeta,
    ForumPostCreate,
    ForumPostPageRead,
    ForumPostRead,
    ForumPostStatusUpdate,
    ReactionRequest,
)
from .notification import (
    AdminNotificationSummaryRead,
    NotificationContent,
    NotificationCreate,
    NotificationInboxItemRead,
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)
from .submission import (
    SubmissionCreate,
    SubmissionMessageCreate,
    SubmissionMessageRead,
    SubmissionRead,
)
from .user import UserCreate, UserRead, UserSummaryRead

__all__ = [
    "AdminNotificationSummaryRead",
    "CompetitionCreate",
    "CompetitionRead",
    "CompetitionUpdate",
    "ForumCommentCreate",
    "ForumCommentRead",
    "ForumPageMeta",
    "ForumPostCreate",
    "ForumPostPageRead",
    "ForumPostRead",
    "ForumPostStatusUpdate",
    "NotificationContent",
    "NotificationCreate",
    "NotificationInboxItemRead",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "ReactionRequest",
    "SubmissionCreate",
    "SubmissionMessageCreate",
    "SubmissionMessageRead",
    "SubmissionRead",
    "Token",
    "UserCreate",
    "UserRead",
    "UserSummaryRead",
]
