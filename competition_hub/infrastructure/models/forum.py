"""SQLAlchemy models backing the discussion forum."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from competition_hub.infrastructure.database import Base
from competition_hub.utils import now_in_app_naive_datetime


class ForumPostModel(Base):
    """Database representation of a forum discussion."""

    __tablename__ = "forum_post"

    id = Column(Integer, primary_key=True, index=True)
    author_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="OPEN")
    is_resolved = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
        index=True,
    )

    author = relationship("UserModel", lazy="joined")
    comments = relationship(
        "ForumCommentModel",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class ForumCommentModel(Base):
    """Database representation of a comment on a forum post."""

    __tablename__ = "forum_comment"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer, ForeignKey("forum_post.id", ondelete="CASCADE"), nullable=False, index=True
    )
    author_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    parent_id = Column(
        Integer, ForeignKey("forum_comment.id", ondelete="SET NULL"), nullable=True
    )
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    author = relationship("UserModel", lazy="joined")
    post = relationship("ForumPostModel", back_populates="comments")


class ForumPostReactionModel(Base):
    """Reaction left by a user on a forum post."""

    __tablename__ = "forum_post_reaction"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_reaction"),)

    id = Column(Integer, primary_key=True)
    post_id = Column(
        Integer, ForeignKey("forum_post.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    type = Column(String(20), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


class ForumCommentReactionModel(Base):
    """Reaction left by a user on a forum comment."""

    __tablename__ = "forum_comment_reaction"
    __table_args__ = (
        UniqueConstraint("comment_id", "user_id", name="uq_comment_reaction"),
    )

    id = Column(Integer, primary_key=True)
    comment_id = Column(
        Integer,
        ForeignKey("forum_comment.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    type = Column(String(20), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = [
    "ForumCommentModel",
    "ForumCommentReactionModel",
    "ForumPostModel",
    "ForumPostReactionModel",
]
