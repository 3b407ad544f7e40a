"""SQLAlchemy models for submissions and the messages exchanged on them."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from competition_hub.infrastructure.database import Base
from competition_hub.utils import now_in_app_naive_datetime


class SubmissionModel(Base):
    """Database representation of a competition submission."""

    __tablename__ = "submission"

    id = Column(Integer, primary_key=True, index=True)
    competition_id = Column(Integer, ForeignKey("competition.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    file_url = Column(String(500), nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="PENDING")
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    messages = relationship(
        "SubmissionMessageModel",
        back_populates="submission",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class SubmissionMessageModel(Base):
    """Message posted by the owner or a judge on a submission."""

    __tablename__ = "submission_message"

    id = Column(Integer, primary_key=True, index=True)
    submission_id = Column(
        Integer, ForeignKey("submission.id", ondelete="CASCADE"), nullable=False, index=True
    )
    author_id = Column(Integer, ForeignKey("user.id"), nullable=False)
    content = Column(Text, nullable=False)
    is_from_admin = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    author = relationship("UserModel", lazy="joined")
    submission = relationship("SubmissionModel", back_populates="messages")


__all__ = ["SubmissionMessageModel", "SubmissionModel"]
