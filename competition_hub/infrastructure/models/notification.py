"""SQLAlchemy models for notifications, their targets and receipts."""

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


class NotificationModel(Base):
    """Database representation of an addressed notification."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    body = Column(Text, nullable=False)
    target_all = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    target_admin_only = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_by_id = Column(Integer, nullable=True)
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )

    target_institutions = relationship(
        "NotificationTargetInstitutionModel",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    target_users = relationship(
        "NotificationTargetUserModel",
        lazy="selectin",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    receipts = relationship(
        "NotificationReceiptModel",
        back_populates="notification",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class NotificationTargetInstitutionModel(Base):
    """Institution addressed by a notification."""

    __tablename__ = "notification_target_institution"
    __table_args__ = (
        UniqueConstraint("notification_id", "institution", name="uq_notification_institution"),
    )

    id = Column(Integer, primary_key=True)
    notification_id = Column(
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    institution = Column(String(255), nullable=False, index=True)


class NotificationTargetUserModel(Base):
    """User explicitly addressed by a notification."""

    __tablename__ = "notification_target_user"
    __table_args__ = (
        UniqueConstraint("notification_id", "user_id", name="uq_notification_target_user"),
    )

    id = Column(Integer, primary_key=True)
    notification_id = Column(
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, nullable=False, index=True)


class NotificationReceiptModel(Base):
    """Per-user delivery and read state of a notification."""

    __tablename__ = "notification_receipt"
    __table_args__ = (
        UniqueConstraint("notification_id", "user_id", name="uq_notification_receipt"),
    )

    id = Column(Integer, primary_key=True, index=True)
    notification_id = Column(
        Integer,
        ForeignKey("notification.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Integer, nullable=False, index=True)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    read_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    notification = relationship("NotificationModel", back_populates="receipts")


__all__ = [
    "NotificationModel",
    "NotificationReceiptModel",
    "NotificationTargetInstitutionModel",
    "NotificationTargetUserModel",
]
