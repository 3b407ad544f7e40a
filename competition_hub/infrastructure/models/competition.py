"""SQLAlchemy model for competitions."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import expression

from competition_hub.infrastructure.database import Base
from competition_hub.utils import now_in_app_naive_datetime


class CompetitionModel(Base):
    """Database representation of a competition."""

    __tablename__ = "competition"

    id = Column(Integer, primary_key=True, index=True)
    legacy_id = Column(Integer, nullable=False, unique=True, index=True)
    slug = Column(String(120), nullable=False, unique=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False, default="")
    category = Column(String(100), nullable=True)
    prize = Column(String(200), nullable=True)
    starts_at = Column(DateTime, nullable=True)
    ends_at = Column(DateTime, nullable=True)
    is_published = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime,
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["CompetitionModel"]
