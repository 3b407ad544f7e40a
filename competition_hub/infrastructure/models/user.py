"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from sqlalchemy.sql import expression

from competition_hub.infrastructure.database import Base
from competition_hub.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a platform user."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    institution = Column(String(255), nullable=True, index=True)
    is_admin = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    last_login = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
