"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a platform participant or administrator."""

    id: int | None
    name: str
    email: str
    password: str
    institution: str | None
    is_admin: bool
    is_active: bool
    created_at: datetime | None
    last_login: datetime | None = None


__all__ = ["User"]
