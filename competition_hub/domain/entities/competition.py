"""Domain entity representing a published or draft competition."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Competition:
    """Competition listed on the public board."""

    id: int | None
    legacy_id: int
    slug: str
    title: str
    description: str
    category: str | None
    prize: str | None
    starts_at: datetime | None
    ends_at: datetime | None
    is_published: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["Competition"]
