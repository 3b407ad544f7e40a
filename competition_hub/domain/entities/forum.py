"""Domain entities for the discussion forum."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

POST_STATUS_OPEN = "OPEN"
POST_STATUS_RESOLVED = "RESOLVED"

REACTION_TYPES: tuple[str, ...] = (
    "LIKE",
    "SUPPORT",
    "LOVE",
    "CELEBRATE",
    "FUNNY",
    "ANGRY",
    "DOWNVOTE",
)


@dataclass
class ForumAuthor:
    """Public summary of the user who wrote a post or comment."""

    id: int
    name: str
    institution: str | None
    is_admin: bool


@dataclass
class ForumPost:
    id: int | None
    author_id: int
    title: str
    content: str
    status: str = POST_STATUS_OPEN
    is_resolved: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    author: ForumAuthor | None = None
    comment_count: int = 0
    reaction_summary: dict[str, int] = field(default_factory=dict)


@dataclass
class ForumComment:
    id: int | None
    post_id: int
    author_id: int
    content: str
    parent_id: int | None = None
    created_at: datetime | None = None
    author: ForumAuthor | None = None
    reaction_summary: dict[str, int] = field(default_factory=dict)


@dataclass
class ForumPostPage:
    """One page of forum posts with pagination metadata."""

    posts: list[ForumPost]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return -(-self.total // self.page_size)


def summarize_reactions(counts: dict[str, int]) -> dict[str, int]:
    """Return a count for every known reaction type, defaulting to zero."""

    return {reaction: int(counts.get(reaction, 0)) for reaction in REACTION_TYPES}


__all__ = [
    "ForumAuthor",
    "ForumComment",
    "ForumPost",
    "ForumPostPage",
    "POST_STATUS_OPEN",
    "POST_STATUS_RESOLVED",
    "REACTION_TYPES",
    "summarize_reactions",
]
