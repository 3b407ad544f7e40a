"""Use cases for forum discussions."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from competition_hub.application.use_cases.notifications import notify_forum_post_created
from competition_hub.config import get_settings
from competition_hub.domain.entities import (
    POST_STATUS_OPEN,
    POST_STATUS_RESOLVED,
    ForumPost,
    ForumPostPage,
    User,
)
from competition_hub.domain.errors import NotFoundError, ValidationError
from competition_hub.domain.moderation import ensure_clean_content
from competition_hub.infrastructure.repositories import ForumRepository

logger = logging.getLogger(__name__)


def list_posts(session: Session, *, page: int = 1, search: str | None = None) -> ForumPostPage:
    """Return one page of posts, most recently updated first."""

    page = max(int(page or 1), 1)
    page_size = get_settings().forum_page_size
    search = (search or "").strip() or None
    posts, total = ForumRepository(session).list_posts(
        skip=(page - 1) * page_size, limit=page_size, search=search
    )
    return ForumPostPage(posts=posts, page=page, page_size=page_size, total=total)


def get_post(session: Session, post_id: int) -> ForumPost:
    post = ForumRepository(session).get_post(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def create_post(session: Session, *, author: User, title: str, content: str) -> ForumPost:
    """Publish a discussion after running it through the moderation filter."""

    title = (title or "").strip()
    content = (content or "").strip()
    if not title or not content:
        raise ValidationError("Title and content are required")

    try:
        ensure_clean_content(f"{title} {content}")
    except ValidationError:
        logger.warning("Blocked forum post from user %s", author.id)
        raise

    post = ForumRepository(session).create_post(
        ForumPost(id=None, author_id=author.id, title=title, content=content)
    )
    notify_forum_post_created(session, post=post, author=author)
    return post


def set_post_resolved(session: Session, post_id: int, *, is_resolved: bool) -> ForumPost:
    repository = ForumRepository(session)
    if repository.get_post(post_id) is None:
        raise NotFoundError("Post not found")
    return repository.update_post_status(
        post_id,
        status=POST_STATUS_RESOLVED if is_resolved else POST_STATUS_OPEN,
        is_resolved=is_resolved,
    )
