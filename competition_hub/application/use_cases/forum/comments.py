"""Use cases for comments on forum discussions."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from competition_hub.application.use_cases.notifications import notify_forum_comment_created
from competition_hub.domain.entities import ForumComment, User
from competition_hub.domain.errors import NotFoundError, ValidationError
from competition_hub.domain.moderation import ensure_clean_content
from competition_hub.infrastructure.repositories import ForumRepository

logger = logging.getLogger(__name__)


def list_comments(session: Session, post_id: int) -> list[ForumComment]:
    """Return the comments of ``post_id`` in the order they were written."""

    return ForumRepository(session).list_comments(post_id)


def create_comment(
    session: Session,
    *,
    author: User,
    post_id: int,
    content: str,
    parent_id: int | None = None,
) -> ForumComment:
    content = (content or "").strip()
    if not content:
        raise ValidationError("Content is required")

    try:
        ensure_clean_content(content)
    except ValidationError:
        logger.warning("Blocked forum comment from user %s on post %s", author.id, post_id)
        raise

    repository = ForumRepository(session)
    post = repository.get_post(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    if parent_id is not None:
        parent = repository.get_comment(parent_id)
        if parent is None or parent.post_id != post_id:
            raise ValidationError("Parent comment does not belong to this post")

    comment = repository.create_comment(
        ForumComment(
            id=None,
            post_id=post_id,
            author_id=author.id,
            content=content,
            parent_id=parent_id,
        )
    )
    notify_forum_comment_created(session, post=post, author=author)
    return comment


def delete_comment(session: Session, comment_id: int) -> None:
    if not ForumRepository(session).delete_comment(comment_id):
        raise NotFoundError("Comment not found")
