"""Automatic notifications emitted by forum and submission activity."""

from __future__ import annotations

from sqlalchemy.orm import Session

from competition_hub.domain.entities import ForumPost, Submission, User

from .create_notification import create_notification


def notify_forum_post_created(session: Session, *, post: ForumPost, author: User) -> None:
    """Alert administrators when a participant opens a discussion."""

    if author.is_admin:
        return
    create_notification(
        session,
        title="New forum post",
        body=f"{author.name or 'User'} created a new discussion: {post.title}",
        target_all=False,
        target_admin_only=True,
        created_by_id=author.id,
    )


def notify_forum_comment_created(
    session: Session, *, post: ForumPost, author: User
) -> None:
    """Alert administrators and the post author about a new comment."""

    if not author.is_admin:
        create_notification(
            session,
            title="New forum comment",
            body=f"{author.name or 'User'} commented on a forum post",
            target_all=False,
            target_admin_only=True,
            created_by_id=author.id,
        )
    if post.author_id != author.id:
        create_notification(
            session,
            title="New reply on your forum post",
            body=f"{author.name or 'Someone'} replied to your discussion",
            target_all=False,
            target_admin_only=False,
            target_user_ids=[post.author_id],
            created_by_id=author.id,
        )


def notify_submission_message_created(
    session: Session, *, submission: Submission, author: User
) -> None:
    """Tell the owner about a judge's message, or the judges about the owner's."""

    if author.is_admin:
        create_notification(
            session,
            title="Update on your submission",
            body=f'{author.name or "A judge"} commented on your submission "{submission.title}"',
            target_all=False,
            target_admin_only=False,
            target_user_ids=[submission.user_id],
            created_by_id=author.id,
        )
        return
    create_notification(
        session,
        title="Participant replied on submission",
        body=f'{author.name or "Participant"} replied on submission "{submission.title}"',
        target_all=False,
        target_admin_only=True,
        created_by_id=author.id,
    )
