"""Endpoints of the discussion forum."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from competition_hub.application.use_cases.forum import (
    create_comment,
    create_post,
    delete_comment,
    get_post,
    list_comments,
    list_posts,
    react_to_comment,
    react_to_post,
    set_post_resolved,
)
from competition_hub.domain.entities import User
from competition_hub.domain.errors import DomainError
from competition_hub.infrastructure.database import get_db
from competition_hub.interfaces.api.dependencies import get_current_active_user, require_admin
from competition_hub.interfaces.api.routes_helpers import http_error_from
from competition_hub.interfaces.api.schemas import (
    ForumCommentCreate,
    ForumCommentRead,
    ForumPageMeta,
    ForumPostCreate,
    ForumPostPageRead,
    ForumPostRead,
    ForumPostStatusUpdate,
    ReactionRequest,
)

router = APIRouter(prefix="/forum", tags=["forum"])


@router.get("/", response_model=ForumPostPageRead)
def read_posts(
    page: int = Query(1, ge=1),
    search: str | None = Query(None, description="Text searched in titles and contents"),
    db: Session = Depends(get_db),
) -> ForumPostPageRead:
    """Return a page of discussions, most recently active first."""

    result = list_posts(db, page=page, search=search)
    return ForumPostPageRead(
        data=[ForumPostRead.model_validate(post) for post in result.posts],
        meta=ForumPageMeta(
            page=result.page,
            page_size=result.page_size,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.post("/", response_model=ForumPostRead, status_code=status.HTTP_201_CREATED)
def publish_post(
    payload: ForumPostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        post = create_post(db, author=current_user, title=payload.title, content=payload.content)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return ForumPostRead.model_validate(post)


@router.get("/{post_id}", response_model=ForumPostRead)
def read_post(post_id: int, db: Session = Depends(get_db)):
    try:
        post = get_post(db, post_id)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return ForumPostRead.model_validate(post)


@router.patch("/{post_id}", response_model=ForumPostRead)
def update_post_status(
    post_id: int,
    payload: ForumPostStatusUpdate,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
):
    """Mark a discussion as resolved or reopen it."""

    try:
        post = set_post_resolved(db, post_id, is_resolved=payload.is_resolved)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return ForumPostRead.model_validate(post)


@router.get("/{post_id}/comments", response_model=list[ForumCommentRead])
def read_comments(post_id: int, db: Session = Depends(get_db)):
    return [ForumCommentRead.model_validate(c) for c in list_comments(db, post_id)]


@router.post(
    "/{post_id}/comments",
    response_model=ForumCommentRead,
    status_code=status.HTTP_201_CREATED,
)
def publish_comment(
    post_id: int,
    payload: ForumCommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        comment = create_comment(
            db,
            author=current_user,
            post_id=post_id,
            content=payload.content,
            parent_id=payload.parent_id,
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return ForumCommentRead.model_validate(comment)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_comment(
    comment_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(require_admin),
) -> None:
    try:
        delete_comment(db, comment_id)
    except DomainError as exc:
        raise http_error_from(exc) from exc


@router.post("/{post_id}/react", response_model=dict[str, int])
def react_on_post(
    post_id: int,
    payload: ReactionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Set the caller's reaction on a post and return the totals per type."""

    try:
        return react_to_post(db, post_id=post_id, user_id=current_user.id, reaction=payload.type)
    except DomainError as exc:
        raise http_error_from(exc) from exc


@router.post("/comments/{comment_id}/react", response_model=dict[str, int])
def react_on_comment(
    comment_id: int,
    payload: ReactionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        return react_to_comment(
            db, comment_id=comment_id, user_id=current_user.id, reaction=payload.type
        )
    except DomainError as exc:
        raise http_error_from(exc) from exc
