"""Use cases for reacting to forum posts and comments."""

from sqlalchemy.orm import Session

from competition_hub.domain.entities import REACTION_TYPES
from competition_hub.domain.errors import NotFoundError, ValidationError
from competition_hub.infrastructure.repositories import ForumRepository


def _ensure_reaction(reaction: str) -> str:
    if reaction not in REACTION_TYPES:
        raise ValidationError("Invalid reaction type")
    return reaction


def react_to_post(session: Session, *, post_id: int, user_id: int, reaction: str) -> dict[str, int]:
    """Set the reaction of ``user_id`` on a post and return the totals per type."""

    reaction = _ensure_reaction(reaction)
    repository = ForumRepository(session)
    if repository.get_post(post_id) is None:
        raise NotFoundError("Post not found")
    repository.upsert_post_reaction(post_id=post_id, user_id=user_id, reaction=reaction)
    return repository.count_post_reactions(post_id)


def react_to_comment(
    session: Session, *, comment_id: int, user_id: int, reaction: str
) -> dict[str, int]:
    """Set the reaction of ``user_id`` on a comment and return the totals per type."""

    reaction = _ensure_reaction(reaction)
    repository = ForumRepository(session)
    if repository.get_comment(comment_id) is None:
        raise NotFoundError("Comment not found")
    repository.upsert_comment_reaction(
        comment_id=comment_id, user_id=user_id, reaction=reaction
    )
    return repository.count_comment_reactions(comment_id)
