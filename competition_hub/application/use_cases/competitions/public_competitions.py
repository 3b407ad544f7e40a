"""Read-only use cases backing the public competition board."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from competition_hub.domain.entities import Competition
from competition_hub.domain.errors import NotFoundError, ValidationError
from competition_hub.infrastructure.repositories import CompetitionRepository


def list_published_competitions(session: Session) -> Sequence[Competition]:
    return CompetitionRepository(session).list(published_only=True)


def get_published_competition(session: Session, slug: str) -> Competition:
    """Resolve a published competition by slug or by its numeric legacy id."""

    slug = (slug or "").strip()
    if not slug:
        raise ValidationError("Slug is required")
    competition = CompetitionRepository(session).find_published(slug)
    if competition is None:
        raise NotFoundError("Competition not found")
    return competition
