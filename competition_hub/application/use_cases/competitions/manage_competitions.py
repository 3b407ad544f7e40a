"""Administrative use cases for competitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any
import re

from sqlalchemy.orm import Session

from competition_hub.domain.entities import Competition
from competition_hub.domain.errors import NotFoundError, ValidationError
from competition_hub.infrastructure.repositories import CompetitionRepository
from competition_hub.utils import ensure_app_timezone

_SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_UPDATABLE_FIELDS = frozenset(
    {
        "slug",
        "title",
        "description",
        "category",
        "prize",
        "starts_at",
        "ends_at",
        "is_published",
    }
)


def _validate(competition: Competition) -> None:
    if not competition.title.strip():
        raise ValidationError("Title is required")
    if not _SLUG_PATTERN.match(competition.slug):
        raise ValidationError("Slug must contain lowercase letters, digits and hyphens")
    if (
        competition.starts_at is not None
        and competition.ends_at is not None
        and ensure_app_timezone(competition.ends_at)
        <= ensure_app_timezone(competition.starts_at)
    ):
        raise ValidationError("The competition must end after it starts")


def list_all_competitions(session: Session) -> Sequence[Competition]:
    return CompetitionRepository(session).list()


def create_competition(
    session: Session,
    *,
    legacy_id: int,
    slug: str,
    title: str,
    description: str = "",
    category: str | None = None,
    prize: str | None = None,
    starts_at: datetime | None = None,
    ends_at: datetime | None = None,
    is_published: bool = False,
) -> Competition:
    """Create a competition with a unique slug and legacy id."""

    competition = Competition(
        id=None,
        legacy_id=legacy_id,
        slug=(slug or "").strip().lower(),
        title=(title or "").strip(),
        description=description or "",
        category=category,
        prize=prize,
        starts_at=starts_at,
        ends_at=ends_at,
        is_published=is_published,
    )
    _validate(competition)

    repository = CompetitionRepository(session)
    if repository.get_by_slug(competition.slug):
        raise ValidationError("A competition with this slug already exists")
    if repository.get_by_legacy_id(legacy_id):
        raise ValidationError("A competition with this legacy id already exists")
    return repository.create(competition)


def update_competition(
    session: Session, competition_id: int, changes: dict[str, Any]
) -> Competition:
    """Apply ``changes`` to an existing competition."""

    repository = CompetitionRepository(session)
    current = repository.get(competition_id)
    if current is None:
        raise NotFoundError("Competition not found")

    unknown = set(changes) - _UPDATABLE_FIELDS
    if unknown:
        raise ValidationError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")

    if "slug" in changes and changes["slug"] is not None:
        changes = {**changes, "slug": changes["slug"].strip().lower()}
    updated = replace(current, **changes)
    _validate(updated)

    if updated.slug != current.slug:
        existing = repository.get_by_slug(updated.slug)
        if existing is not None and existing.id != competition_id:
            raise ValidationError("A competition with this slug already exists")
    return repository.update(updated)
