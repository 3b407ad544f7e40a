"""Persistence layer for competitions."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import or_
from sqlalchemy.orm import Session

from competition_hub.domain.entities import Competition
from competition_hub.infrastructure.models import CompetitionModel
from competition_hub.utils import ensure_app_naive_datetime, ensure_app_timezone

from .errors import store_errors


class CompetitionRepository:
    """Provide CRUD operations for :class:`Competition` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, published_only: bool = False) -> Sequence[Competition]:
        query = self.session.query(CompetitionModel)
        if published_only:
            query = query.filter(CompetitionModel.is_published.is_(True))
        query = query.order_by(CompetitionModel.legacy_id.asc())
        return [self._to_entity(model) for model in query.all()]

    def get(self, competition_id: int) -> Competition | None:
        model = self.session.get(CompetitionModel, competition_id)
        return self._to_entity(model) if model else None

    def find_published(self, slug: str) -> Competition | None:
        """Resolve a published competition by slug or numeric legacy id."""

        conditions = [CompetitionModel.slug == slug]
        if slug.isdigit():
            conditions.append(CompetitionModel.legacy_id == int(slug))
        model = (
            self.session.query(CompetitionModel)
            .filter(CompetitionModel.is_published.is_(True))
            .filter(or_(*conditions))
            .order_by(CompetitionModel.id.asc())
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_slug(self, slug: str) -> Competition | None:
        model = self.session.query(CompetitionModel).filter_by(slug=slug).first()
        return self._to_entity(model) if model else None

    def get_by_legacy_id(self, legacy_id: int) -> Competition | None:
        model = self.session.query(CompetitionModel).filter_by(legacy_id=legacy_id).first()
        return self._to_entity(model) if model else None

    def create(self, competition: Competition) -> Competition:
        model = CompetitionModel()
        self._apply_entity_to_model(model, competition)
        with store_errors(self.session, "create the competition"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def update(self, competition: Competition) -> Competition:
        model = self.session.get(CompetitionModel, competition.id)
        if model is None:
            msg = f"Competition with id {competition.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, competition)
        with store_errors(self.session, "update the competition"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: CompetitionModel, competition: Competition) -> None:
        model.legacy_id = competition.legacy_id
        model.slug = competition.slug
        model.title = competition.title
        model.description = competition.description
        model.category = competition.category
        model.prize = competition.prize
        model.starts_at = ensure_app_naive_datetime(competition.starts_at)
        model.ends_at = ensure_app_naive_datetime(competition.ends_at)
        model.is_published = competition.is_published

    @staticmethod
    def _to_entity(model: CompetitionModel) -> Competition:
        return Competition(
            id=model.id,
            legacy_id=model.legacy_id,
            slug=model.slug,
            title=model.title,
            description=model.description,
            category=model.category,
            prize=model.prize,
            starts_at=ensure_app_timezone(model.starts_at),
            ends_at=ensure_app_timezone(model.ends_at),
            is_published=bool(model.is_published),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["CompetitionRepository"]
