"""Public endpoints of the competition board."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from competition_hub.application.use_cases.competitions import (
    get_published_competition,
    list_published_competitions,
)
from competition_hub.domain.errors import DomainError
from competition_hub.infrastructure.database import get_db
from competition_hub.interfaces.api.routes_helpers import http_error_from
from competition_hub.interfaces.api.schemas import CompetitionRead

router = APIRouter(prefix="/competitions", tags=["competitions"])


@router.get("/", response_model=list[CompetitionRead])
def read_competitions(db: Session = Depends(get_db)):
    """List published competitions in their board order."""

    return [CompetitionRead.model_validate(item) for item in list_published_competitions(db)]


@router.get("/{slug}", response_model=CompetitionRead)
def read_competition(slug: str, db: Session = Depends(get_db)):
    """Return a published competition by slug or legacy numeric id."""

    try:
        competition = get_published_competition(db, slug)
    except DomainError as exc:
        raise http_error_from(exc) from exc
    return CompetitionRead.model_validate(competition)
