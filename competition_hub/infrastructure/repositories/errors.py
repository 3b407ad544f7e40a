"""Translation of low level database failures into domain errors."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from competition_hub.domain.errors import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(session: Session, action: str) -> Iterator[None]:
    """Roll back and re-raise database failures as :class:`StoreError`."""

    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Database failure while trying to %s: %s", action, exc)
        raise StoreError(f"Could not {action}") from exc


__all__ = ["store_errors"]
