"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from competition_hub.domain.errors import (
    ContentBlockedError,
    DomainError,
    NotFoundError,
    PermissionDeniedError,
)


def http_error_from(exc: DomainError) -> HTTPException:
    """Return the HTTP error matching a domain error raised by a use case."""

    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, PermissionDeniedError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc))
    if isinstance(exc, ContentBlockedError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": str(exc), "blocked": exc.blocked},
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
