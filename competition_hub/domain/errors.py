"""Error taxonomy shared by the application layers."""

from __future__ import annotations

from collections.abc import Sequence


class DomainError(ValueError):
    """Base class for errors raised by use cases."""


class ValidationError(DomainError):
    """A required field is missing or a value is not acceptable."""


class NotFoundError(DomainError):
    """A referenced entity does not exist."""


class PermissionDeniedError(DomainError):
    """The acting user is not allowed to perform the operation."""


class ContentBlockedError(ValidationError):
    """Free text matched one or more banned terms."""

    def __init__(self, blocked: Sequence[str], message: str = "Content contains blocked words") -> None:
        super().__init__(message)
        self.blocked = list(blocked)


class StoreError(RuntimeError):
    """The persistent store failed for a reason other than an expected conflict."""


__all__ = [
    "ContentBlockedError",
    "DomainError",
    "NotFoundError",
    "PermissionDeniedError",
    "StoreError",
    "ValidationError",
]
