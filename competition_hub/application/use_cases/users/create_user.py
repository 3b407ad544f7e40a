"""Use case for registering users."""

from sqlalchemy.orm import Session

from competition_hub.domain.entities import User
from competition_hub.domain.errors import ValidationError
from competition_hub.infrastructure.repositories import UserRepository
from competition_hub.infrastructure.security import get_password_hash
from competition_hub.utils import now_in_app_timezone

MIN_PASSWORD_LENGTH = 8


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    institution: str | None = None,
    is_admin: bool = False,
) -> User:
    """Create a new user ensuring unique email addresses."""

    name = (name or "").strip()
    email = (email or "").strip().lower()
    if not name:
        raise ValidationError("Name is required")
    if not email:
        raise ValidationError("Email is required")
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )

    repository = UserRepository(session)
    if repository.get_by_email(email):
        raise ValidationError("Email is already registered")

    user = User(
        id=None,
        name=name,
        email=email,
        password=get_password_hash(password),
        institution=(institution or "").strip() or None,
        is_admin=is_admin,
        is_active=True,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
