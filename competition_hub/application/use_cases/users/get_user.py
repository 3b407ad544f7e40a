"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from competition_hub.domain.entities import User
from competition_hub.domain.errors import NotFoundError
from competition_hub.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int) -> User:
    """Return the requested user or raise an error if it does not exist."""

    user = UserRepository(session).get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
