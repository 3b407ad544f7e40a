"""Shared fixtures: a throwaway SQLite database and authenticated clients."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "competition_hub_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from competition_hub.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from competition_hub.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from competition_hub.infrastructure.models import UserModel  # noqa: E402
from competition_hub.infrastructure.security import get_password_hash  # noqa: E402

DEFAULT_PASSWORD = "StrongPass123"
_DEFAULT_PASSWORD_HASH = get_password_hash(DEFAULT_PASSWORD)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from an empty schema."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user():
    """Insert users directly, reusing a precomputed password hash."""

    counter = {"value": 0}

    def _make_user(
        *,
        name: str = "Participant",
        email: str | None = None,
        institution: str | None = None,
        is_admin: bool = False,
        is_active: bool = True,
    ) -> int:
        counter["value"] += 1
        with SessionLocal() as db:
            user = UserModel(
                name=name,
                email=email or f"user{counter['value']}@example.com",
                password=_DEFAULT_PASSWORD_HASH,
                institution=institution,
                is_admin=is_admin,
                is_active=is_active,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            return user.id

    return _make_user


@pytest.fixture()
def client():
    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def login(client):
    """Return bearer headers for the given email."""

    def _login(email: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = client.post(
            "/auth/token",
            data={"username": email, "password": password},
            headers={"Content-Type": "application/x-www-form-urlencoded"},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _login
