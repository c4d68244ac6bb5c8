"""Shared fixtures.

Settings are read from the environment when ``app.core.config`` is first
imported, so the test defaults are seeded here before any app import.
"""

import datetime
import os

os.environ.setdefault("DATABASE_PASSWORD", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-at-least-32-bytes")
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")

import jwt
import pytest
from sqlmodel import Session, SQLModel

import app.db.base  # noqa: F401
from app.core.config import settings
from app.db.session import create_db_engine


@pytest.fixture
def engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_db_engine("sqlite://")
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def make_token():
    """Build a bearer token the way the identity provider signs them."""

    def _make(user_id: str = "hunter-1", expires_in: int = 3600, secret: str | None = None, **claims) -> str:
        payload = {
            "sub": user_id,
            "exp": datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(seconds=expires_in),
            **claims,
        }
        return jwt.encode(payload, secret or settings.SECRET_KEY, algorithm=settings.ALGORITHM)

    return _make


@pytest.fixture
def client(session):
    from fastapi.testclient import TestClient

    from app.db.session import get_db
    from app.main import app

    def _get_db():
        yield session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
