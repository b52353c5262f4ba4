"""Shared test fixtures.

Environment variables must be in place before ``judgeboard`` is imported,
since configuration is read at import time.
"""

import os

os.environ["SECRET_KEY"] = "test-secret"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ADMIN_EMAILS"] = "admin@example.com"
os.environ["SCORE_CATEGORIES"] = "Innovation:10,Design:10"
os.environ.pop("GOOGLE_CLIENT_ID", None)
os.environ.pop("GOOGLE_CLIENT_SECRET", None)

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from judgeboard.api.deps import require_admin
from judgeboard.app import app
from judgeboard.core import engine, get_session
from judgeboard.models import ScoreCategory
from judgeboard.services import roster
from judgeboard.services.identity import ROLE_ADMIN, Identity

ADMIN = Identity(
    role=ROLE_ADMIN,
    id="00000000-0000-0000-0000-000000000001",
    name="Admin",
    email="admin@example.com",
)


@pytest.fixture
def session():
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as db:
        roster.seed_categories(db, [("Innovation", 10), ("Design", 10)])
        yield db
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def categories(session) -> dict[str, ScoreCategory]:
    """Seeded categories keyed by name."""
    return {category.name: category for category in roster.list_categories(session)}


@pytest.fixture
def client(session):
    app.dependency_overrides[get_session] = lambda: session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client):
    app.dependency_overrides[require_admin] = lambda: ADMIN
    return client


@pytest.fixture
def login():
    """Sign a judge or team in through the API; the cookie stays on the client."""

    def _login(client: TestClient, role: str, name: str):
        return client.post(f"/auth/{role}/login", json={"name": name})

    return _login
