"""Pytest fixtures for DD Task tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session

import models  # noqa: F401
from database import build_engine, get_session
from main import app


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of a test."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    """TestClient whose requests use the in-memory database."""

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_tutorial(client):
    """Create a tutorial through the API and return its JSON."""

    def _make(title="Tutorial", description="Desc", published=False):
        response = client.post(
            "/api/tutorials",
            json={"title": title, "description": description, "published": published},
        )
        assert response.status_code == 201
        return response.json()

    return _make
