"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest  # noqa: E402
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from titanfit.database import Base
from titanfit.llm.service import GenerationService, get_generation_service, get_optional_generation_service
from titanfit.main import app
from titanfit.storage import SqlKeyValueStore
from titanfit.store import FitnessStore, get_store
from titanfit import models  # noqa: F401


@pytest.fixture
def session_factory():
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def kv_store(session_factory):
    return SqlKeyValueStore(session_factory)


@pytest.fixture
def store(kv_store):
    """A seeded store."""
    fitness_store = FitnessStore(kv_store)
    fitness_store.initialize()
    return fitness_store


@pytest.fixture
def ai_service():
    """GenerationService stand-in; configure return values per test."""
    return MagicMock(spec=GenerationService)


@pytest.fixture
def client(store, ai_service):
    """Test client wired to the seeded store and the mocked AI service."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_generation_service] = lambda: ai_service
    app.dependency_overrides[get_optional_generation_service] = lambda: ai_service
    yield TestClient(app)
    app.dependency_overrides.clear()


def _login(client, role, identifier, secret):
    response = client.post(
        "/api/auth/login",
        json={"role": role, "identifier": identifier, "secret": secret},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def coach_headers(client):
    return _login(client, "COACH", "rushi", "rushi9001")


@pytest.fixture
def client_headers(client):
    """Jane Doe (c1)."""
    return _login(client, "CLIENT", "janedoe_fit", "JD-2024-X9Y")
