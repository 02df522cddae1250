"""
Shared pytest fixtures.

Every test gets its own in-memory SQLite catalog. The app's engine
dependency is overridden so no file is ever written.
"""

import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.domain.catalog.ports import (  # noqa: E402
    AuthorRepository,
    BookRepository,
    LoggerService,
)
from app.infrastructure.catalog.tables import build_engine, create_schema  # noqa: E402
from app.interfaces.catalog.dependencies import get_engine  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def engine():
    """A fresh in-memory catalog database with the schema created."""
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    create_schema(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def client(engine):
    """TestClient bound to the in-memory engine."""
    app.dependency_overrides[get_engine] = lambda: engine
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock(spec=LoggerService)


@pytest.fixture
def author_repo() -> MagicMock:
    return MagicMock(spec=AuthorRepository)


@pytest.fixture
def book_repo() -> MagicMock:
    return MagicMock(spec=BookRepository)
