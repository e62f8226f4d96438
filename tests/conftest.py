"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Column, MetaData, String, Table, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from app.db.engine import get_engine
from app.main import app

SAMPLE_USERS = [
    {"id": "u1", "name": "Ada Lovelace", "email": "ada@example.com", "role": "admin"},
    {"id": "u2", "name": "Alan Turing", "email": "alan@example.com", "role": None},
    {"id": "u3", "name": "Grace Hopper", "email": "grace@example.com", "role": "member"},
]


def _memory_engine() -> Engine:
    # one shared connection so the threadpool sees the same in-memory db
    return create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def empty_engine() -> Engine:
    """Engine whose database has no users table at all."""
    return _memory_engine()


@pytest.fixture
def users_engine() -> Engine:
    """Engine with a users table holding SAMPLE_USERS, including a column the app does not declare."""
    engine = _memory_engine()
    metadata = MetaData()
    table = Table(
        "users",
        metadata,
        Column("id", String, primary_key=True),
        Column("name", String, nullable=False),
        Column("email", String, nullable=False),
        Column("role", String, nullable=True),
    )
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(table.insert(), SAMPLE_USERS)
    return engine


@pytest.fixture
def use_engine():
    """Point the app's get_engine dependency at the given engine for one test."""

    def _use(engine: Engine) -> None:
        app.dependency_overrides[get_engine] = lambda: engine

    yield _use
    app.dependency_overrides.clear()


@pytest.fixture
def client() -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)
