"""
RESTful Notes — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own SQLite database file (aiosqlite driver) with
       the schema created, so tests never see each other's rows.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine:        AsyncEngine on a temporary SQLite file
    ├── session_factory:  async_sessionmaker bound to db_engine
    ├── db_session:       one open AsyncSession for service tests
    ├── test_app:         a fresh FastAPI app wired to db_engine
    └── test_client:      HTTPX AsyncClient talking to test_app
"""

import os
from typing import AsyncGenerator

# Override settings BEFORE any restnotes imports: the module-level engine is
# built from DATABASE_URL at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["CREATE_SCHEMA"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from restnotes.database import build_engine, create_schema, get_db_session

BASE_URL = "http://test"


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'restnotes.db'}")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine) -> async_sessionmaker:
    """
    Sessions configured like the application's: no expiry on commit.

    Usage:
        async with session_factory() as session:
            note = await NoteRepository(session).find_by_id(note_id)
    """
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# API Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_app(session_factory):
    """
    A fresh application whose get_db_session uses the per-test database.

    The override keeps the production contract: commit when the handler
    returns, roll back when it raises.
    """
    from restnotes.main import create_app

    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest_asyncio.fixture
async def test_client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_index(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as client:
        yield client


# ══════════════════════════════════════════════════════════════════════════
# Helpers
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def create_tag(test_client):
    """POST a tag and return its URI from the Location header."""

    async def _create(name: str) -> str:
        response = await test_client.post("/tags", json={"name": name})
        assert response.status_code == 201, response.text
        return response.headers["location"]

    return _create


@pytest.fixture
def create_note(test_client):
    """POST a note and return its URI from the Location header."""

    async def _create(title: str, body: str, tags=None) -> str:
        payload = {"title": title, "body": body}
        if tags is not None:
            payload["tags"] = tags
        response = await test_client.post("/notes", json=payload)
        assert response.status_code == 201, response.text
        return response.headers["location"]

    return _create
