"""
RESTful Notes — Database Session Management
===========================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
How:   Creates an async engine, provides a session dependency that commits on
       success and rolls back on error, so a failed request never leaves a
       partial write behind (e.g. half-replaced tag associations).
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Engine Options:
    PostgreSQL (asyncpg):  pooled connections sized from settings,
                           pool_recycle=3600.
    SQLite (aiosqlite):    no pool sizing; in-memory URLs share one
                           connection through StaticPool; foreign keys are
                           switched on for every connection.
"""

from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from restnotes.config import settings


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless this pragma is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, **overrides: Any) -> AsyncEngine:
    """
    Create an async engine configured for the given backend.

    Args:
        database_url: Async SQLAlchemy URL (asyncpg or aiosqlite driver)
        overrides:    Extra keyword arguments passed to create_async_engine

    Returns:
        A new AsyncEngine. The caller owns it and must dispose it.
    """
    url = make_url(database_url)
    options: dict = {
        "echo": settings.log_level == "DEBUG",
        "pool_pre_ping": settings.db_pool_pre_ping,
    }

    is_sqlite = url.get_backend_name() == "sqlite"
    if is_sqlite:
        if url.database in (None, "", ":memory:"):
            options["poolclass"] = StaticPool
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_recycle=3600,
        )
    options.update(overrides)

    new_engine = create_async_engine(database_url, **options)
    if is_sqlite:
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


# ── Engine & Session Factory ──────────────────────────────────────────────
engine = build_engine(settings.database_url)

# expire_on_commit=False: representations are assembled after the flush and
# must not trigger a lazy reload outside the session's greenlet
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""
    pass


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the route handler
        3. On success: commits the transaction
        4. On error: rolls back and re-raises for the exception handlers
        5. Always: closes the session (returns connection to pool)

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def create_schema(target: Optional[AsyncEngine] = None) -> None:
    """
    Create every table registered on Base.metadata that does not exist yet.

    When:  Application startup (if settings.create_schema) and test fixtures.
    """
    # Registers Note, Tag and note_tags on the metadata
    import restnotes.models  # noqa: F401

    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """
    Gracefully closes all connections in the pool.

    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
