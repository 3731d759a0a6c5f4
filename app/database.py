"""
Local Library Catalog — Database Session Management
======================================================

What:  Async SQLAlchemy engine, session factory, and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling and hands the session
       factory to handlers through a dependency, so every read can open its
       own short-lived session and independent reads can run side by side.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per query.

Why a session *factory* (not a session) per request:
    A single AsyncSession cannot run two statements at once. Handlers such
    as author detail fetch the author and the author's books concurrently
    with asyncio.gather, so each service call opens its own session from
    the factory. Tests override get_session_factory with a SQLite-backed one.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    Pool sizing only applies to pooled drivers (asyncpg); the SQLite
    dialects pick their own pool class and reject these arguments.
    """
    options = {"echo": settings.log_level == "DEBUG"}
    if not database_url.startswith("sqlite"):
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return create_async_engine(database_url, **options)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: objects stay readable after the session closes,
    # which the templates rely on
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# ── Engine Configuration ──────────────────────────────────────────────────
engine = build_engine(settings.database_url)

# ── Session Factory ───────────────────────────────────────────────────────
async_session_factory = build_session_factory(engine)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models inherit from this class so they share one metadata object,
    which Alembic and the test fixtures use to create the schema.
    """
    pass


# ── Dependencies ──────────────────────────────────────────────────────────
def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    FastAPI dependency returning the storage handle for a request.

    Handlers never touch the module-level factory directly; tests replace
    this dependency through app.dependency_overrides.
    """
    return async_session_factory


@asynccontextmanager
async def session_scope(
    sessions: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """
    Open a session, commit on success and roll back on error.

    Used by the write paths of the services. Read paths open a plain
    `async with sessions()` block and never commit.
    """
    async with sessions() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            # Roll back on any failure, then let the global handler respond
            await session.rollback()
            raise


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections; called from the app lifespan on shutdown."""
    await engine.dispose()
