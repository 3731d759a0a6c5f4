"""
Local Library Catalog — Test Configuration (conftest.py)
===========================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Each test gets its own SQLite file database (aiosqlite), with the
       schema created from Base.metadata, and an app whose session-factory
       dependency points at it.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── session_factory: async_sessionmaker bound to a fresh SQLite file
    ├── test_client:     HTTPX AsyncClient talking to the app over ASGI
    ├── author / genre / book: seeded records for page tests
    └── mock_sessions:   MagicMock stand-in for handler tests with patched services
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import MagicMock

# Override settings for testing BEFORE any app imports
# Why: app.database builds its engine from these at import time
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="catalog_test_"), "unused.db"
)
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["DISPLAY_LOCALE"] = "en_US"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.database import Base, build_engine, build_session_factory, get_session_factory
import app.models  # noqa: F401
from app.schemas.submissions import AuthorData, BookData, GenreData
from app.services.author_service import author_service
from app.services.book_service import book_service
from app.services.genre_service import genre_service


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """
    Provides a session factory over an empty, fully migrated SQLite database.

    A file (not :memory:) so that concurrent reads on separate sessions see
    the same data.
    """
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an async HTTP client for page tests.

    Redirects are not followed, so tests can assert on 302 + Location.
    """
    from app.main import create_app

    application = create_app()
    application.dependency_overrides[get_session_factory] = lambda: session_factory
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_sessions():
    """A stand-in storage handle for tests that patch the services."""
    return MagicMock(name="sessions")


@pytest_asyncio.fixture
async def author(session_factory):
    return await author_service.create_author(
        session_factory, AuthorData(first_name="Ursula", last_name="LeGuin")
    )


@pytest_asyncio.fixture
async def genre(session_factory):
    return await genre_service.create_genre(session_factory, GenreData(name="Fantasy"))


@pytest_asyncio.fixture
async def book(session_factory, author, genre):
    return await book_service.create_book(
        session_factory,
        BookData(
            title="A Wizard of Earthsea",
            author=str(author.id),
            summary="A young mage learns the cost of power.",
            isbn="9780547773742",
            genre=[str(genre.id)],
        ),
    )
