"""
Local Library Catalog — Route Table & App Tests
==================================================

What:  Tests for the route table, the home page, placeholders, health and
       the rendered error pages.

What we test:
    ✅ /create paths win over /{id} paths
    ✅ Home page counts
    ✅ Unbuilt endpoints answer 501 with their label
    ✅ Health check (healthy and unhealthy)
    ✅ Error pages for unknown paths and storage failures
    ✅ Detail pages read through the injected session factory
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.database import get_session_factory
from app.exceptions import DatabaseError
from app.main import create_app
from app.models.author import Author
from app.schemas.submissions import BookInstanceData
from app.services.book_instance_service import book_instance_service


@pytest_asyncio.fixture
async def mocked_client(mock_sessions):
    """A client whose storage handle is a MagicMock; tests patch the services."""
    application = create_app()
    application.dependency_overrides[get_session_factory] = lambda: mock_sessions
    async with AsyncClient(transport=ASGITransport(app=application), base_url="http://test") as client:
        yield client


class TestRouteOrder:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path, heading", [
        ("/catalog/book/create", "Create Book"),
        ("/catalog/author/create", "Create Author"),
        ("/catalog/genre/create", "Create Genre"),
        ("/catalog/bookinstance/create", "Create BookInstance"),
    ])
    async def test_create_is_not_taken_for_an_id(self, test_client, path, heading):
        response = await test_client.get(path)

        assert response.status_code == 200
        assert heading in response.text


class TestHome:

    @pytest.mark.asyncio
    async def test_root_redirects_to_catalog(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/"

    @pytest.mark.asyncio
    async def test_empty_catalog(self, test_client):
        response = await test_client.get("/catalog/")

        assert response.status_code == 200
        assert "Local Library Home" in response.text
        assert "<strong>Books:</strong> 0" in response.text

    @pytest.mark.asyncio
    async def test_counts(self, test_client, session_factory, book):
        for status in ("Available", "Loaned"):
            await book_instance_service.create_instance(
                session_factory,
                BookInstanceData(book=str(book.id), imprint="Puffin", status=status),
            )

        response = await test_client.get("/catalog/")

        assert "<strong>Books:</strong> 1" in response.text
        assert "<strong>Copies:</strong> 2" in response.text
        assert "<strong>Copies available:</strong> 1" in response.text
        assert "<strong>Authors:</strong> 1" in response.text
        assert "<strong>Genres:</strong> 1" in response.text


class TestPlaceholders:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method, path, label", [
        ("GET", "/catalog/author/{id}/update", "Author update GET"),
        ("POST", "/catalog/author/{id}/update", "Author update POST"),
        ("GET", "/catalog/book/{id}/delete", "Book delete GET"),
        ("POST", "/catalog/book/{id}/delete", "Book delete POST"),
        ("GET", "/catalog/genre/{id}/delete", "Genre delete GET"),
        ("POST", "/catalog/genre/{id}/update", "Genre update POST"),
        ("GET", "/catalog/bookinstance/{id}/delete", "BookInstance delete GET"),
        ("POST", "/catalog/bookinstance/{id}/update", "BookInstance update POST"),
    ])
    async def test_answers_501(self, test_client, method, path, label):
        response = await test_client.request(method, path.format(id=uuid.uuid4()))

        assert response.status_code == 501
        assert response.text == f"NOT IMPLEMENTED: {label}"


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy(self, test_client):
        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_unhealthy_when_database_unreachable(self, mocked_client, mock_sessions):
        mock_sessions.side_effect = OSError("connection refused")

        response = await mocked_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


class TestErrorPages:

    @pytest.mark.asyncio
    async def test_unknown_path(self, test_client):
        response = await test_client.get("/catalog/nowhere/at/all")

        assert response.status_code == 404
        assert "Not Found" in response.text
        assert "Request ID:" in response.text

    @pytest.mark.asyncio
    async def test_wrong_method(self, test_client):
        response = await test_client.post("/catalog/books")

        assert response.status_code == 405

    @pytest.mark.asyncio
    async def test_request_id_is_echoed(self, test_client):
        response = await test_client.get("/catalog/", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_storage_failure_renders_generic_page(self, mocked_client):
        with patch("app.routes.genres.genre_service") as mock_genres:
            mock_genres.list_genres = AsyncMock(
                side_effect=DatabaseError(message="Could not list genres. Please try again.")
            )

            response = await mocked_client.get("/catalog/genres")

        assert response.status_code == 500
        assert "An internal error occurred. Please try again later." in response.text
        assert "Could not list genres" not in response.text


class TestInjectedStorage:

    @pytest.mark.asyncio
    async def test_author_detail_reads_through_injected_factory(self, mocked_client, mock_sessions):
        author = Author(id=uuid.uuid4(), first_name="Ursula", last_name="LeGuin")

        with patch("app.routes.authors.author_service") as mock_authors, \
             patch("app.routes.authors.book_service") as mock_books:
            mock_authors.get_author = AsyncMock(return_value=author)
            mock_books.books_by_author = AsyncMock(return_value=[])

            response = await mocked_client.get(f"/catalog/author/{author.id}")

        assert response.status_code == 200
        assert "Author: LeGuin, Ursula" in response.text
        assert "This author has no books." in response.text
        mock_authors.get_author.assert_awaited_once_with(mock_sessions, str(author.id))
        mock_books.books_by_author.assert_awaited_once_with(mock_sessions, str(author.id))
