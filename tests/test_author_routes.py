"""
Local Library Catalog — Author Page Tests
============================================

What:  Tests for the /catalog/author* pages through the full app.
How:   HTTPX AsyncClient over ASGI; each test has its own SQLite database.

What we test:
    ✅ List, detail and create pages
    ✅ Create re-renders with every error and stores nothing
    ✅ Delete refuses while books reference the author
    ✅ Delete requires the confirmed id to match the page
"""

import uuid

import pytest

from app.services.author_service import author_service


class TestAuthorPages:

    @pytest.mark.asyncio
    async def test_list(self, test_client, author):
        response = await test_client.get("/catalog/authors")

        assert response.status_code == 200
        assert "Author List" in response.text
        assert "LeGuin, Ursula" in response.text
        assert f'href="/catalog/author/{author.id}"' in response.text

    @pytest.mark.asyncio
    async def test_detail_lists_books(self, test_client, author, book):
        response = await test_client.get(f"/catalog/author/{author.id}")

        assert response.status_code == 200
        assert "Author: LeGuin, Ursula" in response.text
        assert "A Wizard of Earthsea" in response.text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("author_id", [str(uuid.uuid4()), "not-an-id"])
    async def test_detail_missing(self, test_client, author_id):
        response = await test_client.get(f"/catalog/author/{author_id}")

        assert response.status_code == 404
        assert "Author not found" in response.text


class TestAuthorCreate:

    @pytest.mark.asyncio
    async def test_get_form(self, test_client):
        response = await test_client.get("/catalog/author/create")

        assert response.status_code == 200
        assert "Create Author" in response.text

    @pytest.mark.asyncio
    async def test_valid_submission_redirects_to_detail(self, test_client, session_factory):
        response = await test_client.post("/catalog/author/create", data={
            "first_name": "Iain",
            "last_name": "Banks",
            "date_of_birth": "1954-02-16",
            "date_of_death": "",
        })

        authors = await author_service.list_authors(session_factory)
        assert response.status_code == 302
        assert response.headers["location"] == f"/catalog/author/{authors[0].id}"

        detail = await test_client.get(response.headers["location"])
        assert "Banks, Iain" in detail.text
        assert "Feb 16, 1954" in detail.text

    @pytest.mark.asyncio
    async def test_invalid_submission_rerenders(self, test_client, session_factory):
        response = await test_client.post("/catalog/author/create", data={
            "first_name": "",
            "last_name": "Le Guin",
            "date_of_birth": "someday",
        })

        assert response.status_code == 200
        assert "First name must be specified" in response.text
        assert "Last name has non-alphanumeric characters" in response.text
        assert "Invalid date of birth" in response.text
        assert 'value="Le Guin"' in response.text
        assert await author_service.count_authors(session_factory) == 0


class TestAuthorDelete:

    @pytest.mark.asyncio
    async def test_get_confirmation(self, test_client, author):
        response = await test_client.get(f"/catalog/author/{author.id}/delete")

        assert response.status_code == 200
        assert "Delete Author" in response.text
        assert f'value="{author.id}"' in response.text

    @pytest.mark.asyncio
    async def test_get_missing_redirects_to_list(self, test_client):
        response = await test_client.get(f"/catalog/author/{uuid.uuid4()}/delete")

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/authors"

    @pytest.mark.asyncio
    async def test_post_deletes_author_without_books(self, test_client, session_factory, author):
        response = await test_client.post(
            f"/catalog/author/{author.id}/delete", data={"authorid": str(author.id)}
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/authors"
        assert await author_service.get_author(session_factory, author.id) is None

    @pytest.mark.asyncio
    async def test_post_with_books_shows_them(self, test_client, session_factory, author, book):
        response = await test_client.post(
            f"/catalog/author/{author.id}/delete", data={"authorid": str(author.id)}
        )

        assert response.status_code == 200
        assert "Delete the following books" in response.text
        assert "A Wizard of Earthsea" in response.text
        assert await author_service.get_author(session_factory, author.id) is not None

    @pytest.mark.asyncio
    async def test_post_mismatched_id_is_rejected(self, test_client, session_factory, author):
        response = await test_client.post(
            f"/catalog/author/{author.id}/delete", data={"authorid": str(uuid.uuid4())}
        )

        assert response.status_code == 400
        assert await author_service.count_authors(session_factory) == 1

    @pytest.mark.asyncio
    async def test_post_missing_author_redirects(self, test_client):
        missing = str(uuid.uuid4())
        response = await test_client.post(
            f"/catalog/author/{missing}/delete", data={"authorid": missing}
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/authors"
