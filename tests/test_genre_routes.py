"""
Local Library Catalog — Genre Page Tests
===========================================

What:  Tests for the /catalog/genre* pages, including duplicate-name handling.
"""

import uuid

import pytest

from app.services.genre_service import genre_service


class TestGenrePages:

    @pytest.mark.asyncio
    async def test_list(self, test_client, genre):
        response = await test_client.get("/catalog/genres")

        assert response.status_code == 200
        assert "Genre List" in response.text
        assert f'href="/catalog/genre/{genre.id}"' in response.text

    @pytest.mark.asyncio
    async def test_detail_lists_books(self, test_client, genre, book):
        response = await test_client.get(f"/catalog/genre/{genre.id}")

        assert response.status_code == 200
        assert "Genre: Fantasy" in response.text
        assert "A Wizard of Earthsea" in response.text

    @pytest.mark.asyncio
    async def test_detail_missing(self, test_client):
        response = await test_client.get(f"/catalog/genre/{uuid.uuid4()}")

        assert response.status_code == 404
        assert "Genre not found" in response.text


class TestGenreCreate:

    @pytest.mark.asyncio
    async def test_get_form(self, test_client):
        response = await test_client.get("/catalog/genre/create")

        assert response.status_code == 200
        assert "Create Genre" in response.text

    @pytest.mark.asyncio
    async def test_same_name_in_other_case_reuses_genre(self, test_client, session_factory):
        first = await test_client.post("/catalog/genre/create", data={"name": "Fantasy"})
        second = await test_client.post("/catalog/genre/create", data={"name": "fantasy"})

        genres = await genre_service.list_genres(session_factory)
        assert len(genres) == 1
        assert first.status_code == 302
        assert first.headers["location"] == f"/catalog/genre/{genres[0].id}"
        assert second.status_code == 302
        assert second.headers["location"] == first.headers["location"]

    @pytest.mark.asyncio
    async def test_short_name_rerenders(self, test_client, session_factory):
        response = await test_client.post("/catalog/genre/create", data={"name": " ab "})

        assert response.status_code == 200
        assert "Genre name must contain at least 3 characters" in response.text
        assert 'value="ab"' in response.text
        assert await genre_service.count_genres(session_factory) == 0
