"""
Local Library Catalog — BookInstance Page Tests
==================================================

What:  Tests for the /catalog/bookinstance* pages.
"""

import uuid
from datetime import date

import pytest

from app.schemas.submissions import BookInstanceData
from app.services.book_instance_service import book_instance_service


class TestBookInstancePages:

    @pytest.mark.asyncio
    async def test_list_shows_due_date_unless_available(self, test_client, session_factory, book):
        await book_instance_service.create_instance(
            session_factory,
            BookInstanceData(book=str(book.id), imprint="Puffin", status="Loaned", due_back=date(2030, 3, 1)),
        )
        await book_instance_service.create_instance(
            session_factory,
            BookInstanceData(book=str(book.id), imprint="Bantam", status="Available"),
        )

        response = await test_client.get("/catalog/bookinstances")

        assert response.status_code == 200
        assert "Book Instance List" in response.text
        assert "A Wizard of Earthsea : Puffin" in response.text
        assert "(Due: Mar 1, 2030)" in response.text
        assert response.text.count("(Due:") == 1

    @pytest.mark.asyncio
    async def test_detail(self, test_client, session_factory, book):
        copy = await book_instance_service.create_instance(
            session_factory,
            BookInstanceData(book=str(book.id), imprint="Puffin", status="Reserved", due_back=date(2030, 3, 1)),
        )

        response = await test_client.get(f"/catalog/bookinstance/{copy.id}")

        assert response.status_code == 200
        assert "Book: A Wizard of Earthsea" in response.text
        assert "Reserved" in response.text
        assert "Mar 1, 2030" in response.text

    @pytest.mark.asyncio
    async def test_detail_missing(self, test_client):
        response = await test_client.get(f"/catalog/bookinstance/{uuid.uuid4()}")

        assert response.status_code == 404
        assert "Book copy not found" in response.text


class TestBookInstanceCreate:

    @pytest.mark.asyncio
    async def test_get_form(self, test_client, book):
        response = await test_client.get("/catalog/bookinstance/create")

        assert response.status_code == 200
        assert "Create BookInstance" in response.text
        assert f'value="{book.id}"' in response.text
        for status in ("Available", "Maintenance", "Loaned", "Reserved"):
            assert f'value="{status}"' in response.text

    @pytest.mark.asyncio
    async def test_valid_submission_redirects(self, test_client, session_factory, book):
        response = await test_client.post("/catalog/bookinstance/create", data={
            "book": str(book.id),
            "imprint": "Gollancz, 2018",
            "status": "Available",
            "due_back": "",
        })

        assert response.status_code == 302
        copies = await book_instance_service.instances_of_book(session_factory, book.id)
        assert response.headers["location"] == f"/catalog/bookinstance/{copies[0].id}"
        assert copies[0].due_back == date.today()

    @pytest.mark.asyncio
    async def test_invalid_submission_rerenders(self, test_client, session_factory, book):
        response = await test_client.post("/catalog/bookinstance/create", data={
            "book": "",
            "imprint": "",
            "status": "Lost",
        })

        assert response.status_code == 200
        assert "Book must be specified" in response.text
        assert "Imprint must be specified" in response.text
        assert "Status must be one of: Available, Maintenance, Loaned, Reserved" in response.text
        assert await book_instance_service.count_instances(session_factory) == 0

    @pytest.mark.asyncio
    async def test_unknown_book_is_rejected(self, test_client, session_factory, book):
        response = await test_client.post("/catalog/bookinstance/create", data={
            "book": str(uuid.uuid4()),
            "imprint": "Gollancz, 2018",
            "status": "Available",
        })

        assert response.status_code == 200
        assert "Book must be chosen from the list." in response.text
        assert await book_instance_service.count_instances(session_factory) == 0
