"""
Local Library Catalog — Book Handlers
========================================

What:  Catalog home page plus list, detail, create and update pages for books.

Create and update share one form (book_form.html) and one validation
pipeline (BookForm). The author and genres must be among the stored ones.
A failed submission re-renders the form with the author/genre choices, the
submitted values, the submitted genres checked, and every error. Delete answers 501.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from fastapi import Depends, Request
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import get_session_factory
from app.exceptions import NotFoundError
from app.models.author import Author
from app.models.book_instance import BookInstanceStatus
from app.models.genre import Genre
from app.projections import book_url
from app.routes.responses import not_implemented, redirect, render
from app.schemas.forms import BookForm
from app.schemas.submissions import BookData
from app.services.author_service import author_service
from app.services.book_instance_service import book_instance_service
from app.services.book_service import book_service
from app.services.genre_service import genre_service
from app.validation import FieldError

logger = logging.getLogger(__name__)

Sessions = async_sessionmaker[AsyncSession]


async def index(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    (
        book_count,
        book_instance_count,
        book_instance_available_count,
        author_count,
        genre_count,
    ) = await asyncio.gather(
        book_service.count_books(sessions),
        book_instance_service.count_instances(sessions),
        book_instance_service.count_instances(sessions, BookInstanceStatus.AVAILABLE),
        author_service.count_authors(sessions),
        genre_service.count_genres(sessions),
    )

    return render(request, "index", {
        "title": "Local Library Home",
        "book_count": book_count,
        "book_instance_count": book_instance_count,
        "book_instance_available_count": book_instance_available_count,
        "author_count": author_count,
        "genre_count": genre_count,
    })


async def book_list(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    books = await book_service.list_books(sessions)
    return render(request, "book_list", {"title": "Book List", "book_list": books})


async def book_detail(
    id: str,
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    book, instances = await asyncio.gather(
        book_service.get_book(sessions, id),
        book_instance_service.instances_of_book(sessions, id),
    )

    if book is None:
        raise NotFoundError(resource="book", resource_id=id)

    return render(request, "book_detail", {
        "title": book.title,
        "book": book,
        "book_instances": instances,
    })


async def _book_choices(sessions: Sessions) -> Tuple[List[Author], List[Genre]]:
    return await asyncio.gather(
        author_service.list_authors(sessions),
        genre_service.list_genres(sessions),
    )


def _render_book_form(
    request: Request,
    title: str,
    authors: List[Author],
    genres: List[Genre],
    book: Optional[BookData] = None,
    errors: Optional[List[FieldError]] = None,
) -> Response:
    context: Dict[str, Any] = {
        "title": title,
        "authors": authors,
        "genres": genres,
        # Genre ids rendered as checked boxes
        "checked_genres": set(book.genre) if book else set(),
    }
    if book is not None:
        context["book"] = book
    if errors:
        context["errors"] = errors
    return render(request, "book_form", context)


async def _validated_book(
    request: Request, sessions: Sessions, title: str
) -> Tuple[BookForm, Optional[Response]]:
    """
    Validate a submitted book against the stored authors and genres.

    Returns the form and, when it is invalid, the re-rendered page.
    """
    form = BookForm(await request.form())
    authors, genres = await _book_choices(sessions)
    if form.load_choices(authors, genres).validate():
        return form, None
    return form, _render_book_form(
        request, title, authors, genres, form.submission(), form.field_errors()
    )


async def book_create_get(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    authors, genres = await _book_choices(sessions)
    return _render_book_form(request, "Create Book", authors, genres)


async def book_create_post(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    form, invalid_page = await _validated_book(request, sessions, "Create Book")
    if invalid_page is not None:
        return invalid_page

    book = await book_service.create_book(sessions, form.submission())
    return redirect(book_url(book))


async def book_update_get(
    id: str,
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    book, (authors, genres) = await asyncio.gather(
        book_service.get_book(sessions, id),
        _book_choices(sessions),
    )

    if book is None:
        raise NotFoundError(resource="book", resource_id=id)

    return _render_book_form(request, "Update Book", authors, genres, BookData.from_book(book))


async def book_update_post(
    id: str,
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    form, invalid_page = await _validated_book(request, sessions, "Update Book")
    if invalid_page is not None:
        return invalid_page

    book = await book_service.update_book(sessions, id, form.submission())
    if book is None:
        raise NotFoundError(resource="book", resource_id=id)

    return redirect(book_url(book))


book_delete_get = not_implemented("Book delete GET")
book_delete_post = not_implemented("Book delete POST")
