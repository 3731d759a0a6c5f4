"""
Local Library Catalog — Genre Handlers
=========================================

What:  List, detail and create pages for genres.

Create never inserts a second genre with the same name (ignoring case): it
redirects to the one already stored. Delete and update answer 501.
"""

import asyncio
import logging

from fastapi import Depends, Request
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import get_session_factory
from app.exceptions import NotFoundError
from app.projections import genre_url
from app.routes.responses import not_implemented, redirect, render
from app.schemas.forms import GenreForm
from app.services.book_service import book_service
from app.services.genre_service import genre_service

logger = logging.getLogger(__name__)

Sessions = async_sessionmaker[AsyncSession]


async def genre_list(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    genres = await genre_service.list_genres(sessions)
    return render(request, "genre_list", {
        "title": "Genre List",
        "genre_list": genres,
    })


async def genre_detail(
    id: str,
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    genre, books = await asyncio.gather(
        genre_service.get_genre(sessions, id),
        book_service.books_in_genre(sessions, id),
    )

    if genre is None:
        raise NotFoundError(resource="genre", resource_id=id)

    return render(request, "genre_detail", {
        "title": "Genre Detail",
        "genre": genre,
        "genre_books": books,
    })


async def genre_create_get(request: Request) -> Response:
    return render(request, "genre_form", {"title": "Create Genre"})


async def genre_create_post(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    form = GenreForm(await request.form())
    submission = form.submission()

    if not form.validate():
        return render(request, "genre_form", {
            "title": "Create Genre",
            "genre": submission,
            "errors": form.field_errors(),
        })

    existing = await genre_service.find_by_name(sessions, submission.name)
    if existing is not None:
        logger.info("Genre %r already exists as %s", submission.name, existing.id)
        return redirect(genre_url(existing))

    genre = await genre_service.create_genre(sessions, submission)
    return redirect(genre_url(genre))


genre_delete_get = not_implemented("Genre delete GET")
genre_delete_post = not_implemented("Genre delete POST")
genre_update_get = not_implemented("Genre update GET")
genre_update_post = not_implemented("Genre update POST")
