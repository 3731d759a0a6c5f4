"""
Local Library Catalog — Author Handlers
==========================================

What:  List, detail, create and delete pages for authors.
How:   Each handler receives the session factory through Depends, fetches
       what the page needs (independent reads together via asyncio.gather)
       and ends in a render, a redirect, or a raised NotFoundError.

Update is not built: both update endpoints answer 501.
"""

import asyncio
import logging

from fastapi import Depends, Request
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import get_session_factory
from app.exceptions import NotFoundError, ValidationError
from app.projections import author_url
from app.routes.responses import not_implemented, redirect, render
from app.schemas.forms import AuthorForm
from app.services.author_service import author_service
from app.services.book_service import book_service
from app.validation import parse_identifier

logger = logging.getLogger(__name__)

Sessions = async_sessionmaker[AsyncSession]

AUTHOR_LIST_PATH = "/catalog/authors"


async def author_list(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    authors = await author_service.list_authors(sessions)
    return render(request, "author_list", {
        "title": "Author List",
        "author_list": authors,
    })


async def author_detail(
    id: str,
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    author, books = await asyncio.gather(
        author_service.get_author(sessions, id),
        book_service.books_by_author(sessions, id),
    )

    if author is None:
        raise NotFoundError(resource="author", resource_id=id)

    return render(request, "author_detail", {
        "title": "Author Detail",
        "author": author,
        "author_books": books,
    })


async def author_create_get(request: Request) -> Response:
    return render(request, "author_form", {"title": "Create Author"})


async def author_create_post(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    form = AuthorForm(await request.form())

    if not form.validate():
        return render(request, "author_form", {
            "title": "Create Author",
            "author": form.submission(),
            "errors": form.field_errors(),
        })

    author = await author_service.create_author(sessions, form.submission())
    return redirect(author_url(author))


async def author_delete_get(
    id: str,
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    author, books = await asyncio.gather(
        author_service.get_author(sessions, id),
        book_service.books_by_author(sessions, id),
    )

    if author is None:
        return redirect(AUTHOR_LIST_PATH)

    return render(request, "author_delete", {
        "title": "Delete Author",
        "author": author,
        "author_books": books,
    })


async def author_delete_post(
    id: str,
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    """
    Delete an author that no book references.

    The confirmation form posts the author id in its body as `authorid`.
    It must name the same author as the path: the dependents were checked
    for the path id, so deleting anything else is refused with a 400.
    """
    submitted = (await request.form()).get("authorid")
    body_id = parse_identifier(submitted)
    if body_id is None or body_id != parse_identifier(id):
        logger.warning("Author delete refused: body id %r does not match path id %r", submitted, id)
        raise ValidationError(
            message="The author to delete does not match the page it was confirmed on.",
            field="authorid",
        )

    author, books = await asyncio.gather(
        author_service.get_author(sessions, id),
        book_service.books_by_author(sessions, id),
    )

    if author is None:
        return redirect(AUTHOR_LIST_PATH)

    if books:
        # Author still has books: show them instead of deleting
        return render(request, "author_delete", {
            "title": "Delete Author",
            "author": author,
            "author_books": books,
        })

    await author_service.delete_author(sessions, author.id)
    return redirect(AUTHOR_LIST_PATH)


author_update_get = not_implemented("Author update GET")
author_update_post = not_implemented("Author update POST")
