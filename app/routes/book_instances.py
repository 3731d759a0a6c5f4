"""
Local Library Catalog — BookInstance Handlers
================================================

What:  List, detail and create pages for physical copies. Delete and update
       answer 501.
"""

import logging

from fastapi import Depends, Request
from fastapi.responses import Response
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import get_session_factory
from app.exceptions import NotFoundError
from app.projections import book_instance_url
from app.routes.responses import not_implemented, redirect, render
from app.schemas.forms import STATUS_CHOICES, BookInstanceForm
from app.services.book_instance_service import book_instance_service
from app.services.book_service import book_service

logger = logging.getLogger(__name__)

Sessions = async_sessionmaker[AsyncSession]


async def bookinstance_list(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    instances = await book_instance_service.list_instances(sessions)
    return render(request, "bookinstance_list", {
        "title": "Book Instance List",
        "bookinstance_list": instances,
    })


async def bookinstance_detail(
    id: str,
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    instance = await book_instance_service.get_instance(sessions, id)

    if instance is None:
        raise NotFoundError(resource="book copy", resource_id=id)

    return render(request, "bookinstance_detail", {
        "title": "Book: " + instance.book.title,
        "bookinstance": instance,
    })


async def bookinstance_create_get(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    books = await book_service.list_books(sessions)
    return render(request, "bookinstance_form", {
        "title": "Create BookInstance",
        "book_list": books,
        "status_choices": STATUS_CHOICES,
    })


async def bookinstance_create_post(
    request: Request,
    sessions: Sessions = Depends(get_session_factory),
) -> Response:
    form = BookInstanceForm(await request.form())
    books = await book_service.list_books(sessions)

    if not form.load_choices(books).validate():
        return render(request, "bookinstance_form", {
            "title": "Create BookInstance",
            "book_list": books,
            "status_choices": STATUS_CHOICES,
            "bookinstance": form.submission(),
            "errors": form.field_errors(),
        })

    instance = await book_instance_service.create_instance(sessions, form.submission())
    return redirect(book_instance_url(instance))


bookinstance_delete_get = not_implemented("BookInstance delete GET")
bookinstance_delete_post = not_implemented("BookInstance delete POST")
bookinstance_update_get = not_implemented("BookInstance update GET")
bookinstance_update_post = not_implemented("BookInstance update POST")
