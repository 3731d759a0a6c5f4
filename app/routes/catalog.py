"""
Local Library Catalog — Route Table
======================================

What:  Maps (path, method) pairs under /catalog to their handlers.
How:   Routes are matched in registration order, so for every resource the
       literal /<resource>/create paths come before /<resource>/{id}:
       registered the other way round, "create" would be captured as an id.

Route Inventory (per resource, in this order):
    GET  /<r>/create          POST /<r>/create
    GET  /<r>/{id}/delete     POST /<r>/{id}/delete
    GET  /<r>/{id}/update     POST /<r>/{id}/update
    GET  /<r>/{id}            GET  /<r>s
"""

from types import ModuleType
from typing import List, Tuple

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from app.routes import authors, book_instances, books, genres

router = APIRouter(prefix="/catalog", tags=["Catalog"], default_response_class=HTMLResponse)

# (resource segment, handler module, handler name prefix)
RESOURCES: List[Tuple[str, ModuleType, str]] = [
    ("book", books, "book"),
    ("author", authors, "author"),
    ("genre", genres, "genre"),
    ("bookinstance", book_instances, "bookinstance"),
]


def register_resource(target: APIRouter, segment: str, handlers: ModuleType, prefix: str) -> None:
    """Register the eight routes of one resource in matching order."""
    table = [
        ("GET", f"/{segment}/create", "create_get"),
        ("POST", f"/{segment}/create", "create_post"),
        ("GET", f"/{segment}/{{id}}/delete", "delete_get"),
        ("POST", f"/{segment}/{{id}}/delete", "delete_post"),
        ("GET", f"/{segment}/{{id}}/update", "update_get"),
        ("POST", f"/{segment}/{{id}}/update", "update_post"),
        ("GET", f"/{segment}/{{id}}", "detail"),
        ("GET", f"/{segment}s", "list"),
    ]
    for method, path, action in table:
        name = f"{prefix}_{action}"
        target.add_api_route(
            path,
            getattr(handlers, name),
            methods=[method],
            name=name,
            include_in_schema=False,
        )


# Catalog home page
router.add_api_route("/", books.index, methods=["GET"], name="index", include_in_schema=False)

for segment, handlers, prefix in RESOURCES:
    register_resource(router, segment, handlers, prefix)
