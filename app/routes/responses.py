"""
Response helpers shared by the catalog handlers.

A handler ends in exactly one of: a rendered page, a 302 redirect, a raised
NotFoundError, or (for the endpoints nobody has built yet) a 501 text marker.
"""

from typing import Any, Awaitable, Callable, Dict, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse

from app.templating import templates


def render(
    request: Request,
    view: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render app/templates/<view>.html with the given payload."""
    return templates.TemplateResponse(
        request,
        f"{view}.html",
        context or {},
        status_code=status_code,
    )


def redirect(url: str) -> RedirectResponse:
    # 302 so a POSTed form is followed by a GET of the target page
    return RedirectResponse(url, status_code=302)


def not_implemented(label: str) -> Callable[[], Awaitable[PlainTextResponse]]:
    """
    Build a placeholder endpoint answering 501 with a fixed text body.

    `label` reads like "Book delete GET".
    """
    async def endpoint() -> PlainTextResponse:
        return PlainTextResponse(f"NOT IMPLEMENTED: {label}", status_code=501)

    endpoint.__name__ = "not_implemented_" + label.lower().replace(" ", "_")
    return endpoint
