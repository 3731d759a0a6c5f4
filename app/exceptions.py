"""
Local Library Catalog — Custom Exception Hierarchy
=====================================================

What:  Application-specific exceptions for the error scenarios of the catalog.
Why:   Handlers raise and forget; the global exception handlers registered in
       main.py map each type to a status code and render the error page.
How:   Each exception class carries a message and optional context dict.
Who:   Raised by services and route handlers; caught by global handlers.

Exception Hierarchy:
    CatalogError (base)          → 500 Internal Server Error
    ├── ValidationError          → 400 Bad Request
    ├── NotFoundError            → 404 Not Found
    └── DatabaseError            → 500 Internal Server Error

Field-level form problems are NOT exceptions: they are collected by the
validation chains and shown on the re-rendered form. ValidationError is for
requests that cannot be answered with a form at all (e.g. a delete whose
body identifier does not match the path).
"""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """
    Base exception for all catalog application errors.

    Attributes:
        message:  User-facing error description (safe to render)
        context:  Additional debug info (logged but NOT rendered)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CatalogError):
    """
    Raised when a request is malformed beyond what a form re-render can fix.

    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(CatalogError):
    """
    Raised when the primary record of a detail or update page does not exist.

    HTTP:    404 Not Found

    The services return None for missing rows; handlers convert that into
    this exception so the error responder owns the page, not the handler.
    The message is the short label shown on the error page
    (e.g. "Author not found").
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource.capitalize()} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(CatalogError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The rendered message is always generic; the original error type is kept
    in context and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
