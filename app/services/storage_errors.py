"""
Translation of driver failures into DatabaseError.

Every service method runs its statements inside storage_errors(); an
SQLAlchemyError is logged with its context and re-raised as DatabaseError,
which the global handler renders as a generic 500 page.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy.exc import SQLAlchemyError

from app.exceptions import DatabaseError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(action: str, **context: Any) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Database error while trying to %s: %s", action, str(e))
        context["original_error"] = type(e).__name__
        raise DatabaseError(
            message=f"Could not {action}. Please try again.",
            context=context,
        ) from e
