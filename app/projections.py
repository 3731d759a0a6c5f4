"""
Local Library Catalog — Derived Field Projections
====================================================

What:  Pure functions computing the read-only values shown on pages:
       author display name, canonical paths, human-formatted dates.
Why:   Derived values are never stored. Keeping them out of the ORM classes
       means they work the same on a persisted row, a freshly built object,
       or a test double with the right attributes.
Who:   Handlers (redirect targets) and templates (registered as Jinja globals
       in app/templating.py).
"""

from datetime import date
from typing import Any, Optional

from babel.dates import format_date as babel_format_date

from app.config import settings

CATALOG_PREFIX = "/catalog"


def author_name(author: Any) -> str:
    """ "last, first" when both names are present, otherwise ""."""
    if author.first_name and author.last_name:
        return f"{author.last_name}, {author.first_name}"
    return ""


def author_url(author: Any) -> str:
    return f"{CATALOG_PREFIX}/author/{author.id}"


def book_url(book: Any) -> str:
    return f"{CATALOG_PREFIX}/book/{book.id}"


def genre_url(genre: Any) -> str:
    return f"{CATALOG_PREFIX}/genre/{genre.id}"


def book_instance_url(book_instance: Any) -> str:
    return f"{CATALOG_PREFIX}/bookinstance/{book_instance.id}"


def format_date(value: Optional[date]) -> str:
    """
    Medium locale date ("Oct 19, 2026" for en_US), or "" when absent.

    The locale comes from settings.display_locale.
    """
    if value is None:
        return ""
    return babel_format_date(value, format="medium", locale=settings.display_locale)


def date_of_birth_formatted(author: Any) -> str:
    return format_date(author.date_of_birth)


def date_of_death_formatted(author: Any) -> str:
    return format_date(author.date_of_death)


def author_lifespan(author: Any) -> str:
    """Birth and death for list pages, e.g. "Jan 2, 1920 - Apr 6, 1992"."""
    born = date_of_birth_formatted(author)
    died = date_of_death_formatted(author)
    if not born and not died:
        return ""
    return f"{born} - {died}"


def due_back_formatted(book_instance: Any) -> str:
    return format_date(book_instance.due_back)


_URL_BUILDERS = {
    "Author": author_url,
    "Book": book_url,
    "Genre": genre_url,
    "BookInstance": book_instance_url,
}


def entity_url(entity: Any) -> str:
    """Canonical path of any catalog entity, dispatched on its class name."""
    try:
        builder = _URL_BUILDERS[type(entity).__name__]
    except KeyError:
        raise TypeError(f"No canonical path for {type(entity).__name__}") from None
    return builder(entity)
