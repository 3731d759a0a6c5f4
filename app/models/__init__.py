"""
ORM models for the catalog.

Importing this package registers every mapped class on Base.metadata, which
the relationship() string references, Alembic and the test fixtures rely on.
"""

from app.models.author import Author
from app.models.book import Book, book_genre
from app.models.book_instance import BookInstance, BookInstanceStatus
from app.models.genre import Genre

__all__ = [
    "Author",
    "Book",
    "BookInstance",
    "BookInstanceStatus",
    "Genre",
    "book_genre",
]
