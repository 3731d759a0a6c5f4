"""
Local Library Catalog — Submission Schemas
=============================================

What:  Typed, sanitized values of a validated form.
Who:   Built by the WTForms classes in app/schemas/forms.py; persisted by
       the services and handed back to the templates when a form is
       re-rendered with its errors.
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from app.models.book_instance import BookInstanceStatus


class AuthorData(BaseModel):
    first_name: str = ""
    last_name: str = ""
    date_of_birth: Optional[date] = None
    date_of_death: Optional[date] = None


class BookData(BaseModel):
    """
    A book as submitted (or as loaded for the update page).

    `author` and `genre` hold identifiers as strings so the template can
    compare them against the option values it renders.
    """
    title: str = ""
    author: str = ""
    summary: str = ""
    isbn: str = ""
    genre: List[str] = Field(default_factory=list)

    @classmethod
    def from_book(cls, book) -> "BookData":
        """Pre-fill the update page from a stored book (genres loaded)."""
        return cls(
            title=book.title,
            author=str(book.author_id),
            summary=book.summary,
            isbn=book.isbn,
            genre=[str(g.id) for g in book.genres],
        )


class GenreData(BaseModel):
    name: str = ""


class BookInstanceData(BaseModel):
    book: str = ""
    imprint: str = ""
    status: str = BookInstanceStatus.MAINTENANCE.value
    due_back: Optional[date] = None
