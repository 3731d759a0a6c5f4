"""
Local Library Catalog — Book SQLAlchemy Model
================================================

What:  ORM model for the `books` table and the `book_genres` association table.
Who:   Used by BookService (and by GenreService/AuthorService for dependents).

Relationships:
    Book → Author      many-to-one (author_id, required)
    Book ↔ Genre       many-to-many through book_genres
    Book ← BookInstance one-to-many (physical copies)
"""

import uuid
from typing import List, TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Index, String, Table, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.author import Author
    from app.models.book_instance import BookInstance
    from app.models.genre import Genre


book_genre = Table(
    "book_genres",
    Base.metadata,
    Column("book_id", Uuid, ForeignKey("books.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", Uuid, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)


class Book(Base):
    """A catalogued title. Copies on the shelf are BookInstance rows."""

    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False)
    isbn: Mapped[str] = mapped_column(String(32), nullable=False)

    # No ON DELETE: removing an author with books is refused by the handler
    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("authors.id"),
        nullable=False,
    )

    author: Mapped["Author"] = relationship(back_populates="books", lazy="raise")
    genres: Mapped[List["Genre"]] = relationship(
        secondary=book_genre,
        back_populates="books",
        lazy="raise",
    )
    instances: Mapped[List["BookInstance"]] = relationship(
        back_populates="book",
        lazy="raise",
    )

    __table_args__ = (
        Index("idx_books_title", "title"),
        Index("idx_books_author_id", "author_id"),
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, title='{self.title}')>"
