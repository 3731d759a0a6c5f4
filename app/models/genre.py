"""
Local Library Catalog — Genre SQLAlchemy Model
=================================================

What:  ORM model representing the `genres` table.

Uniqueness:
    No unique index on name. Genre create looks the
    name up case-insensitively and redirects to the match instead of
    inserting; two concurrent creates of the same name can still both insert.
"""

import uuid
from typing import List, TYPE_CHECKING

from sqlalchemy import Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.book import book_genre

if TYPE_CHECKING:
    from app.models.book import Book


class Genre(Base):
    """A category (e.g. "Science Fiction") shared by many books."""

    __tablename__ = "genres"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    books: Mapped[List["Book"]] = relationship(
        secondary=book_genre,
        back_populates="genres",
        lazy="raise",
    )

    __table_args__ = (
        Index("idx_genres_name", "name"),
    )

    def __repr__(self) -> str:
        return f"<Genre(id={self.id}, name='{self.name}')>"
