"""
Local Library Catalog — Author SQLAlchemy Model
==================================================

What:  ORM model representing the `authors` table.
Who:   Used by AuthorService for CRUD operations and by Alembic.

Table Design Rationale:
    - UUID primary key: opaque identifiers in every canonical path
    - first_name / last_name: required, bounded to 100 characters
    - date_of_birth / date_of_death: optional calendar dates (no time part)

Derived values (display name, canonical path, formatted dates) are not
stored and not computed here; see app/projections.py.

Index on last_name:
    The author list page is ordered by last name.
"""

import uuid
from datetime import date
from typing import List, Optional, TYPE_CHECKING

from sqlalchemy import Date, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.book import Book


class Author(Base):
    """
    A person who wrote one or more books.

    Lifecycle:
        1. Created by POST /catalog/author/create after validation
        2. Deleted by POST /catalog/author/{id}/delete only when no Book
           references it (checked by the handler, not by the schema)
    """

    __tablename__ = "authors"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)

    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True, default=None)
    date_of_death: Mapped[Optional[date]] = mapped_column(Date, nullable=True, default=None)

    # lazy="raise": every page states what it loads (selectinload) so no
    # implicit I/O happens while a template renders
    books: Mapped[List["Book"]] = relationship(back_populates="author", lazy="raise")

    __table_args__ = (
        Index("idx_authors_last_name", "last_name"),
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, last_name='{self.last_name}')>"
