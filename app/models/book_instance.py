"""
Local Library Catalog — BookInstance SQLAlchemy Model
========================================================

What:  ORM model for the `book_instances` table: one row per physical copy.

Status values:
    Available    on the shelf, can be borrowed (counted on the home page)
    Maintenance  default for new copies
    Loaned       checked out until due_back
    Reserved     held for a patron
"""

import enum
import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

if TYPE_CHECKING:
    from app.models.book import Book


class BookInstanceStatus(str, enum.Enum):
    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


class BookInstance(Base):
    """A physical copy of a Book with an availability status."""

    __tablename__ = "book_instances"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    book_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("books.id"),
        nullable=False,
    )

    imprint: Mapped[str] = mapped_column(String(255), nullable=False)

    # Stored as the plain status string; BookInstanceStatus lists the choices
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=BookInstanceStatus.MAINTENANCE.value,
    )

    due_back: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)

    book: Mapped["Book"] = relationship(back_populates="instances", lazy="raise")

    __table_args__ = (
        Index("idx_book_instances_book_id", "book_id"),
        Index("idx_book_instances_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<BookInstance(id={self.id}, status='{self.status}')>"
