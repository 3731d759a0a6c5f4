"""
Local Library Catalog — Book Service
=======================================

What:  Reads and writes of Book rows and their genre links.
Who:   Called by the book handlers, and by the author/genre handlers for
       the dependent-book lists.

Loading strategy:
    Relationships are lazy="raise", so each query states what the page
    needs: the list page loads authors, the detail/update pages load author
    and genres, dependent lists load nothing extra.
"""

import logging
import uuid
from typing import List, Optional, Sequence, Union

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.database import session_scope
from app.models.book import Book, book_genre
from app.models.genre import Genre
from app.schemas.submissions import BookData
from app.services.storage_errors import storage_errors
from app.validation import parse_identifier

logger = logging.getLogger(__name__)

Sessions = async_sessionmaker[AsyncSession]


def _identifiers(values: Sequence[str]) -> List[uuid.UUID]:
    keys = (parse_identifier(v) for v in values)
    return [k for k in keys if k is not None]


class BookService:

    async def list_books(self, sessions: Sessions) -> List[Book]:
        """All books ordered by title, each with its author loaded."""
        with storage_errors("list books"):
            async with sessions() as session:
                result = await session.execute(
                    select(Book).options(selectinload(Book.author)).order_by(Book.title.asc())
                )
                return list(result.scalars().all())

    async def get_book(
        self, sessions: Sessions, book_id: Union[str, uuid.UUID]
    ) -> Optional[Book]:
        """One book with author and genres loaded; None if absent or malformed."""
        key = parse_identifier(book_id)
        if key is None:
            return None
        with storage_errors("retrieve the book", book_id=str(book_id)):
            async with sessions() as session:
                result = await session.execute(
                    select(Book)
                    .where(Book.id == key)
                    .options(selectinload(Book.author), selectinload(Book.genres))
                )
                return result.scalar_one_or_none()

    async def books_by_author(
        self, sessions: Sessions, author_id: Union[str, uuid.UUID]
    ) -> List[Book]:
        """Books whose author is exactly `author_id` (title order)."""
        key = parse_identifier(author_id)
        if key is None:
            return []
        with storage_errors("list the author's books", author_id=str(author_id)):
            async with sessions() as session:
                result = await session.execute(
                    select(Book).where(Book.author_id == key).order_by(Book.title.asc())
                )
                return list(result.scalars().all())

    async def books_in_genre(
        self, sessions: Sessions, genre_id: Union[str, uuid.UUID]
    ) -> List[Book]:
        key = parse_identifier(genre_id)
        if key is None:
            return []
        with storage_errors("list the genre's books", genre_id=str(genre_id)):
            async with sessions() as session:
                result = await session.execute(
                    select(Book)
                    .join(book_genre, book_genre.c.book_id == Book.id)
                    .where(book_genre.c.genre_id == key)
                    .order_by(Book.title.asc())
                )
                return list(result.scalars().all())

    async def count_books(self, sessions: Sessions) -> int:
        with storage_errors("count books"):
            async with sessions() as session:
                result = await session.execute(select(func.count()).select_from(Book))
                return result.scalar() or 0

    async def create_book(self, sessions: Sessions, data: BookData) -> Book:
        book = Book(
            title=data.title,
            author_id=parse_identifier(data.author),
            summary=data.summary,
            isbn=data.isbn,
        )
        with storage_errors("save the book"):
            async with session_scope(sessions) as session:
                book.genres = await self._genres(session, data.genre)
                session.add(book)
                await session.flush()
        logger.info("Book created: %s", book.id)
        return book

    async def update_book(
        self, sessions: Sessions, book_id: Union[str, uuid.UUID], data: BookData
    ) -> Optional[Book]:
        """
        Replace the fields and genre set of an existing book.

        Returns the updated book, or None when no book has that identifier.
        """
        key = parse_identifier(book_id)
        if key is None:
            return None
        with storage_errors("update the book", book_id=str(book_id)):
            async with session_scope(sessions) as session:
                result = await session.execute(
                    select(Book).where(Book.id == key).options(selectinload(Book.genres))
                )
                book = result.scalar_one_or_none()
                if book is None:
                    return None
                book.title = data.title
                book.author_id = parse_identifier(data.author)
                book.summary = data.summary
                book.isbn = data.isbn
                book.genres = await self._genres(session, data.genre)
        logger.info("Book updated: %s", book.id)
        return book

    @staticmethod
    async def _genres(session: AsyncSession, genre_ids: Sequence[str]) -> List[Genre]:
        keys = _identifiers(genre_ids)
        if not keys:
            return []
        result = await session.execute(select(Genre).where(Genre.id.in_(keys)))
        return list(result.scalars().all())


book_service = BookService()
