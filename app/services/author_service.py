"""
Local Library Catalog — Author Service
=========================================

What:  Reads and writes of Author rows.
Who:   Called by the author handlers and the catalog home page.

Design Decision:
    AuthorService is stateless: every method receives the session factory
    and opens its own session. Two calls can therefore be awaited together
    with asyncio.gather (author + books on the detail page).
"""

import logging
import uuid
from typing import List, Optional, Union

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import session_scope
from app.models.author import Author
from app.schemas.submissions import AuthorData
from app.services.storage_errors import storage_errors
from app.validation import parse_identifier

logger = logging.getLogger(__name__)

Sessions = async_sessionmaker[AsyncSession]


class AuthorService:

    async def list_authors(self, sessions: Sessions) -> List[Author]:
        """All authors ordered by last name (ascending)."""
        with storage_errors("list authors"):
            async with sessions() as session:
                result = await session.execute(
                    select(Author).order_by(Author.last_name.asc(), Author.first_name.asc())
                )
                return list(result.scalars().all())

    async def get_author(
        self, sessions: Sessions, author_id: Union[str, uuid.UUID]
    ) -> Optional[Author]:
        """
        One author by identifier.

        Returns None both for a missing row and for a malformed identifier;
        the caller decides whether that is a 404 or a redirect.
        """
        key = parse_identifier(author_id)
        if key is None:
            return None
        with storage_errors("retrieve the author", author_id=str(author_id)):
            async with sessions() as session:
                return await session.get(Author, key)

    async def count_authors(self, sessions: Sessions) -> int:
        with storage_errors("count authors"):
            async with sessions() as session:
                result = await session.execute(select(func.count()).select_from(Author))
                return result.scalar() or 0

    async def create_author(self, sessions: Sessions, data: AuthorData) -> Author:
        author = Author(
            first_name=data.first_name,
            last_name=data.last_name,
            date_of_birth=data.date_of_birth,
            date_of_death=data.date_of_death,
        )
        with storage_errors("save the author"):
            async with session_scope(sessions) as session:
                session.add(author)
                await session.flush()  # assigns the id used in the redirect
        logger.info("Author created: %s", author.id)
        return author

    async def delete_author(self, sessions: Sessions, author_id: uuid.UUID) -> None:
        """
        Remove an author row.

        Does not look at dependent books; the delete handler checks them
        before calling this.
        """
        with storage_errors("delete the author", author_id=str(author_id)):
            async with session_scope(sessions) as session:
                await session.execute(delete(Author).where(Author.id == author_id))
        logger.info("Author deleted: %s", author_id)


author_service = AuthorService()
