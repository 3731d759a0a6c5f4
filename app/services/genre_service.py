"""
Local Library Catalog — Genre Service
========================================

What:  Reads and writes of Genre rows, including the case-insensitive name
       lookup used to avoid duplicate genres.
"""

import logging
import uuid
from typing import List, Optional, Union

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import session_scope
from app.models.genre import Genre
from app.schemas.submissions import GenreData
from app.services.storage_errors import storage_errors
from app.validation import parse_identifier

logger = logging.getLogger(__name__)

Sessions = async_sessionmaker[AsyncSession]


class GenreService:

    async def list_genres(self, sessions: Sessions) -> List[Genre]:
        """All genres ordered by name (ascending)."""
        with storage_errors("list genres"):
            async with sessions() as session:
                result = await session.execute(select(Genre).order_by(Genre.name.asc()))
                return list(result.scalars().all())

    async def get_genre(
        self, sessions: Sessions, genre_id: Union[str, uuid.UUID]
    ) -> Optional[Genre]:
        key = parse_identifier(genre_id)
        if key is None:
            return None
        with storage_errors("retrieve the genre", genre_id=str(genre_id)):
            async with sessions() as session:
                return await session.get(Genre, key)

    async def find_by_name(self, sessions: Sessions, name: str) -> Optional[Genre]:
        """
        First genre whose name equals `name`, ignoring case.

        This is a plain read: a concurrent create of the same name between
        this lookup and the insert is not prevented.
        """
        with storage_errors("look up the genre", name=name):
            async with sessions() as session:
                result = await session.execute(
                    select(Genre).where(func.lower(Genre.name) == name.lower()).limit(1)
                )
                return result.scalars().first()

    async def count_genres(self, sessions: Sessions) -> int:
        with storage_errors("count genres"):
            async with sessions() as session:
                result = await session.execute(select(func.count()).select_from(Genre))
                return result.scalar() or 0

    async def create_genre(self, sessions: Sessions, data: GenreData) -> Genre:
        genre = Genre(name=data.name)
        with storage_errors("save the genre"):
            async with session_scope(sessions) as session:
                session.add(genre)
                await session.flush()
        logger.info("Genre created: %s (%s)", genre.id, genre.name)
        return genre


genre_service = GenreService()
