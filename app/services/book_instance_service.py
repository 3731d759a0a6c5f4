"""
Local Library Catalog — BookInstance Service
===============================================

What:  Reads and writes of physical copies (BookInstance rows).
"""

import logging
import uuid
from typing import List, Optional, Union

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from app.database import session_scope
from app.models.book_instance import BookInstance, BookInstanceStatus
from app.schemas.submissions import BookInstanceData
from app.services.storage_errors import storage_errors
from app.validation import parse_identifier

logger = logging.getLogger(__name__)

Sessions = async_sessionmaker[AsyncSession]


class BookInstanceService:

    async def list_instances(self, sessions: Sessions) -> List[BookInstance]:
        """All copies with their book loaded, grouped by status then due date."""
        with storage_errors("list book copies"):
            async with sessions() as session:
                result = await session.execute(
                    select(BookInstance)
                    .options(selectinload(BookInstance.book))
                    .order_by(BookInstance.status.asc(), BookInstance.due_back.asc())
                )
                return list(result.scalars().all())

    async def get_instance(
        self, sessions: Sessions, instance_id: Union[str, uuid.UUID]
    ) -> Optional[BookInstance]:
        key = parse_identifier(instance_id)
        if key is None:
            return None
        with storage_errors("retrieve the book copy", instance_id=str(instance_id)):
            async with sessions() as session:
                result = await session.execute(
                    select(BookInstance)
                    .where(BookInstance.id == key)
                    .options(selectinload(BookInstance.book))
                )
                return result.scalar_one_or_none()

    async def instances_of_book(
        self, sessions: Sessions, book_id: Union[str, uuid.UUID]
    ) -> List[BookInstance]:
        key = parse_identifier(book_id)
        if key is None:
            return []
        with storage_errors("list the book's copies", book_id=str(book_id)):
            async with sessions() as session:
                result = await session.execute(
                    select(BookInstance).where(BookInstance.book_id == key)
                )
                return list(result.scalars().all())

    async def count_instances(
        self, sessions: Sessions, status: Optional[BookInstanceStatus] = None
    ) -> int:
        """Number of copies, optionally only those with the given status."""
        query = select(func.count()).select_from(BookInstance)
        if status is not None:
            query = query.where(BookInstance.status == status.value)
        with storage_errors("count book copies"):
            async with sessions() as session:
                result = await session.execute(query)
                return result.scalar() or 0

    async def create_instance(
        self, sessions: Sessions, data: BookInstanceData
    ) -> BookInstance:
        instance = BookInstance(
            book_id=parse_identifier(data.book),
            imprint=data.imprint,
            status=data.status,
        )
        # Leave due_back unset when not given so the column default applies
        if data.due_back is not None:
            instance.due_back = data.due_back
        with storage_errors("save the book copy"):
            async with session_scope(sessions) as session:
                session.add(instance)
                await session.flush()
        logger.info("Book copy created: %s (book %s)", instance.id, instance.book_id)
        return instance


book_instance_service = BookInstanceService()
