"""
RESTful Notes — Repository Base Class
=====================================

What:  Generic async repository over one mapped entity.
How:   Wraps an AsyncSession supplied per request. Writes are flushed, not
       committed: the commit belongs to get_db_session, so every write in a
       request lands or is rolled back together.
Who:   Subclassed by NoteRepository and TagRepository.

SQLAlchemy errors are logged with their original type and re-raised as
DatabaseError, which the HTTP layer turns into a generic 500.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, List, NoReturn, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.interfaces import LoaderOption

from restnotes.exceptions import DatabaseError
from restnotes.models.note_tag import note_tags

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")


class Repository(ABC, Generic[EntityT]):
    """
    Capability interface shared by every entity store.

    Subclasses name the mapped class and the relationship that has to be
    eager-loaded; async sessions cannot lazy-load on attribute access.
    """

    model: Type[EntityT]

    def __init__(self, session: AsyncSession):
        self.session = session

    @abstractmethod
    def _load_options(self) -> List[LoaderOption]:  # pragma: no cover - interface only
        """Loader options applied to every SELECT of this entity."""

    async def create(self, entity: EntityT) -> EntityT:
        """Persist a new entity; its id is assigned when this returns."""
        return await self.save(entity)

    async def save(self, entity: EntityT) -> EntityT:
        """Add or update an entity and flush the pending changes."""
        try:
            self.session.add(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            self._raise_database_error("save", e)
        return entity

    async def find_by_id(self, entity_id: UUID) -> Optional[EntityT]:
        try:
            result = await self.session.execute(
                select(self.model)
                .options(*self._load_options())
                .where(self.model.id == entity_id)
            )
        except SQLAlchemyError as e:
            self._raise_database_error("find_by_id", e)
        return result.scalar_one_or_none()

    async def find_all(self) -> Sequence[EntityT]:
        """All entities, oldest first."""
        try:
            result = await self.session.execute(
                select(self.model)
                .options(*self._load_options())
                .order_by(self.model.created_at, self.model.id)
            )
        except SQLAlchemyError as e:
            self._raise_database_error("find_all", e)
        return result.scalars().all()

    async def delete(self, entity: EntityT) -> None:
        """Remove one entity together with its association rows."""
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            self._raise_database_error("delete", e)

    async def delete_all(self) -> None:
        """
        Remove every entity of this type.

        Bulk DELETE skips the ORM's many-to-many bookkeeping, so the
        association rows are removed explicitly first.
        """
        try:
            await self.session.execute(delete(note_tags))
            await self.session.execute(delete(self.model))
            await self.session.flush()
        except SQLAlchemyError as e:
            self._raise_database_error("delete_all", e)
        logger.info("Deleted all %s rows", self.model.__tablename__)

    def _raise_database_error(self, operation: str, error: SQLAlchemyError) -> NoReturn:
        logger.error(
            "Database error in %s.%s: %s",
            type(self).__name__,
            operation,
            str(error),
            exc_info=True,
        )
        raise DatabaseError(
            context={"operation": operation, "error_type": type(error).__name__},
        ) from error
