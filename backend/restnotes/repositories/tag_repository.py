"""Entity store for tags."""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from restnotes.models.tag import Tag
from restnotes.repositories.base import Repository


class TagRepository(Repository[Tag]):
    """Tags are loaded with the notes that carry them (the reverse side)."""

    model = Tag

    def _load_options(self) -> List[LoaderOption]:
        return [selectinload(Tag.notes)]

    async def find_all_by_ids(self, tag_ids: Sequence[UUID]) -> List[Tag]:
        """
        Fetch several tags in one query.

        Returns them in the order of tag_ids; unknown ids are skipped, so
        callers compare lengths to spot the missing ones.
        """
        if not tag_ids:
            return []
        try:
            result = await self.session.execute(
                select(Tag).options(*self._load_options()).where(Tag.id.in_(tag_ids))
            )
        except SQLAlchemyError as e:
            self._raise_database_error("find_all_by_ids", e)
        by_id = {tag.id: tag for tag in result.scalars().all()}
        found: List[Optional[Tag]] = [by_id.get(tag_id) for tag_id in tag_ids]
        return [tag for tag in found if tag is not None]
