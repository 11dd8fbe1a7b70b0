"""
RESTful Notes — Tag Service
===========================

What:  Create, read, patch and delete tags, and list the notes carrying a tag.
Who:   Called by the /tags route handlers.

A tag's notes are never written from this side; they change only when a
note's tag set does (see NoteService).
"""

import logging
from typing import List, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from restnotes.exceptions import NotFoundError, ValidationError
from restnotes.models.note import Note
from restnotes.models.tag import Tag
from restnotes.repositories.tag_repository import TagRepository
from restnotes.schemas.tag import TagInput, TagPatchInput
from restnotes.validation import validate_tag_input, validate_tag_patch

logger = logging.getLogger(__name__)


class TagService:

    async def list_tags(self, db: AsyncSession) -> Sequence[Tag]:
        return await TagRepository(db).find_all()

    async def get_tag(self, db: AsyncSession, tag_id: UUID) -> Tag:
        tag = await TagRepository(db).find_by_id(tag_id)
        if tag is None:
            raise NotFoundError(resource="tag", resource_id=str(tag_id))
        return tag

    async def get_tagged_notes(self, db: AsyncSession, tag_id: UUID) -> List[Note]:
        """Notes carrying this tag; target of the tag's `tagged-notes` link."""
        tag = await self.get_tag(db, tag_id)
        return list(tag.notes)

    async def create_tag(self, db: AsyncSession, tag_input: TagInput) -> Tag:
        violations = validate_tag_input(tag_input)
        if violations:
            raise ValidationError(violations)

        tag = Tag(name=tag_input.name, notes=[])
        await TagRepository(db).create(tag)
        logger.info("Tag %s created: %s", tag.id, tag.name)
        return tag

    async def patch_tag(self, db: AsyncSession, tag_id: UUID, patch: TagPatchInput) -> Tag:
        """Rename a tag if a non-null name is sent; anything else is a no-op."""
        repository = TagRepository(db)
        tag = await repository.find_by_id(tag_id)
        if tag is None:
            raise NotFoundError(resource="tag", resource_id=str(tag_id))

        violations = validate_tag_patch(patch)
        if violations:
            raise ValidationError(violations)

        if patch.name is not None:
            tag.name = patch.name
        await repository.save(tag)
        return tag

    async def delete_tag(self, db: AsyncSession, tag_id: UUID) -> None:
        """Delete a tag; every note that carried it simply loses it."""
        repository = TagRepository(db)
        tag = await repository.find_by_id(tag_id)
        if tag is None:
            raise NotFoundError(resource="tag", resource_id=str(tag_id))
        await repository.delete(tag)
        logger.info("Tag %s deleted", tag_id)


tag_service = TagService()
