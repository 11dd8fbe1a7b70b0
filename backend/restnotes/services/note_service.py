"""
RESTful Notes — Note Service
============================

What:  Create, read, patch and delete notes, including the rules for the
       note's tag set.
How:   Validates the input, resolves tag URIs through TagRepository, then
       writes through NoteRepository. Receives the request's AsyncSession on
       every call.
Who:   Called by the /notes route handlers.

Tag Set Contract:
    POST   tags given  → note starts with exactly those tags
    PATCH  tags absent → tag set untouched
    PATCH  tags: [...] → tag set REPLACED by the list (not merged)
    PATCH  tags: []    → every tag removed

    Every URI is resolved before the note is modified. One bad URI fails
    the whole request and the tag set stays as it was; the session rollback
    in get_db_session guarantees the same for anything already flushed.
"""

import logging
from typing import List, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from restnotes import links
from restnotes.exceptions import NotFoundError, UnresolvedReferenceError, ValidationError
from restnotes.models.note import Note
from restnotes.models.tag import Tag
from restnotes.repositories.note_repository import NoteRepository
from restnotes.repositories.tag_repository import TagRepository
from restnotes.schemas.note import NoteInput, NotePatchInput
from restnotes.validation import validate_note_input, validate_note_patch

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic for notes.

    Responsibilities:
        - create_note(): validate, resolve tags, persist
        - patch_note():  partial update with tag-set replacement
        - get_note() / list_notes() / get_note_tags(): reads
        - delete_note(): removal, association rows included
    """

    async def list_notes(self, db: AsyncSession) -> Sequence[Note]:
        return await NoteRepository(db).find_all()

    async def get_note(self, db: AsyncSession, note_id: UUID) -> Note:
        """
        Raises:
            NotFoundError: no note has this id (→ 404)
        """
        note = await NoteRepository(db).find_by_id(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        return note

    async def get_note_tags(self, db: AsyncSession, note_id: UUID) -> List[Tag]:
        """The tags of one note; target of the note's `note-tags` link."""
        note = await self.get_note(db, note_id)
        return list(note.tags)

    async def create_note(self, db: AsyncSession, note_input: NoteInput) -> Note:
        """
        Create a note from a validated POST body.

        Raises:
            ValidationError:          blank title or body (→ 400)
            UnresolvedReferenceError: a tag URI names no stored tag (→ 400)
        """
        violations = validate_note_input(note_input)
        if violations:
            raise ValidationError(violations)

        tags = await self._resolve_tags(db, note_input.tags)

        note = Note(title=note_input.title, body=note_input.body, tags=tags)
        await NoteRepository(db).create(note)
        logger.info("Note %s created with %d tag(s)", note.id, len(tags))
        return note

    async def patch_note(self, db: AsyncSession, note_id: UUID, patch: NotePatchInput) -> Note:
        """
        Apply a partial update.

        Only fields present and non-null in the body are written. Applying the
        same patch twice leaves the note in the same state as applying it once.

        Raises:
            NotFoundError:            unknown note (→ 404)
            ValidationError:          a present field is blank (→ 400)
            UnresolvedReferenceError: a tag URI names no stored tag (→ 400)
        """
        repository = NoteRepository(db)
        note = await repository.find_by_id(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))

        violations = validate_note_patch(patch)
        if violations:
            raise ValidationError(violations)

        # Resolve first: an unresolvable reference must not leave the note
        # half-updated
        new_tags = None
        if patch.tags is not None:
            new_tags = await self._resolve_tags(db, patch.tags)

        if patch.title is not None:
            note.title = patch.title
        if patch.body is not None:
            note.body = patch.body
        if new_tags is not None:
            note.tags = new_tags

        await repository.save(note)
        logger.info(
            "Note %s patched (fields: %s)",
            note.id,
            ", ".join(sorted(f for f in patch.model_fields_set if getattr(patch, f) is not None)) or "none",
        )
        return note

    async def delete_note(self, db: AsyncSession, note_id: UUID) -> None:
        repository = NoteRepository(db)
        note = await repository.find_by_id(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=str(note_id))
        await repository.delete(note)
        logger.info("Note %s deleted", note_id)

    async def _resolve_tags(self, db: AsyncSession, tag_uris: Sequence[str]) -> List[Tag]:
        """
        Turn tag URIs into stored Tag entities.

        Duplicate references collapse into one tag (the association is a set).

        Raises:
            UnresolvedReferenceError: names the first URI that does not parse
                                      or whose tag does not exist
        """
        ids: List[UUID] = []
        uri_by_id = {}
        for uri in tag_uris:
            tag_id = links.parse_resource_uri(uri, links.TAGS)
            if tag_id is None:
                raise UnresolvedReferenceError(uri=uri, resource="tag")
            if tag_id not in uri_by_id:
                uri_by_id[tag_id] = uri
                ids.append(tag_id)

        tags = await TagRepository(db).find_all_by_ids(ids)
        if len(tags) != len(ids):
            found = {tag.id for tag in tags}
            missing = next(tag_id for tag_id in ids if tag_id not in found)
            logger.warning("Unresolved tag reference: %s", uri_by_id[missing])
            raise UnresolvedReferenceError(uri=uri_by_id[missing], resource="tag")
        return tags


note_service = NoteService()
