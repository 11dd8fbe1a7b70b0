"""Entity store for notes."""

from typing import List

from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from restnotes.models.note import Note
from restnotes.repositories.base import Repository


class NoteRepository(Repository[Note]):
    """
    Notes are always loaded with their tags: replacing Note.tags needs the
    current collection to work out which association rows to delete.
    """

    model = Note

    def _load_options(self) -> List[LoaderOption]:
        return [selectinload(Note.tags)]
