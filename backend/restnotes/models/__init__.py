"""ORM models. Importing this package registers every table on Base.metadata."""

from restnotes.models.note import Note
from restnotes.models.note_tag import note_tags
from restnotes.models.tag import Tag

__all__ = ["Note", "Tag", "note_tags"]
