"""
RESTful Notes — Note/Tag Association Table
==========================================

What:  The `note_tags` join table behind the Note ↔ Tag many-to-many relation.
How:   Plain SQLAlchemy Table; both Note.tags and Tag.notes use it as their
       `secondary`, so one row makes the pair visible from either side.

Both foreign keys cascade on delete: removing a note or a tag drops its
association rows even when the delete bypasses the ORM (bulk delete_all).
"""

from sqlalchemy import Column, ForeignKey, Table, Uuid

from restnotes.database import Base

note_tags = Table(
    "note_tags",
    Base.metadata,
    Column("note_id", Uuid, ForeignKey("notes.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Uuid, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)
