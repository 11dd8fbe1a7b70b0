"""
RESTful Notes — Note SQLAlchemy Model
=====================================

What:  ORM model representing the `notes` table.
Who:   Used by NoteRepository for persistence and by the assemblers for
       building representations.

Table Design:
    - UUID primary key, generated in Python so the id is known right after
      flush (the Location header of POST /notes needs it)
    - title / body: TEXT, NOT NULL; blank values are rejected before they
      reach the model
    - tags: many-to-many through note_tags, mirrored by Tag.notes
    - created_at: UTC, used only to give collection listings a stable order
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from restnotes.database import Base
from restnotes.models.note_tag import note_tags

if TYPE_CHECKING:
    from restnotes.models.tag import Tag


class Note(Base):
    """
    A titled piece of text that can carry any number of tags.

    Lifecycle:
        1. Created by POST /notes with title, body and optional tag URIs
        2. Updated in place by PATCH /notes/{id} (only the fields sent)
        3. Deleted by DELETE /notes/{id}; its association rows go with it
    """

    __tablename__ = "notes"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    body: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Never lazy-loaded from async code: repositories eager-load it with
    # selectinload whenever the collection is read or replaced
    tags: Mapped[List["Tag"]] = relationship(
        secondary=note_tags,
        back_populates="notes",
    )

    __table_args__ = (
        Index("idx_notes_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}')>"
