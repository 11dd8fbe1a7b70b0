"""
RESTful Notes — Tag SQLAlchemy Model
====================================

What:  ORM model representing the `tags` table.

Tag.notes is the inverse side of Note.tags. It is derived from the shared
note_tags rows, so there is nothing to keep in sync by hand: appending a tag
to a note makes the note show up here, and vice versa.
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from restnotes.database import Base
from restnotes.models.note_tag import note_tags

if TYPE_CHECKING:
    from restnotes.models.note import Note


class Tag(Base):
    """A named label that groups notes."""

    __tablename__ = "tags"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    name: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    notes: Mapped[List["Note"]] = relationship(
        secondary=note_tags,
        back_populates="tags",
    )

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name='{self.name}')>"
