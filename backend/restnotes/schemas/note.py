"""
RESTful Notes — Note Request/Response Schemas
=============================================

What:  Request bodies for POST/PATCH /notes and the HAL representations
       returned by the note endpoints.
How:   FastAPI validates request bodies against the input models and
       serializes responses through the output models (by alias, so the
       HAL `_links` / `_embedded` keys appear on the wire).

Design Decision:
    Schemas are separate from SQLAlchemy models: a note's tags travel as
    URIs in requests and as a `note-tags` link in responses, never as
    embedded rows.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from restnotes.schemas.hal import CollectionLinks, Link
from restnotes.validation import CONSTRAINT_DESCRIPTIONS, NOT_BLANK, NULL_OR_NOT_BLANK


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteInput(BaseModel):
    """
    Body of POST /notes.

    Example:
        {
            "title": "REST maturity model",
            "body": "https://martinfowler.com/articles/richardsonMaturityModel.html",
            "tags": ["http://localhost:8080/tags/5c0f…"]
        }
    """

    title: str = Field(
        description="The title of the note",
        json_schema_extra={"constraints": CONSTRAINT_DESCRIPTIONS[NOT_BLANK]},
    )
    body: str = Field(
        description="The body of the note",
        json_schema_extra={"constraints": CONSTRAINT_DESCRIPTIONS[NOT_BLANK]},
    )
    tags: Optional[List[str]] = Field(
        default_factory=list,
        description="An array of tag resource URIs",
    )

    @field_validator("tags", mode="before")
    @classmethod
    def null_tags_as_empty(cls, v):
        """`"tags": null` means the same as leaving the key out: no tags."""
        return [] if v is None else v


class NotePatchInput(BaseModel):
    """
    Body of PATCH /notes/{id}.

    Any subset of the fields may be sent. Omitted or null fields keep their
    current value. `tags`, when present, replaces the whole tag set; send
    an empty array to remove every tag.
    """

    title: Optional[str] = Field(
        default=None,
        description="The title of the note",
        json_schema_extra={"constraints": CONSTRAINT_DESCRIPTIONS[NULL_OR_NOT_BLANK]},
    )
    body: Optional[str] = Field(
        default=None,
        description="The body of the note",
        json_schema_extra={"constraints": CONSTRAINT_DESCRIPTIONS[NULL_OR_NOT_BLANK]},
    )
    tags: Optional[List[str]] = Field(
        default=None,
        description="An array of tag resource URIs",
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoteLinks(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_link: Link = Field(alias="self", description="This note")
    note_tags: Link = Field(alias="note-tags", description="This note's tags")


class NoteModel(BaseModel):
    """
    What:  Representation of a single note.
    Who:   GET /notes/{id}, and every entry of a note collection.

    The `note-tags` link is always present, also for a note without tags;
    following it yields an empty collection in that case.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(description="The title of the note")
    body: str = Field(description="The body of the note")
    links: NoteLinks = Field(alias="_links", description="Links to other resources")


class NotesEmbedded(BaseModel):
    notes: List[NoteModel] = Field(description="An array of Note resources")


class NoteCollectionModel(BaseModel):
    """GET /notes and GET /tags/{id}/notes."""

    model_config = ConfigDict(populate_by_name=True)

    embedded: NotesEmbedded = Field(alias="_embedded")
    links: CollectionLinks = Field(alias="_links")
