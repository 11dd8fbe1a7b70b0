"""
RESTful Notes — Tag Request/Response Schemas
============================================

What:  Request bodies for POST/PATCH /tags and the HAL representations
       returned by the tag endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from restnotes.schemas.hal import CollectionLinks, Link
from restnotes.validation import CONSTRAINT_DESCRIPTIONS, NOT_BLANK, NULL_OR_NOT_BLANK


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class TagInput(BaseModel):
    """Body of POST /tags."""

    name: str = Field(
        description="The name of the tag",
        json_schema_extra={"constraints": CONSTRAINT_DESCRIPTIONS[NOT_BLANK]},
    )


class TagPatchInput(BaseModel):
    """Body of PATCH /tags/{id}. Omitted or null fields keep their value."""

    name: Optional[str] = Field(
        default=None,
        description="The name of the tag",
        json_schema_extra={"constraints": CONSTRAINT_DESCRIPTIONS[NULL_OR_NOT_BLANK]},
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class TagLinks(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    self_link: Link = Field(alias="self", description="This tag")
    tagged_notes: Link = Field(alias="tagged-notes", description="The notes that have this tag")


class TagModel(BaseModel):
    """
    What:  Representation of a single tag.
    Who:   GET /tags/{id}, and every entry of a tag collection.

    Example:
        {
            "name": "REST",
            "_links": {
                "self": {"href": "http://localhost:8080/tags/…"},
                "tagged-notes": {"href": "http://localhost:8080/tags/…/notes"}
            }
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="The name of the tag")
    links: TagLinks = Field(alias="_links", description="Links to other resources")


class TagsEmbedded(BaseModel):
    tags: List[TagModel] = Field(description="An array of Tag resources")


class TagCollectionModel(BaseModel):
    """GET /tags and GET /notes/{id}/tags."""

    model_config = ConfigDict(populate_by_name=True)

    embedded: TagsEmbedded = Field(alias="_embedded")
    links: CollectionLinks = Field(alias="_links")
