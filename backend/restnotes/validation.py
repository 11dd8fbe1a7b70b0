"""
RESTful Notes — Field Validation Rules
======================================

What:  Explicit validation functions that return a list of violations.
How:   Each rule inspects one value and returns a Violation or None; the
       per-input validators collect them. Services raise ValidationError
       when the list is not empty, before anything touches the database.
Who:   NoteService and TagService; the constants are also attached to the
       request schemas so the constraints show up in the OpenAPI document.

Rules:
    NotBlank        value must be present and contain a non-whitespace char
    NullOrNotBlank  value may be absent/null; if present it must not be blank

Pydantic already enforces the shape of the body (types, required keys);
these rules cover what a type cannot express.
"""

from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import BaseModel

if TYPE_CHECKING:
    from restnotes.schemas.note import NoteInput, NotePatchInput
    from restnotes.schemas.tag import TagInput, TagPatchInput


NOT_BLANK = "NotBlank"
NULL_OR_NOT_BLANK = "NullOrNotBlank"

# Human-readable descriptions, shown next to each field in the API docs
CONSTRAINT_DESCRIPTIONS: Dict[str, str] = {
    NOT_BLANK: "Must not be blank",
    NULL_OR_NOT_BLANK: "Must be null or not blank",
}


class Violation(BaseModel):
    """One broken constraint on one field."""

    field: str
    constraint: str
    message: str


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def not_blank(field: str, value: Optional[str]) -> Optional[Violation]:
    """Require a value with at least one non-whitespace character."""
    if value is None or _is_blank(value):
        return Violation(field=field, constraint=NOT_BLANK, message="must not be blank")
    return None


def null_or_not_blank(field: str, value: Optional[str]) -> Optional[Violation]:
    """
    Accept an absent value, reject an empty or whitespace-only one.

    Used for PATCH bodies: leaving a field out means "keep it", sending ""
    would otherwise blank it.
    """
    if value is not None and _is_blank(value):
        return Violation(
            field=field,
            constraint=NULL_OR_NOT_BLANK,
            message="must be null or not blank",
        )
    return None


def _collect(*results: Optional[Violation]) -> List[Violation]:
    return [v for v in results if v is not None]


def validate_note_input(note_input: "NoteInput") -> List[Violation]:
    return _collect(
        not_blank("title", note_input.title),
        not_blank("body", note_input.body),
    )


def validate_note_patch(patch: "NotePatchInput") -> List[Violation]:
    return _collect(
        null_or_not_blank("title", patch.title),
        null_or_not_blank("body", patch.body),
    )


def validate_tag_input(tag_input: "TagInput") -> List[Violation]:
    return _collect(not_blank("name", tag_input.name))


def validate_tag_patch(patch: "TagPatchInput") -> List[Violation]:
    return _collect(null_or_not_blank("name", patch.name))
