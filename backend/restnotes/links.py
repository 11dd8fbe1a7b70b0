"""
RESTful Notes — Link Building
=============================

What:  Pure functions that turn (base URL, resource, id, relation) into an
       absolute URI, and the inverse lookup used to resolve tag URIs sent by
       clients.
Who:   The assemblers (outgoing links), the routes (Location headers) and
       NoteService (incoming tag references).

URI Layout:
    {base}/notes                  notes collection
    {base}/notes/{id}             note            (rel: self)
    {base}/notes/{id}/tags        note's tags     (rel: note-tags)
    {base}/tags                   tags collection
    {base}/tags/{id}              tag             (rel: self)
    {base}/tags/{id}/notes        tagged notes    (rel: tagged-notes)

`base` is the request's base URL, so links follow whatever host and root
path the client used.
"""

from typing import Optional
from urllib.parse import urlsplit
from uuid import UUID

NOTES = "notes"
TAGS = "tags"

REL_SELF = "self"
REL_NOTE_TAGS = "note-tags"
REL_TAGGED_NOTES = "tagged-notes"

# relation name → path segment appended to the resource URI
_RELATION_SEGMENTS = {
    (NOTES, REL_NOTE_TAGS): TAGS,
    (TAGS, REL_TAGGED_NOTES): NOTES,
}


def build_uri(base_url: str, *segments: object) -> str:
    """Join path segments onto base_url with exactly one slash between parts."""
    path = "/".join(str(segment).strip("/") for segment in segments)
    return f"{str(base_url).rstrip('/')}/{path}"


def collection_uri(base_url: str, collection: str) -> str:
    return build_uri(base_url, collection)


def resource_uri(base_url: str, collection: str, resource_id: UUID) -> str:
    return build_uri(base_url, collection, resource_id)


def relation_uri(base_url: str, collection: str, resource_id: UUID, rel: str) -> str:
    """
    URI of a named relation of a resource.

    Raises:
        ValueError: rel is not defined for that collection
    """
    if rel == REL_SELF:
        return resource_uri(base_url, collection, resource_id)
    try:
        segment = _RELATION_SEGMENTS[(collection, rel)]
    except KeyError:
        raise ValueError(f"Unknown relation '{rel}' for {collection}") from None
    return build_uri(base_url, collection, resource_id, segment)


def parse_resource_uri(uri: str, collection: str) -> Optional[UUID]:
    """
    Extract the id from a resource URI such as http://host/tags/{id}.

    Only the path is inspected, so absolute and root-relative URIs both work.
    Returns None when the path does not end in /{collection}/{uuid}.
    """
    if not isinstance(uri, str) or not uri.strip():
        return None
    path = urlsplit(uri.strip()).path
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) < 2 or segments[-2] != collection:
        return None
    try:
        return UUID(segments[-1])
    except ValueError:
        return None
