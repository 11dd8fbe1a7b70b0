"""
RESTful Notes — Resource Assemblers
===================================

What:  Convert stored Note/Tag entities into their HAL representations.
How:   Each function reads only scalar columns and ids from the entity and
       asks restnotes.links for the URIs, so none of them touch an unloaded
       relationship (safe to call outside the session's greenlet).
Who:   Route handlers, after the service has loaded or stored the entity.
"""

from typing import Iterable

from restnotes import links
from restnotes.models.note import Note
from restnotes.models.tag import Tag
from restnotes.schemas.hal import CollectionLinks, IndexLinks, IndexModel, Link
from restnotes.schemas.note import NoteCollectionModel, NoteLinks, NoteModel, NotesEmbedded
from restnotes.schemas.tag import TagCollectionModel, TagLinks, TagModel, TagsEmbedded


def note_representation(note: Note, base_url: str) -> NoteModel:
    return NoteModel(
        title=note.title,
        body=note.body,
        links=NoteLinks(
            self_link=Link(href=links.relation_uri(base_url, links.NOTES, note.id, links.REL_SELF)),
            note_tags=Link(href=links.relation_uri(base_url, links.NOTES, note.id, links.REL_NOTE_TAGS)),
        ),
    )


def tag_representation(tag: Tag, base_url: str) -> TagModel:
    return TagModel(
        name=tag.name,
        links=TagLinks(
            self_link=Link(href=links.relation_uri(base_url, links.TAGS, tag.id, links.REL_SELF)),
            tagged_notes=Link(href=links.relation_uri(base_url, links.TAGS, tag.id, links.REL_TAGGED_NOTES)),
        ),
    )


def note_collection(notes: Iterable[Note], base_url: str, self_href: str) -> NoteCollectionModel:
    """
    Wrap notes in an embedded collection.

    self_href is the URI the collection was requested from: /notes for the
    full listing, /tags/{id}/notes for a tag's reverse collection.
    """
    return NoteCollectionModel(
        embedded=NotesEmbedded(notes=[note_representation(n, base_url) for n in notes]),
        links=CollectionLinks(self_link=Link(href=self_href)),
    )


def tag_collection(tags: Iterable[Tag], base_url: str, self_href: str) -> TagCollectionModel:
    return TagCollectionModel(
        embedded=TagsEmbedded(tags=[tag_representation(t, base_url) for t in tags]),
        links=CollectionLinks(self_link=Link(href=self_href)),
    )


def index_representation(base_url: str) -> IndexModel:
    return IndexModel(
        links=IndexLinks(
            notes=Link(href=links.collection_uri(base_url, links.NOTES)),
            tags=Link(href=links.collection_uri(base_url, links.TAGS)),
        )
    )
