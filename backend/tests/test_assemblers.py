"""
RESTful Notes — Assembler Tests
===============================

What:  The HAL shape of notes, tags, collections and the index, checked on
       transient entities (no database needed).
"""

from uuid import uuid4

from restnotes import assemblers
from restnotes.models.note import Note
from restnotes.models.tag import Tag

BASE = "http://localhost:8080/"


def _note(**kwargs) -> Note:
    return Note(id=uuid4(), title=kwargs.get("title", "Title"), body=kwargs.get("body", "Body"), tags=[])


def _tag(name: str = "REST") -> Tag:
    return Tag(id=uuid4(), name=name, notes=[])


class TestNoteRepresentation:

    def test_fields_and_links(self):
        note = _note(title="REST maturity model", body="levels 0-3")
        body = assemblers.note_representation(note, BASE).model_dump(by_alias=True)

        assert body["title"] == "REST maturity model"
        assert body["body"] == "levels 0-3"
        assert body["_links"]["self"]["href"] == f"http://localhost:8080/notes/{note.id}"
        assert body["_links"]["note-tags"]["href"] == f"http://localhost:8080/notes/{note.id}/tags"

    def test_note_tags_link_present_without_tags(self):
        body = assemblers.note_representation(_note(), BASE).model_dump(by_alias=True)
        assert "note-tags" in body["_links"]

    def test_no_internal_fields_exposed(self):
        body = assemblers.note_representation(_note(), BASE).model_dump(by_alias=True)
        assert set(body) == {"title", "body", "_links"}


class TestTagRepresentation:

    def test_fields_and_links(self):
        tag = _tag("Hypermedia")
        body = assemblers.tag_representation(tag, BASE).model_dump(by_alias=True)

        assert body["name"] == "Hypermedia"
        assert body["_links"]["self"]["href"] == f"http://localhost:8080/tags/{tag.id}"
        assert body["_links"]["tagged-notes"]["href"] == f"http://localhost:8080/tags/{tag.id}/notes"


class TestCollections:

    def test_note_collection(self):
        notes = [_note(title="a"), _note(title="b")]
        body = assemblers.note_collection(notes, BASE, "http://localhost:8080/notes").model_dump(by_alias=True)

        assert [n["title"] for n in body["_embedded"]["notes"]] == ["a", "b"]
        assert body["_links"]["self"]["href"] == "http://localhost:8080/notes"

    def test_empty_tag_collection_keeps_embedded(self):
        body = assemblers.tag_collection([], BASE, "http://localhost:8080/tags").model_dump(by_alias=True)
        assert body["_embedded"] == {"tags": []}


class TestIndex:

    def test_index_links(self):
        body = assemblers.index_representation(BASE).model_dump(by_alias=True)
        assert body == {
            "_links": {
                "notes": {"href": "http://localhost:8080/notes"},
                "tags": {"href": "http://localhost:8080/tags"},
            }
        }
