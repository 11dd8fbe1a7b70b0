"""
RESTful Notes — API Endpoint Tests
==================================

What:  End-to-end tests through the HTTP layer: status codes, headers, HAL
       bodies, link following, and the uniform error body.
How:   HTTPX AsyncClient over ASGITransport; each test has its own database.
"""

from uuid import uuid4

import pytest

from restnotes.database import dispose_engine

HAL = "application/hal+json"


def _links(body: dict) -> dict:
    return {rel: link["href"] for rel, link in body["_links"].items()}


class TestIndex:

    @pytest.mark.asyncio
    async def test_index_links(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith(HAL)
        assert _links(response.json()) == {
            "notes": "http://test/notes",
            "tags": "http://test/tags",
        }

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc123"})
        assert response.headers["x-request-id"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_generated(self, test_client):
        response = await test_client.get("/")
        assert response.headers["x-request-id"]


class TestGettingStarted:
    """Discover everything from / and walk the note/tag graph by links only."""

    @pytest.mark.asyncio
    async def test_full_flow(self, test_client):
        index = _links((await test_client.get("/")).json())

        created = await test_client.post(index["tags"], json={"name": "REST"})
        assert created.status_code == 201
        assert created.content == b""
        tag_uri = created.headers["location"]

        created = await test_client.post(
            index["notes"],
            json={"title": "REST maturity model", "body": "Levels 0 to 3", "tags": [tag_uri]},
        )
        assert created.status_code == 201
        note_uri = created.headers["location"]

        note = (await test_client.get(note_uri)).json()
        assert note["title"] == "REST maturity model"
        note_links = _links(note)
        assert note_links["self"] == note_uri

        note_tags = (await test_client.get(note_links["note-tags"])).json()
        assert [_links(t)["self"] for t in note_tags["_embedded"]["tags"]] == [tag_uri]
        assert note_tags["_embedded"]["tags"][0]["name"] == "REST"
        assert _links(note_tags)["self"] == note_links["note-tags"]

        tag = (await test_client.get(tag_uri)).json()
        tagged = (await test_client.get(_links(tag)["tagged-notes"])).json()
        assert [_links(n)["self"] for n in tagged["_embedded"]["notes"]] == [note_uri]

        patched = await test_client.patch(note_uri, json={"tags": []})
        assert patched.status_code == 204

        note_tags = (await test_client.get(note_links["note-tags"])).json()
        assert note_tags["_embedded"]["tags"] == []
        tagged = (await test_client.get(_links(tag)["tagged-notes"])).json()
        assert tagged["_embedded"]["notes"] == []


class TestNotesEndpoints:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/notes")

        assert response.status_code == 200
        body = response.json()
        assert body["_embedded"] == {"notes": []}
        assert _links(body) == {"self": "http://test/notes"}

    @pytest.mark.asyncio
    async def test_list(self, test_client, create_note):
        await create_note("one", "1")
        await create_note("two", "2")

        body = (await test_client.get("/notes")).json()
        assert sorted(n["title"] for n in body["_embedded"]["notes"]) == ["one", "two"]

    @pytest.mark.asyncio
    async def test_note_without_tags_has_note_tags_link(self, test_client, create_note):
        note_uri = await create_note("bare", "no tags")

        note = (await test_client.get(note_uri)).json()
        response = await test_client.get(_links(note)["note-tags"])

        assert response.status_code == 200
        assert response.json()["_embedded"]["tags"] == []

    @pytest.mark.asyncio
    async def test_create_with_null_tags(self, test_client):
        response = await test_client.post("/notes", json={"title": "t", "body": "b", "tags": None})
        assert response.status_code == 201

        note = (await test_client.get(response.headers["location"])).json()
        tags = (await test_client.get(_links(note)["note-tags"])).json()
        assert tags["_embedded"]["tags"] == []

    @pytest.mark.asyncio
    async def test_patch_title_only(self, test_client, create_note, create_tag):
        tag_uri = await create_tag("kept")
        note_uri = await create_note("old", "body", tags=[tag_uri])

        response = await test_client.patch(note_uri, json={"title": "new"})
        assert response.status_code == 204
        assert response.content == b""

        note = (await test_client.get(note_uri)).json()
        assert (note["title"], note["body"]) == ("new", "body")
        tags = (await test_client.get(_links(note)["note-tags"])).json()
        assert len(tags["_embedded"]["tags"]) == 1

    @pytest.mark.asyncio
    async def test_patch_null_fields_ignored(self, test_client, create_note):
        note_uri = await create_note("title", "body")

        response = await test_client.patch(note_uri, json={"title": None, "body": None})
        assert response.status_code == 204

        note = (await test_client.get(note_uri)).json()
        assert (note["title"], note["body"]) == ("title", "body")

    @pytest.mark.asyncio
    async def test_patch_replaces_tags(self, test_client, create_note, create_tag):
        a = await create_tag("a")
        b = await create_tag("b")
        c = await create_tag("c")
        note_uri = await create_note("t", "b", tags=[a, b])

        await test_client.patch(note_uri, json={"tags": [c]})

        note = (await test_client.get(note_uri)).json()
        tags = (await test_client.get(_links(note)["note-tags"])).json()
        assert [t["name"] for t in tags["_embedded"]["tags"]] == ["c"]

    @pytest.mark.asyncio
    async def test_patch_with_unknown_tag_changes_nothing(self, test_client, create_note, create_tag):
        a = await create_tag("a")
        note_uri = await create_note("title", "body", tags=[a])
        missing = f"http://test/tags/{uuid4()}"

        response = await test_client.patch(note_uri, json={"title": "changed", "tags": [missing]})

        assert response.status_code == 400
        assert response.json()["message"] == f"The tag '{missing}' does not exist"
        note = (await test_client.get(note_uri)).json()
        assert note["title"] == "title"
        tags = (await test_client.get(_links(note)["note-tags"])).json()
        assert [t["name"] for t in tags["_embedded"]["tags"]] == ["a"]

    @pytest.mark.asyncio
    async def test_patch_with_one_valid_and_one_unknown_tag_is_atomic(
        self, test_client, create_note, create_tag
    ):
        a = await create_tag("a")
        b = await create_tag("b")
        note_uri = await create_note("title", "body", tags=[a])
        missing = f"http://test/tags/{uuid4()}"

        response = await test_client.patch(note_uri, json={"tags": [b, missing]})

        assert response.status_code == 400
        assert response.json()["message"] == f"The tag '{missing}' does not exist"

        note = (await test_client.get(note_uri)).json()
        tags = (await test_client.get(_links(note)["note-tags"])).json()
        assert [t["name"] for t in tags["_embedded"]["tags"]] == ["a"]

        tag_b = (await test_client.get(b)).json()
        tagged = (await test_client.get(_links(tag_b)["tagged-notes"])).json()
        assert tagged["_embedded"]["notes"] == []

    @pytest.mark.asyncio
    async def test_delete(self, test_client, create_note):
        note_uri = await create_note("gone", "soon")

        response = await test_client.delete(note_uri)
        assert response.status_code == 204

        assert (await test_client.get(note_uri)).status_code == 404
        assert (await test_client.delete(note_uri)).status_code == 404


class TestTagsEndpoints:

    @pytest.mark.asyncio
    async def test_list(self, test_client, create_tag):
        await create_tag("REST")

        body = (await test_client.get("/tags")).json()
        assert [t["name"] for t in body["_embedded"]["tags"]] == ["REST"]
        assert _links(body) == {"self": "http://test/tags"}

    @pytest.mark.asyncio
    async def test_rename(self, test_client, create_tag):
        tag_uri = await create_tag("old")

        assert (await test_client.patch(tag_uri, json={"name": "new"})).status_code == 204
        assert (await test_client.get(tag_uri)).json()["name"] == "new"

    @pytest.mark.asyncio
    async def test_delete_untags_notes(self, test_client, create_tag, create_note):
        tag_uri = await create_tag("doomed")
        note_uri = await create_note("t", "b", tags=[tag_uri])

        assert (await test_client.delete(tag_uri)).status_code == 204

        note = (await test_client.get(note_uri)).json()
        tags = (await test_client.get(_links(note)["note-tags"])).json()
        assert tags["_embedded"]["tags"] == []


class TestErrors:

    @pytest.mark.asyncio
    async def test_unknown_note_404(self, test_client):
        path = f"/notes/{uuid4()}"
        response = await test_client.get(path, headers={"X-Request-ID": "req-1"})

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Not Found"
        assert body["message"] == f"The resource '{path}' does not exist"
        assert body["path"] == path
        assert body["status"] == 404
        assert isinstance(body["timestamp"], int)
        assert body["request_id"] == "req-1"

    @pytest.mark.asyncio
    async def test_unknown_tag_reverse_collection_404(self, test_client):
        response = await test_client.get(f"/tags/{uuid4()}/notes")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unresolved_tag_on_create(self, test_client):
        missing = f"http://test/tags/{uuid4()}"
        response = await test_client.post(
            "/notes", json={"title": "t", "body": "b", "tags": [missing]}
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Bad Request"
        assert body["message"] == f"The tag '{missing}' does not exist"
        assert body["path"] == "/notes"
        assert (await test_client.get("/notes")).json()["_embedded"]["notes"] == []

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, test_client):
        response = await test_client.post("/notes", json={"title": " ", "body": "b"})

        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "title: must not be blank"
        assert body["details"]["violations"][0]["constraint"] == "NotBlank"

    @pytest.mark.asyncio
    async def test_blank_patch_rejected(self, test_client, create_tag):
        tag_uri = await create_tag("name")
        response = await test_client.patch(tag_uri, json={"name": ""})

        assert response.status_code == 400
        assert response.json()["details"]["violations"][0]["constraint"] == "NullOrNotBlank"

    @pytest.mark.asyncio
    async def test_missing_field_rejected(self, test_client):
        response = await test_client.post("/notes", json={"body": "no title"})

        assert response.status_code == 400
        assert "title" in response.json()["message"]

    @pytest.mark.asyncio
    async def test_malformed_id_rejected(self, test_client):
        response = await test_client.get("/notes/not-a-uuid")
        assert response.status_code == 400
        assert response.json()["status"] == 400

    @pytest.mark.asyncio
    async def test_unknown_route(self, test_client):
        response = await test_client.get("/nothing-here")

        assert response.status_code == 404
        assert response.json()["message"] == "The resource '/nothing-here' does not exist"

    @pytest.mark.asyncio
    async def test_error_route(self, test_client):
        response = await test_client.get(
            "/error", params={"status": 404, "path": "/notes/x", "message": "Gone"}
        )

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Not Found"
        assert body["status"] == 404
        assert body["path"] == "/notes/x"
        assert body["message"] == "Gone"
        assert isinstance(body["timestamp"], int)


class TestApiDocumentation:

    @pytest.mark.asyncio
    async def test_constraints_documented(self, test_client):
        schemas = (await test_client.get("/openapi.json")).json()["components"]["schemas"]

        assert schemas["NoteInput"]["properties"]["title"]["constraints"] == "Must not be blank"
        assert schemas["NotePatchInput"]["properties"]["body"]["constraints"] == "Must be null or not blank"
        assert schemas["TagInput"]["properties"]["name"]["constraints"] == "Must not be blank"

    @pytest.mark.asyncio
    async def test_docs_served(self, test_client):
        assert (await test_client.get("/docs")).status_code == 200


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        try:
            response = await test_client.get("/health")
        finally:
            await dispose_engine()

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"
