"""
NoteKeeper Backend: Notes API Tests
=====================================

What:  HTTP contract of /write and /notes[/{name}].
How:   HTTPX AsyncClient over ASGITransport against a fresh app per test.

Status codes under test:
    POST /write            201 created, 400 missing field, 400 duplicate
    GET /notes/{name}      200 text/plain, 404 missing
    PUT /notes/{name}      200 JSON note, 404 missing
    DELETE /notes/{name}   204, 404 missing
    GET /notes             200 JSON array
"""

import pytest


async def _create(client, name, text):
    return await client.post("/write", data={"note_name": name, "note": text})


class TestWrite:
    """POST /write"""

    @pytest.mark.asyncio
    async def test_create_urlencoded(self, test_client):
        response = await _create(test_client, "todo", "buy milk")

        assert response.status_code == 201
        assert response.text == "Created"

    @pytest.mark.asyncio
    async def test_create_multipart(self, test_client):
        response = await test_client.post(
            "/write",
            files={"note_name": (None, "todo"), "note": (None, "buy milk")},
        )

        assert response.status_code == 201
        assert (await test_client.get("/notes/todo")).text == "buy milk"

    @pytest.mark.asyncio
    async def test_create_json(self, test_client):
        response = await test_client.post("/write", json={"note_name": "todo", "note": "buy milk"})

        assert response.status_code == 201
        assert (await test_client.get("/notes/todo")).text == "buy milk"

    @pytest.mark.asyncio
    async def test_json_missing_name_is_400(self, test_client):
        response = await test_client.post("/write", json={"note": "buy milk"})

        assert response.status_code == 400
        assert response.json()["details"] == {"fields": ["note_name"]}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"{not json", b'["todo", "buy milk"]'])
    async def test_malformed_json_is_400(self, test_client, body):
        response = await test_client.post(
            "/write",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert (await test_client.get("/notes")).json() == []

    @pytest.mark.asyncio
    async def test_missing_text_is_400(self, test_client):
        response = await test_client.post("/write", data={"note_name": "todo"})

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Note name and text are required"
        assert body["details"] == {"fields": ["note"]}

    @pytest.mark.asyncio
    async def test_missing_both_fields_is_400(self, test_client):
        response = await test_client.post("/write", data={})

        assert response.status_code == 400
        assert response.json()["details"] == {"fields": ["note", "note_name"]}

    @pytest.mark.asyncio
    async def test_empty_text_is_400(self, test_client):
        response = await _create(test_client, "a", "")

        assert response.status_code == 400
        assert (await test_client.get("/notes")).json() == []

    @pytest.mark.asyncio
    async def test_duplicate_name_is_400(self, test_client):
        await _create(test_client, "todo", "buy milk")

        response = await _create(test_client, "todo", "buy bread")

        assert response.status_code == 400
        assert response.json()["error"] == "conflict"
        assert (await test_client.get("/notes/todo")).text == "buy milk"


class TestReadUpdateDelete:
    """GET/PUT/DELETE /notes/{name}"""

    @pytest.mark.asyncio
    async def test_get_returns_plain_text(self, test_client):
        await _create(test_client, "todo", "buy milk")

        response = await test_client.get("/notes/todo")

        assert response.status_code == 200
        assert response.text == "buy milk"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["GET", "PUT", "DELETE"])
    async def test_missing_note_is_404(self, test_client, method):
        response = await test_client.request(method, "/notes/ghost", content="boo")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_put_replaces_text(self, test_client):
        await _create(test_client, "todo", "buy milk")

        response = await test_client.put(
            "/notes/todo",
            content="buy eggs",
            headers={"Content-Type": "text/plain"},
        )

        assert response.status_code == 200
        assert response.json() == {"name": "todo", "text": "buy eggs"}
        assert (await test_client.get("/notes/todo")).text == "buy eggs"

    @pytest.mark.asyncio
    async def test_put_empty_body_clears_text(self, test_client):
        await _create(test_client, "todo", "buy milk")

        response = await test_client.put("/notes/todo", content=b"")

        assert response.status_code == 200
        assert response.json()["text"] == ""

    @pytest.mark.asyncio
    async def test_put_non_utf8_body_is_400(self, test_client):
        await _create(test_client, "todo", "buy milk")

        response = await test_client.put("/notes/todo", content=b"\xff\xfe\xfa")

        assert response.status_code == 400
        assert (await test_client.get("/notes/todo")).text == "buy milk"

    @pytest.mark.asyncio
    async def test_delete_returns_204(self, test_client):
        await _create(test_client, "todo", "buy milk")

        response = await test_client.delete("/notes/todo")

        assert response.status_code == 204
        assert response.content == b""
        assert (await test_client.get("/notes/todo")).status_code == 404
        assert (await test_client.get("/notes")).json() == []

    @pytest.mark.asyncio
    async def test_lifecycle(self, test_client):
        assert (await _create(test_client, "todo", "buy milk")).status_code == 201
        assert (await test_client.get("/notes/todo")).text == "buy milk"
        assert (await test_client.put("/notes/todo", content="buy eggs")).status_code == 200
        assert (await test_client.get("/notes/todo")).text == "buy eggs"
        assert (await test_client.delete("/notes/todo")).status_code == 204
        assert (await test_client.get("/notes/todo")).status_code == 404


class TestNamesWithSlash:
    """Names created through /write stay addressable when they contain '/'."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/notes/a/b", "/notes/a%2Fb"])
    async def test_get_update_delete(self, test_client, path):
        assert (await _create(test_client, "a/b", "x")).status_code == 201

        response = await test_client.get(path)
        assert response.status_code == 200
        assert response.text == "x"

        response = await test_client.put(path, content="y")
        assert response.status_code == 200
        assert response.json() == {"name": "a/b", "text": "y"}

        assert (await test_client.delete(path)).status_code == 204
        assert (await test_client.get("/notes")).json() == []

    @pytest.mark.asyncio
    async def test_missing_nested_name_uses_error_envelope(self, test_client):
        response = await test_client.get("/notes/no/such/note")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestList:
    """GET /notes"""

    @pytest.mark.asyncio
    async def test_empty(self, test_client):
        response = await test_client.get("/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_lists_all_notes(self, test_client):
        await _create(test_client, "a", "x")
        await _create(test_client, "b", "y")

        response = await test_client.get("/notes")

        assert response.status_code == 200
        items = {(item["name"], item["text"]) for item in response.json()}
        assert items == {("a", "x"), ("b", "y")}

    @pytest.mark.asyncio
    async def test_apps_do_not_share_notes(self, test_client, test_settings):
        from httpx import ASGITransport, AsyncClient
        from notekeeper.main import create_app

        await _create(test_client, "a", "x")

        other = create_app(test_settings)
        async with AsyncClient(transport=ASGITransport(app=other), base_url="http://test") as client:
            assert (await client.get("/notes")).json() == []
