"""
MemoNotes Backend — HTTP Endpoint Tests
==========================================

What:  Tests for the notes routes, static pages, health check and docs.
How:   HTTPX AsyncClient over ASGITransport against an app built per test
       with its own NoteStore (see conftest.py).
"""

import logging

import pytest

from memonotes.models.note import Note


class TestWriteNote:
    """POST /write"""

    @pytest.mark.asyncio
    async def test_write_creates_note(self, test_client, note_store):
        """Form submission creates the note and returns 201."""
        response = await test_client.post(
            "/write", data={"note_name": "todo", "note": "buy milk"}
        )

        assert response.status_code == 201
        assert response.json() == {"message": "Note created", "name": "todo"}
        assert note_store.read("todo") == "buy milk"

    @pytest.mark.asyncio
    async def test_write_accepts_multipart(self, test_client, note_store):
        """The upload form posts multipart/form-data."""
        boundary = "memonotes-boundary"
        body = (
            f"--{boundary}\r\n"
            'Content-Disposition: form-data; name="note_name"\r\n\r\n'
            "recipe\r\n"
            f"--{boundary}\r\n"
            'Content-Disposition: form-data; name="note"\r\n\r\n'
            "two eggs\r\n"
            f"--{boundary}--\r\n"
        ).encode("utf-8")

        response = await test_client.post(
            "/write",
            content=body,
            headers={"Content-Type": f"multipart/form-data; boundary={boundary}"},
        )

        assert response.status_code == 201
        assert note_store.read("recipe") == "two eggs"

    @pytest.mark.asyncio
    async def test_write_duplicate_is_400(self, test_client, note_store):
        """Duplicate names are rejected and the first text is kept."""
        note_store.create("a", "1")

        response = await test_client.post("/write", data={"note_name": "a", "note": "2"})

        assert response.status_code == 400
        assert response.json()["error"] == "already_exists"
        assert note_store.read("a") == "1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "form",
        [
            {},
            {"note_name": "only-name"},
            {"note": "only-text"},
            {"note_name": "x", "note": ""},
        ],
    )
    async def test_write_missing_fields_is_400(self, test_client, note_store, form):
        """Missing or empty fields give 400, not 422."""
        response = await test_client.post("/write", data=form)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_error"
        assert len(note_store) == 0


class TestReadNote:
    """GET /notes/{name}"""

    @pytest.mark.asyncio
    async def test_read_returns_plain_text(self, test_client, note_store):
        note_store.create("greeting", "hello world")

        response = await test_client.get("/notes/greeting")

        assert response.status_code == 200
        assert response.text == "hello world"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_read_missing_is_404(self, test_client):
        response = await test_client.get("/notes/missing")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["details"]["resource_id"] == "missing"


class TestUpdateNote:
    """PUT /notes/{name}"""

    @pytest.mark.asyncio
    async def test_update_replaces_text_with_raw_body(self, test_client, note_store):
        note_store.create("n", "t")

        response = await test_client.put(
            "/notes/n", content="u", headers={"Content-Type": "text/plain"}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Note updated", "name": "n"}
        assert (await test_client.get("/notes/n")).text == "u"

    @pytest.mark.asyncio
    async def test_update_with_empty_body_stores_empty_text(self, test_client, note_store):
        """Empty text is accepted on update, unlike on create."""
        note_store.create("x", "something")

        response = await test_client.put("/notes/x", content=b"")

        assert response.status_code == 200
        assert note_store.read("x") == ""

    @pytest.mark.asyncio
    async def test_update_missing_is_404(self, test_client, note_store):
        response = await test_client.put("/notes/missing", content="x")

        assert response.status_code == 404
        assert not note_store.contains("missing")

    @pytest.mark.asyncio
    async def test_update_invalid_utf8_is_400(self, test_client, note_store):
        note_store.create("n", "t")

        response = await test_client.put("/notes/n", content=b"\xff\xfe\xfa")

        assert response.status_code == 400
        assert note_store.read("n") == "t"


class TestDeleteNote:
    """DELETE /notes/{name}"""

    @pytest.mark.asyncio
    async def test_delete_then_second_delete(self, test_client, note_store):
        """First delete succeeds; the second reports 404."""
        note_store.create("n", "t")

        first = await test_client.delete("/notes/n")
        second = await test_client.delete("/notes/n")

        assert first.status_code == 200
        assert second.status_code == 404
        assert (await test_client.get("/notes/n")).status_code == 404


class TestListNotes:
    """GET /notes"""

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/notes")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_after_create_and_delete(self, test_client):
        """Full HTTP round: create a and b, delete a, list shows only b."""
        await test_client.post("/write", data={"note_name": "a", "note": "1"})
        await test_client.post("/write", data={"note_name": "b", "note": "2"})
        await test_client.delete("/notes/a")

        response = await test_client.get("/notes")

        assert response.json() == [{"name": "b", "text": "2"}]


class TestPagesAndDocs:
    """Static pages, health check, and generated API docs."""

    @pytest.mark.asyncio
    async def test_root_reports_running(self, test_client):
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.text == "Server is running"

    @pytest.mark.asyncio
    async def test_upload_form_posts_to_write(self, test_client):
        response = await test_client.get("/UploadForm.html")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert 'action="/write"' in response.text
        assert 'name="note_name"' in response.text

    @pytest.mark.asyncio
    async def test_health_reports_note_count(self, test_client, note_store):
        note_store.create("a", "1")

        response = await test_client.get("/health")

        body = response.json()
        assert response.status_code == 200
        assert body["status"] == "healthy"
        assert body["notes"] == 1

    @pytest.mark.asyncio
    async def test_docs_and_openapi(self, test_client):
        docs = await test_client.get("/docs")
        openapi = await test_client.get("/openapi.json")

        assert docs.status_code == 200
        assert "text/html" in docs.headers["content-type"]
        paths = openapi.json()["paths"]
        assert {"/notes", "/notes/{name}", "/write"} <= set(paths)
        assert {"get", "put", "delete"} <= set(paths["/notes/{name}"])


class TestRequestId:
    """X-Request-ID correlation header."""

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, test_client):
        response = await test_client.get("/notes", headers={"X-Request-ID": "abc123"})

        assert response.headers["X-Request-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_request_id_in_error_body(self, test_client):
        response = await test_client.get("/notes/none", headers={"X-Request-ID": "trace-1"})

        assert response.json()["request_id"] == "trace-1"


class TestAppIsolation:
    """Each create_app() call owns its own store."""

    def test_separate_apps_do_not_share_notes(self):
        from memonotes.main import create_app

        first = create_app()
        second = create_app()
        first.state.note_store.create("only-first", "x")

        assert first.state.note_store.list() == [Note(name="only-first", text="x")]
        assert second.state.note_store.list() == []


class TestNamesWithSlash:
    """Names containing '/' stay reachable through /notes/{name}."""

    @pytest.mark.asyncio
    async def test_encoded_slash_round_trip(self, test_client, note_store):
        """A note created as 'a/b' can be read, updated and deleted via a%2Fb."""
        created = await test_client.post("/write", data={"note_name": "a/b", "note": "x"})
        assert created.status_code == 201
        assert (await test_client.get("/notes")).json() == [{"name": "a/b", "text": "x"}]

        read = await test_client.get("/notes/a%2Fb")
        assert read.status_code == 200
        assert read.text == "x"

        updated = await test_client.put("/notes/a%2Fb", content="y")
        assert updated.status_code == 200
        assert note_store.read("a/b") == "y"

        deleted = await test_client.delete("/notes/a%2Fb")
        assert deleted.status_code == 200
        assert (await test_client.get("/notes/a%2Fb")).status_code == 404
        assert note_store.list() == []

    @pytest.mark.asyncio
    async def test_unencoded_slash_reads_same_note(self, test_client, note_store):
        note_store.create("dir/file", "content")

        response = await test_client.get("/notes/dir/file")

        assert response.status_code == 200
        assert response.text == "content"


class TestAccessLog:
    """Access log lines from RequestLoggingMiddleware."""

    @pytest.mark.asyncio
    async def test_access_log_uses_route_template(self, test_client, note_store, caplog):
        """Note names are replaced by the route template in access lines."""
        note_store.create("private-diary", "dear diary")

        with caplog.at_level(logging.INFO, logger="memonotes.access"):
            await test_client.get("/notes/private-diary")
            await test_client.delete("/notes/private-diary")

        lines = [
            record.getMessage() for record in caplog.records
            if record.name == "memonotes.access"
        ]
        assert len(lines) == 2
        assert lines[0].startswith("GET /notes/{name} 200")
        assert lines[1].startswith("DELETE /notes/{name} 200")
        assert all("private-diary" not in line for line in lines)

    @pytest.mark.asyncio
    async def test_unmatched_path_logged_without_raw_url(self, test_client, caplog):
        with caplog.at_level(logging.INFO, logger="memonotes.access"):
            response = await test_client.get("/no/such/secret-path")

        assert response.status_code == 404
        messages = [r.getMessage() for r in caplog.records if r.name == "memonotes.access"]
        assert messages[0].startswith("GET <unmatched> 404")
        assert "secret-path" not in messages[0]
