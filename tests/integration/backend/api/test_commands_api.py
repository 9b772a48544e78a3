"""
Integration Tests for the Command Endpoint.

Drives the front-end invoke surface end to end against the in-memory store.
"""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient
from pymongo.errors import DocumentTooLarge


async def _invoke(client: AsyncClient, command: str, **arguments) -> dict:
    response = await client.post(f"/api/v1/commands/{command}", json=arguments)
    assert response.status_code == 200, response.text
    return response.json()


class TestListCommands:
    @pytest.mark.asyncio
    async def test_lists_registered_commands(self, client: AsyncClient, api):
        data = api.assert_success(await client.get("/api/v1/commands"))

        assert "search_notes" in data["data"]
        assert len(data["data"]) == 6


class TestNoteLifecycle:
    """Create, search, update and delete through commands."""

    @pytest.mark.asyncio
    async def test_alpha_beta_scenario(self, client: AsyncClient):
        created = await _invoke(
            client, "create_note", title="Alpha", content="first note", tags=["x"]
        )
        assert created["ok"] is True
        alpha = created["result"]

        await _invoke(client, "create_note", title="Beta", content="second note", tags=["y"])

        notes = (await _invoke(client, "get_notes"))["result"]
        assert [note["title"] for note in notes] == ["Alpha", "Beta"]

        found = (await _invoke(client, "search_notes", query="first"))["result"]
        assert found == [{"id": alpha, "title": "Alpha", "content": "first note", "tags": ["x"]}]

        updated = await _invoke(
            client, "update_note", id=alpha, title="Gamma", content="third note", tags=[]
        )
        assert updated["result"] == "Updated successfully"
        assert (await _invoke(client, "search_notes", query="first"))["result"] == []

        deleted = await _invoke(client, "delete_note", id=alpha)
        assert deleted["result"] == "Deleted"

        notes = (await _invoke(client, "get_notes"))["result"]
        assert [note["title"] for note in notes] == ["Beta"]

    @pytest.mark.asyncio
    async def test_check_connection(self, client: AsyncClient):
        body = await _invoke(client, "check_connection")

        assert body["ok"] is True
        assert body["result"].startswith("Databases: ")


class TestErrorsAsText:
    """Failures are reported in the body of a 200 response."""

    @pytest.mark.asyncio
    async def test_invalid_id(self, client: AsyncClient):
        body = await _invoke(client, "delete_note", id="abc")

        assert body["ok"] is False
        assert body["code"] == "VAL_INVALID_ID"
        assert "abc" in body["error"]

    @pytest.mark.asyncio
    async def test_not_found(self, client: AsyncClient):
        body = await _invoke(client, "delete_note", id="65f0c0ffee0000000000beef")

        assert body["error"] == "Note not found"

    @pytest.mark.asyncio
    async def test_unknown_command(self, client: AsyncClient):
        body = await _invoke(client, "drop_notes")

        assert body["ok"] is False
        assert body["code"] == "CMD_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_not_connected(self, client_disconnected: AsyncClient):
        body = await _invoke(client_disconnected, "get_notes")

        assert body["ok"] is False
        assert body["error"] == "Database is not connected"

    @pytest.mark.asyncio
    async def test_invoke_without_body(self, client: AsyncClient):
        response = await client.post("/api/v1/commands/get_notes")

        assert response.status_code == 200
        assert response.json()["result"] == []


class TestStoreFailuresAsText:
    """Write failures outside the driver error hierarchy still come back as text."""

    @pytest.mark.asyncio
    async def test_document_too_large(self, client: AsyncClient, fake_client):
        collection = fake_client.get_database("knowledge_base").get_collection("notes")
        collection.insert_one = AsyncMock(side_effect=DocumentTooLarge("BSON document too large"))

        body = await _invoke(client, "create_note", title="Alpha", content="x", tags=[])

        assert body["ok"] is False
        assert body["code"] == "SYS_STORE_ERROR"
        assert "too large" in body["error"]

    @pytest.mark.asyncio
    async def test_document_too_large_rest(self, client: AsyncClient, api, fake_client):
        collection = fake_client.get_database("knowledge_base").get_collection("notes")
        collection.insert_one = AsyncMock(side_effect=DocumentTooLarge("BSON document too large"))

        response = await client.post("/api/v1/notes", json={"title": "Alpha", "content": "x"})

        api.assert_error(response, 503, "SYS_STORE_ERROR")


class TestNonObjectArguments:
    """A JSON body that is not an object is an argument error, not a 422."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [[], ["x"], "note", 42])
    async def test_rejected_as_text(self, client: AsyncClient, payload):
        response = await client.post("/api/v1/commands/get_notes", json=payload)

        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is False
        assert body["code"] == "VAL_VALIDATION_ERROR"
        assert "JSON object" in body["error"]
