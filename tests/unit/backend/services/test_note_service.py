"""
Unit Tests for Note Service.

Tests the NoteService business logic with a mocked repository.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import AutoReconnect, DocumentTooLarge, ServerSelectionTimeoutError

from knowledge_base.backend.core.database import ConnectionHolder
from knowledge_base.backend.core.exceptions import (
    InvalidIdError,
    NotConnectedError,
    NotFoundError,
    StoreError,
)
from knowledge_base.backend.models.note import Note
from knowledge_base.backend.schemas.note import NoteCreate, NoteUpdate
from knowledge_base.backend.services.note import NoteService


@pytest.fixture
def service():
    """Create NoteService with a mocked client."""
    return NoteService(ConnectionHolder(MagicMock()))


class TestNoteServiceInit:
    """Tests for repository wiring."""

    def test_repository_uses_configured_names(self):
        service = NoteService(ConnectionHolder(), "kb_test", "notes_test")

        assert service.repo.database_name == "kb_test"
        assert service.repo.collection_name == "notes_test"

    def test_defaults(self):
        service = NoteService(ConnectionHolder())

        assert service.repo.database_name == "knowledge_base"
        assert service.repo.collection_name == "notes"


class TestNoteServiceCreate:
    """Tests for note creation."""

    @pytest.mark.asyncio
    async def test_create_note_success(self, service):
        with patch.object(
            service.repo, "create", AsyncMock(return_value="note-123")
        ) as mock_create:
            data = NoteCreate(title="Alpha", content="first note", tags=["x"])
            result = await service.create_note(data)

            mock_create.assert_awaited_once_with(
                title="Alpha",
                content="first note",
                tags=["x"],
            )
            assert result == "note-123"

    @pytest.mark.asyncio
    async def test_driver_error_becomes_store_error(self, service):
        with patch.object(
            service.repo,
            "create",
            AsyncMock(side_effect=ServerSelectionTimeoutError("no servers")),
        ):
            with pytest.raises(StoreError, match="no servers"):
                await service.create_note(NoteCreate(title="t", content="c"))

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            DocumentTooLarge("BSON document too large"),
            UnicodeEncodeError("utf-8", "\ud800", 0, 1, "surrogates not allowed"),
        ],
    )
    async def test_encoding_failure_becomes_store_error(self, service, error):
        with patch.object(service.repo, "create", AsyncMock(side_effect=error)):
            with pytest.raises(StoreError) as exc_info:
                await service.create_note(NoteCreate(title="t", content="c"))

        assert exc_info.value.__cause__ is error

    @pytest.mark.asyncio
    async def test_not_connected(self):
        service = NoteService(ConnectionHolder())

        with pytest.raises(NotConnectedError):
            await service.create_note(NoteCreate(title="t", content="c"))


class TestNoteServiceList:
    """Tests for listing notes."""

    @pytest.mark.asyncio
    async def test_list_notes(self, service):
        notes = [Note(id="a", title="A", content=""), Note(id="b", title="B", content="")]

        with patch.object(service.repo, "list_all", AsyncMock(return_value=notes)):
            result = await service.list_notes()

        assert result == notes

    @pytest.mark.asyncio
    async def test_fault_discards_partial_results(self, service):
        with patch.object(
            service.repo,
            "list_all",
            AsyncMock(side_effect=AutoReconnect("connection reset")),
        ):
            with pytest.raises(StoreError):
                await service.list_notes()


class TestNoteServiceDelete:
    """Tests for note deletion."""

    @pytest.mark.asyncio
    async def test_delete_acknowledges(self, service):
        with patch.object(service.repo, "delete", AsyncMock(return_value=None)) as mock_delete:
            result = await service.delete_note("note-123")

            mock_delete.assert_awaited_once_with("note-123")
            assert result == "Deleted"

    @pytest.mark.asyncio
    async def test_not_found_passes_through(self, service):
        with patch.object(service.repo, "delete", AsyncMock(side_effect=NotFoundError())):
            with pytest.raises(NotFoundError):
                await service.delete_note("65f0c0ffee0000000000beef")

    @pytest.mark.asyncio
    async def test_invalid_id_passes_through(self, service):
        with pytest.raises(InvalidIdError):
            await service.delete_note("not-a-valid-id")


class TestNoteServiceUpdate:
    """Tests for note updates."""

    @pytest.mark.asyncio
    async def test_update_acknowledges(self, service):
        with patch.object(service.repo, "update", AsyncMock(return_value=None)) as mock_update:
            data = NoteUpdate(title="Beta", content="second note", tags=["y"])
            result = await service.update_note("note-123", data)

            mock_update.assert_awaited_once_with(
                "note-123",
                title="Beta",
                content="second note",
                tags=["y"],
            )
            assert result == "Updated successfully"

    @pytest.mark.asyncio
    async def test_invalid_id_is_never_not_found(self, service):
        data = NoteUpdate(title="Beta", content="second note")

        with pytest.raises(InvalidIdError):
            await service.update_note("not-a-valid-id", data)


class TestNoteServiceSearch:
    """Tests for search."""

    @pytest.mark.asyncio
    async def test_search_notes(self, service):
        notes = [Note(id="a", title="Alpha", content="first note")]

        with patch.object(service.repo, "search", AsyncMock(return_value=notes)) as mock_search:
            result = await service.search_notes("first")

            mock_search.assert_awaited_once_with("first")
            assert result == notes


class TestNoteServiceCheckConnection:
    """Tests for the connectivity probe."""

    @pytest.mark.asyncio
    async def test_check_connection(self, mock_holder):
        result = await NoteService(mock_holder).check_connection()

        assert result == "Databases: ['admin', 'knowledge_base']"

    @pytest.mark.asyncio
    async def test_check_connection_disconnected(self):
        with pytest.raises(NotConnectedError):
            await NoteService(ConnectionHolder()).check_connection()
