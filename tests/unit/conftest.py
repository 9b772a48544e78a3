"""
Unit Test Fixtures.

Fixtures for unit tests - the MongoDB driver is mocked.
Unit tests should be fast and isolated, never touching a real store.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from knowledge_base.backend.core.database import ConnectionHolder


class MockCursor:
    """Async iterator yielding preset documents, then optionally raising."""

    def __init__(self, documents: list[dict], error: Exception | None = None) -> None:
        self._documents = list(documents)
        self._error = error

    def __aiter__(self) -> "MockCursor":
        return self

    async def __anext__(self) -> dict:
        if self._documents:
            return self._documents.pop(0)
        if self._error is not None:
            raise self._error
        raise StopAsyncIteration


@pytest.fixture
def mock_cursor() -> type[MockCursor]:
    """Provide MockCursor class for building find() results."""
    return MockCursor


@pytest.fixture
def mock_collection() -> MagicMock:
    """
    Mock AsyncCollection.

    Usage:
        def test_delete(mock_collection):
            mock_collection.delete_one.return_value = MagicMock(deleted_count=1)
    """
    collection = MagicMock()
    collection.insert_one = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.update_one = AsyncMock()
    collection.index_information = AsyncMock(return_value={})
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_mongo_client(mock_collection: MagicMock) -> MagicMock:
    """Mock AsyncMongoClient whose every collection is mock_collection."""
    client = MagicMock()
    client.get_database.return_value.get_collection.return_value = mock_collection
    client.list_database_names = AsyncMock(return_value=["admin", "knowledge_base"])
    client.close = AsyncMock()
    return client


@pytest.fixture
def mock_holder(mock_mongo_client: MagicMock) -> ConnectionHolder:
    """Holder wrapping the mock client."""
    return ConnectionHolder(mock_mongo_client)
