"""
Integration Test Fixtures.

Fixtures for integration tests - drive the FastAPI app through httpx
with the connection holder overridden by the in-memory store.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from knowledge_base.backend.core.database import ConnectionHolder
from knowledge_base.backend.core.dependencies import get_connection_holder
from knowledge_base.backend.main import create_app


async def _client_for(holder: ConnectionHolder) -> AsyncGenerator[AsyncClient, None]:
    app = create_app()
    app.dependency_overrides[get_connection_holder] = lambda: holder

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(connected_holder: ConnectionHolder) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory store.

    Usage:
        async def test_list(client: AsyncClient):
            response = await client.get("/api/v1/notes")
            assert response.status_code == 200
    """
    async for test_client in _client_for(connected_holder):
        yield test_client


@pytest.fixture
async def client_disconnected(
    disconnected_holder: ConnectionHolder,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose startup failed to reach the store."""
    async for test_client in _client_for(disconnected_holder):
        yield test_client


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_success(response: Any, expected_status: int = 200) -> dict[str, Any]:
        """
        Assert API response is successful.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is True, f"Response not successful: {data}"
        return data

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_code: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is False, f"Response should be error: {data}"
        assert data.get("error") is not None, f"Missing error details: {data}"

        if expected_code:
            actual_code = data["error"].get("code")
            assert actual_code == expected_code, (
                f"Expected error code {expected_code}, got {actual_code}"
            )

        return data

    @staticmethod
    def assert_validation_error(
        response: Any,
        field: str | None = None,
    ) -> dict[str, Any]:
        """Assert API response is a validation error (422)."""
        data = ApiAssertions.assert_error(response, 422, "VAL_REQUEST_INVALID")

        if field:
            errors = data["error"].get("details", {}).get("validation_errors", [])
            fields = [e.get("field", "") for e in errors]
            assert any(field in f for f in fields), (
                f"Expected validation error for field '{field}', "
                f"got errors for: {fields}"
            )

        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
