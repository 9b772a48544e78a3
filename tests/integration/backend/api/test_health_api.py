"""
Integration Tests for Health Endpoints.
"""

import pytest
from httpx import AsyncClient


class TestLiveness:
    @pytest.mark.asyncio
    async def test_health(self, client_disconnected: AsyncClient):
        response = await client_disconnected.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestReadiness:
    """Tests for /health/ready."""

    @pytest.mark.asyncio
    async def test_ready_with_text_index(self, client: AsyncClient):
        response = await client.get("/health/ready")

        assert response.status_code == 200
        store = response.json()["checks"]["store"]
        assert store["status"] == "healthy"
        assert store["text_index"] == "present"
        assert "latency_ms" in store

    @pytest.mark.asyncio
    async def test_reports_missing_text_index(self, client: AsyncClient, fake_client):
        fake_client.get_database("knowledge_base").get_collection("notes").text_index = False

        response = await client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["store"]["text_index"] == "missing"

    @pytest.mark.asyncio
    async def test_not_ready_when_disconnected(self, client_disconnected: AsyncClient):
        response = await client_disconnected.get("/health/ready")

        assert response.status_code == 503
        store = response.json()["detail"]["checks"]["store"]
        assert store["code"] == "DB_NOT_CONNECTED"


class TestRequestContext:
    """Tests for headers added by the request context middleware."""

    @pytest.mark.asyncio
    async def test_propagates_request_id(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"
        assert response.headers["X-Response-Time"].endswith("ms")

    @pytest.mark.asyncio
    async def test_error_envelope_carries_request_id(self, client: AsyncClient):
        response = await client.delete("/api/v1/notes/xyz", headers={"X-Request-ID": "req-43"})

        assert response.json()["metadata"]["request_id"] == "req-43"
