"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Tests never talk to a real MongoDB server. Unit tests mock the driver;
integration tests use the in-memory FakeMongoClient from tests/fakes.py.
"""

import pytest

from fakes import FakeMongoClient

from knowledge_base.backend.core.config import get_app_config, get_settings
from knowledge_base.backend.core.database import ConnectionHolder


@pytest.fixture(autouse=True)
def _clear_config_cache():
    """Clear lru_cache between tests so each test gets a fresh load."""
    get_settings.cache_clear()
    get_app_config.cache_clear()
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def fake_client() -> FakeMongoClient:
    """Fresh in-memory store for a single test."""
    return FakeMongoClient()


@pytest.fixture
def connected_holder(fake_client: FakeMongoClient) -> ConnectionHolder:
    """Holder with the in-memory store."""
    return ConnectionHolder(fake_client)


@pytest.fixture
def disconnected_holder() -> ConnectionHolder:
    """Holder as left by a failed startup."""
    return ConnectionHolder(None)
