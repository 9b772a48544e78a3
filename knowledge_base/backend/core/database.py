"""
Database Connection Holder.

Owns the single MongoDB client for the process lifetime.

The client is created once, at application startup, by `initialize()`.
Startup is best-effort: a malformed address or driver failure is logged
and the process keeps running without a client. Operations discover the
missing client through `snapshot()`, which raises NotConnectedError.

The held client sits behind a lock that is taken only long enough to copy
the reference. No store I/O ever happens while the lock is held.
"""

import threading

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from knowledge_base.backend.core.exceptions import NotConnectedError, StoreError
from knowledge_base.backend.core.logging import get_logger

logger = get_logger(__name__)


def initialize(
    uri: str,
    server_selection_timeout_ms: int | None = None,
) -> AsyncMongoClient | None:
    """
    Parse the store address and create a client.

    Called exactly once, before any operation is reachable. No retries.

    Args:
        uri: MongoDB connection URI
        server_selection_timeout_ms: Driver server selection timeout

    Returns:
        The client, or None on any parse or driver failure
    """
    options = {}
    if server_selection_timeout_ms is not None:
        options["serverSelectionTimeoutMS"] = server_selection_timeout_ms

    try:
        client: AsyncMongoClient = AsyncMongoClient(uri, **options)
    except (PyMongoError, ValueError) as e:
        logger.error(
            "Document store connection failed",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        return None

    logger.info("Document store client created")
    return client


class ConnectionHolder:
    """
    Lock-guarded optional store client, shared by all operations.

    The holder is created in the application lifespan and injected into
    services; it is never replaced once set.
    """

    def __init__(self, client: AsyncMongoClient | None = None) -> None:
        self._lock = threading.Lock()
        self._client = client

    @property
    def is_connected(self) -> bool:
        """Whether a client was established at startup."""
        with self._lock:
            return self._client is not None

    def snapshot(self) -> AsyncMongoClient:
        """
        Copy the held client reference.

        Returns:
            The shared client

        Raises:
            NotConnectedError: If no client is held
        """
        with self._lock:
            client = self._client
        if client is None:
            raise NotConnectedError()
        return client

    async def probe(self) -> str:
        """
        Liveness check against the store.

        Returns:
            Human-readable list of the store's databases

        Raises:
            NotConnectedError: If no client is held
            StoreError: If the store cannot be reached
        """
        client = self.snapshot()
        try:
            names = await client.list_database_names()
        except PyMongoError as e:
            logger.warning("Store probe failed", extra={"error": str(e)})
            raise StoreError(str(e)) from e
        return f"Databases: {names}"

    async def close(self) -> None:
        """Close the held client at process shutdown."""
        with self._lock:
            client = self._client
        if client is not None:
            await client.close()
            logger.info("Document store client closed")
