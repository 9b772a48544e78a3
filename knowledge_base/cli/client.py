"""
HTTP Client for CLI.

Async HTTP client for communicating with the backend API.
All requests include X-Frontend-ID: cli header for log routing.
"""

from typing import Any

import httpx

from knowledge_base.backend.core.config import get_server_base_url
from knowledge_base.backend.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for backend API communication.

    Usage:
        client = APIClient()
        response = await client.get("/health")
        result = await client.invoke("create_note", title="t", content="c")
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        """
        Initialize the API client.

        Args:
            base_url: Backend API base URL. If None, reads from config/settings/application.yaml.
            timeout: Request timeout in seconds. If None, reads from config/settings/application.yaml.
        """
        try:
            config_base_url, config_timeout = get_server_base_url()
        except Exception as e:
            if base_url is None:
                raise RuntimeError(
                    "Could not determine server URL from config/settings/application.yaml"
                ) from e
            config_base_url = base_url
            config_timeout = timeout if timeout is not None else 30.0

        self.base_url = (base_url or config_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else config_timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"X-Frontend-ID": "cli"},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """
        Make an HTTP request to the backend.

        Raises:
            httpx.HTTPError: On request failure
        """
        client = await self._get_client()

        log_with_source(logger, "cli", "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                "cli",
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

        log_with_source(
            logger,
            "cli",
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return response

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a GET request."""
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        """Make a POST request."""
        return await self.request("POST", path, **kwargs)

    async def invoke(self, command: str, **arguments: Any) -> dict[str, Any]:
        """
        Invoke a backend command.

        Returns:
            The command result body: {command, ok, result, error, code}
        """
        response = await self.post(f"/api/v1/commands/{command}", json=arguments)
        response.raise_for_status()
        return response.json()


_client: APIClient | None = None


def get_api_client() -> APIClient:
    """Get or create the API client singleton."""
    global _client
    if _client is None:
        _client = APIClient()
    return _client


async def close_api_client() -> None:
    """Close the API client."""
    global _client
    if _client:
        await _client.close()
        _client = None
