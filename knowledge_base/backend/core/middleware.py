"""
Request Context Middleware.

Tags every request with an id and the calling frontend, binds both to
the structlog context and reports the id and elapsed time in headers.
"""

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from knowledge_base.backend.core.logging import VALID_SOURCES, get_logger
from knowledge_base.backend.core.utils import utc_now

logger = get_logger(__name__)


def _frontend(request: Request) -> str:
    frontend = request.headers.get("X-Frontend-ID", "unknown").lower()
    return frontend if frontend in VALID_SOURCES else "unknown"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Request id (X-Request-ID) and timing (X-Response-Time) for each request."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = utc_now()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            frontend=_frontend(request),
            method=request.method,
            path=request.url.path,
        )
        try:
            response = await call_next(request)
        finally:
            elapsed_ms = int((utc_now() - started).total_seconds() * 1000)
            structlog.contextvars.bind_contextvars(duration_ms=elapsed_ms)

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms}ms"
        logger.debug("Request completed", extra={"status_code": response.status_code})
        structlog.contextvars.clear_contextvars()
        return response
