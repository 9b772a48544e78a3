"""
Exception Handlers.

Render errors raised by the REST routes as ErrorResponse envelopes.
The command route never reaches these: the dispatcher returns its
failures inside a CommandResult.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from knowledge_base.backend.core.exceptions import (
    ApplicationError,
    CommandNotFoundError,
    InvalidIdError,
    NotConnectedError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from knowledge_base.backend.core.logging import get_logger
from knowledge_base.backend.schemas.base import ErrorDetail, ErrorResponse, ResponseMetadata

logger = get_logger(__name__)

EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    InvalidIdError: 400,
    ValidationError: 400,
    NotFoundError: 404,
    CommandNotFoundError: 404,
    NotConnectedError: 503,
    StoreError: 503,
}


def _get_request_id(request: Request) -> str | None:
    """Request id set by the middleware, else the X-Request-ID header."""
    if hasattr(request.state, "request_id"):
        return request.state.request_id
    return request.headers.get("x-request-id")


def _error_response(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details),
        metadata=ResponseMetadata(request_id=_get_request_id(request)),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """Map an ApplicationError to its status code, 500 when unmapped."""
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), 500)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        "Request failed",
        extra={"code": exc.code, "status": status_code, "error": exc.message},
    )
    return _error_response(request, status_code, exc.code, exc.message)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Request body or query validation failure, reported field by field."""
    errors = [
        {
            "field": ".".join(str(loc) for loc in err.get("loc", [])),
            "message": err.get("msg", "Validation error"),
            "type": err.get("type", "unknown"),
        }
        for err in exc.errors()
    ]
    logger.warning("Request validation failed", extra={"error_count": len(errors)})
    return _error_response(
        request,
        422,
        "VAL_REQUEST_INVALID",
        "Request validation failed",
        {"validation_errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else: logged with its traceback, reported without detail."""
    logger.exception("Unhandled exception", extra={"exception_type": type(exc).__name__})
    return _error_response(request, 500, "SYS_INTERNAL_ERROR", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
