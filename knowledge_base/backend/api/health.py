"""
Health Check Endpoints.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (store reachable, text index present)
"""

from typing import Any

from fastapi import APIRouter, HTTPException

from knowledge_base.backend.core.dependencies import NoteServiceDep
from knowledge_base.backend.core.exceptions import ApplicationError
from knowledge_base.backend.core.logging import get_logger
from knowledge_base.backend.core.utils import utc_now
from knowledge_base.backend.services.note import NoteService

router = APIRouter()
logger = get_logger(__name__)


async def check_store(service: NoteService) -> dict[str, Any]:
    """
    Check document store connectivity and the search precondition.

    Returns:
        Dict with status, latency, database list or error message,
        and whether the notes collection has a text index
    """
    start = utc_now()
    try:
        databases = await service.check_connection()
        text_index = await service.has_text_index()
    except ApplicationError as e:
        logger.warning("Store health check failed", extra={"error": e.message})
        return {
            "status": "unhealthy",
            "code": e.code,
            "error": e.message,
        }

    latency_ms = int((utc_now() - start).total_seconds() * 1000)

    if not text_index:
        logger.warning("Notes collection has no text index; search will fail")

    return {
        "status": "healthy",
        "latency_ms": latency_ms,
        "databases": databases,
        "text_index": "present" if text_index else "missing",
    }


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running. No dependency checks.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(service: NoteServiceDep) -> dict[str, Any]:
    """
    Readiness check.

    Returns 503 when the store is not connected or unreachable.
    A missing text index is reported but does not fail readiness.
    """
    checks = {"store": await check_store(service)}

    if checks["store"]["status"] == "unhealthy":
        logger.warning("Readiness check failed", extra={"checks": checks})
        raise HTTPException(
            status_code=503,
            detail={
                "status": "unhealthy",
                "checks": checks,
                "timestamp": utc_now().isoformat(),
            },
        )

    return {
        "status": "healthy",
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }
