"""
FastAPI Application Entry Point.

The store client is created once in the lifespan, before any request
is served, and kept on app.state for the process lifetime.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from knowledge_base.backend.api import health
from knowledge_base.backend.api.v1 import router as api_v1_router
from knowledge_base.backend.core.config import get_app_config, get_mongo_uri
from knowledge_base.backend.core.database import ConnectionHolder, initialize
from knowledge_base.backend.core.exception_handlers import register_exception_handlers
from knowledge_base.backend.core.logging import get_logger, setup_logging
from knowledge_base.backend.core.middleware import RequestContextMiddleware

logger = get_logger(__name__)

_app: FastAPI | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    app_config = get_app_config()
    setup_logging()

    db_config = app_config.database
    client = initialize(
        get_mongo_uri(),
        server_selection_timeout_ms=db_config.server_selection_timeout_ms,
    )
    holder = ConnectionHolder(client)
    app.state.connection_holder = holder

    if holder.is_connected:
        logger.info("Document store client ready", extra={"database": db_config.name})
    else:
        logger.error("Running without a document store connection")

    logger.info(
        "Application starting",
        extra={
            "app_name": app_config.application.name,
            "env": app_config.application.environment,
        },
    )
    yield
    logger.info("Application shutting down")
    await holder.close()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app_config = get_app_config()
    app_settings = app_config.application

    app = FastAPI(
        title=app_settings.name,
        description=app_settings.description,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )

    # Disconnected until the lifespan establishes the client
    app.state.connection_holder = ConnectionHolder()

    app.add_middleware(RequestContextMiddleware)

    cors_origins = app_settings.cors.origins
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(api_v1_router, prefix="/api/v1")

    return app


def get_app() -> FastAPI:
    """
    Get the application instance (lazy initialization).

    Use this instead of importing `app` directly to avoid
    import-time configuration errors.
    """
    global _app
    if _app is None:
        _app = create_app()
    return _app


# For uvicorn: `uvicorn knowledge_base.backend.main:app`
def __getattr__(name: str) -> FastAPI:
    """Support lazy access to `app` for uvicorn compatibility."""
    if name == "app":
        return get_app()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
