"""
FastAPI Dependencies.

Shared dependencies for request handling. The connection holder is
created once in the application lifespan and read from app.state.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from knowledge_base.backend.commands import CommandDispatcher
from knowledge_base.backend.core.config import get_app_config
from knowledge_base.backend.core.database import ConnectionHolder
from knowledge_base.backend.services.note import NoteService


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """
    Extract or generate request ID from headers.

    Used for request tracing and correlation.
    """
    import uuid

    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


def get_connection_holder(request: Request) -> ConnectionHolder:
    """Return the holder set up at application startup."""
    return request.app.state.connection_holder


Holder = Annotated[ConnectionHolder, Depends(get_connection_holder)]


def get_note_service(holder: Holder) -> NoteService:
    """Build a NoteService bound to the configured database and collection."""
    db_config = get_app_config().database
    return NoteService(holder, db_config.name, db_config.collection)


NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]


def get_command_dispatcher(service: NoteServiceDep) -> CommandDispatcher:
    """Build a dispatcher over the request's NoteService."""
    return CommandDispatcher(service)


Dispatcher = Annotated[CommandDispatcher, Depends(get_command_dispatcher)]
