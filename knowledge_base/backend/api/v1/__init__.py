"""
API Version 1 Router.

Aggregates all v1 endpoint routers.
"""

from fastapi import APIRouter

from knowledge_base.backend.api.v1.endpoints import commands, notes

router = APIRouter()

router.include_router(notes.router, prefix="/notes", tags=["notes"])

router.include_router(commands.router, prefix="/commands", tags=["commands"])
