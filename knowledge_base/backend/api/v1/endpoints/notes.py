"""
Notes API Endpoints.

REST endpoints for note management. Errors are rendered by the
registered exception handlers.
"""

from fastapi import APIRouter, Query

from knowledge_base.backend.core.dependencies import NoteServiceDep, RequestId
from knowledge_base.backend.schemas.base import ApiResponse
from knowledge_base.backend.schemas.note import (
    Acknowledgement,
    NoteCreate,
    NoteCreated,
    NoteResponse,
    NoteUpdate,
)

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[NoteCreated],
    status_code=201,
    summary="Create a note",
    description="Create a new note. The store assigns its id.",
)
async def create_note(
    data: NoteCreate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteCreated]:
    """Create a new note."""
    note_id = await service.create_note(data)
    return ApiResponse(data=NoteCreated(id=note_id))


@router.get(
    "",
    response_model=ApiResponse[list[NoteResponse]],
    summary="List notes",
    description="Get every note in store order.",
)
async def list_notes(
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[list[NoteResponse]]:
    """List all notes."""
    notes = await service.list_notes()
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in notes]
    )


@router.get(
    "/search",
    response_model=ApiResponse[list[NoteResponse]],
    summary="Search notes",
    description="Full-text search over notes, best matches first.",
)
async def search_notes(
    service: NoteServiceDep,
    request_id: RequestId,
    q: str = Query(
        default="",
        description="Search query",
    ),
) -> ApiResponse[list[NoteResponse]]:
    """Search notes by relevance."""
    notes = await service.search_notes(q)
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in notes]
    )


@router.put(
    "/{note_id}",
    response_model=ApiResponse[Acknowledgement],
    summary="Update a note",
    description="Replace title, content and tags of a note.",
)
async def update_note(
    note_id: str,
    data: NoteUpdate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[Acknowledgement]:
    """Update a note."""
    message = await service.update_note(note_id, data)
    return ApiResponse(data=Acknowledgement(message=message))


@router.delete(
    "/{note_id}",
    response_model=ApiResponse[Acknowledgement],
    summary="Delete a note",
    description="Permanently delete a note.",
)
async def delete_note(
    note_id: str,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[Acknowledgement]:
    """Delete a note."""
    message = await service.delete_note(note_id)
    return ApiResponse(data=Acknowledgement(message=message))
