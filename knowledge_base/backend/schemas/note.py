"""
Note Schemas.

Pydantic schemas for note request/response validation.
The repository enforces no length limits on title or content.
"""

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    """Schema for creating a new note."""

    title: str = Field(
        ...,
        description="Note title",
        examples=["Alpha"],
    )
    content: str = Field(
        ...,
        description="Note content",
        examples=["first note"],
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Note tags, order preserved",
        examples=[["x"]],
    )


class NoteUpdate(BaseModel):
    """Schema for replacing the fields of an existing note."""

    title: str = Field(..., description="Note title")
    content: str = Field(..., description="Note content")
    tags: list[str] = Field(default_factory=list, description="Note tags")


class NoteResponse(BaseModel):
    """Schema for note in API responses."""

    id: str = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    tags: list[str] = Field(description="Note tags")

    model_config = ConfigDict(from_attributes=True)


class NoteCreated(BaseModel):
    """Id of a newly created note."""

    id: str


class Acknowledgement(BaseModel):
    """Human-readable confirmation of a completed operation."""

    message: str
