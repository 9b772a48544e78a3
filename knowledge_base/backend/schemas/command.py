"""
Command Schemas.

Argument models for each command of the invoke surface, and the
result envelope every command returns.
"""

from typing import Any

from pydantic import BaseModel, Field


class NoArguments(BaseModel):
    """Arguments of commands that take none."""


class CreateNoteArguments(BaseModel):
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)


class DeleteNoteArguments(BaseModel):
    id: str


class UpdateNoteArguments(BaseModel):
    id: str
    title: str
    content: str
    tags: list[str] = Field(default_factory=list)


class SearchNotesArguments(BaseModel):
    query: str


class CommandResult(BaseModel):
    """
    Outcome of one command invocation.

    Failures are carried as text in `error` (with the error `code`),
    never raised to the caller.
    """

    command: str
    ok: bool
    result: Any = None
    error: str | None = None
    code: str | None = None
