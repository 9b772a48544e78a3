"""
Command Endpoints.

Invoke surface for the front-end: one POST per named command.
Command failures come back as text inside a 200 response.
"""

from typing import Any

from fastapi import APIRouter, Body

from knowledge_base.backend.commands import get_command_names
from knowledge_base.backend.core.dependencies import Dispatcher, RequestId
from knowledge_base.backend.schemas.base import ApiResponse
from knowledge_base.backend.schemas.command import CommandResult

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[list[str]],
    summary="List commands",
)
async def list_commands() -> ApiResponse[list[str]]:
    """Names of the registered commands."""
    return ApiResponse(data=get_command_names())


@router.post(
    "/{command}",
    response_model=CommandResult,
    summary="Invoke a command",
    description="Run a named command with a JSON object of arguments.",
)
async def invoke_command(
    command: str,
    dispatcher: Dispatcher,
    request_id: RequestId,
    arguments: Any = Body(default=None),
) -> CommandResult:
    """
    Invoke a command by name.

    The body is passed through unvalidated; a body that is not a JSON
    object is reported in the CommandResult like any other argument error.
    """
    return await dispatcher.invoke(command, arguments)
