"""
Command Dispatcher.

Named commands exposed to the front-end. Each command has a pydantic
argument model and an async handler running against the NoteService.

    check_connection  -> database list
    create_note       -> new note id
    get_notes         -> list of notes
    delete_note       -> acknowledgement
    update_note       -> acknowledgement
    search_notes      -> ranked list of notes

Usage:
    dispatcher = CommandDispatcher(NoteService(holder))
    result = await dispatcher.invoke("create_note", {"title": "t", "content": "c"})
    if not result.ok:
        print(result.error)
"""

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from knowledge_base.backend.core.exceptions import (
    ApplicationError,
    CommandNotFoundError,
    ValidationError,
)
from knowledge_base.backend.core.logging import get_logger
from knowledge_base.backend.schemas.command import (
    CommandResult,
    CreateNoteArguments,
    DeleteNoteArguments,
    NoArguments,
    SearchNotesArguments,
    UpdateNoteArguments,
)
from knowledge_base.backend.schemas.note import NoteCreate, NoteUpdate
from knowledge_base.backend.services.note import NoteService

logger = get_logger(__name__)

Handler = Callable[[NoteService, Any], Awaitable[Any]]


@dataclass(frozen=True)
class Command:
    """A registered command: its name, argument model and handler."""

    name: str
    arguments: type[BaseModel]
    handler: Handler


_commands: dict[str, Command] = {}


def command(name: str, arguments: type[BaseModel] = NoArguments) -> Callable[[Handler], Handler]:
    """Register a handler under a command name."""

    def decorator(handler: Handler) -> Handler:
        _commands[name] = Command(name=name, arguments=arguments, handler=handler)
        return handler

    return decorator


def get_command_names() -> list[str]:
    """Names of all registered commands."""
    return list(_commands)


@command("check_connection")
async def check_connection(service: NoteService, args: NoArguments) -> str:
    return await service.check_connection()


@command("create_note", CreateNoteArguments)
async def create_note(service: NoteService, args: CreateNoteArguments) -> str:
    return await service.create_note(
        NoteCreate(title=args.title, content=args.content, tags=args.tags)
    )


@command("get_notes")
async def get_notes(service: NoteService, args: NoArguments) -> list[dict[str, Any]]:
    notes = await service.list_notes()
    return [note.model_dump() for note in notes]


@command("delete_note", DeleteNoteArguments)
async def delete_note(service: NoteService, args: DeleteNoteArguments) -> str:
    return await service.delete_note(args.id)


@command("update_note", UpdateNoteArguments)
async def update_note(service: NoteService, args: UpdateNoteArguments) -> str:
    return await service.update_note(
        args.id,
        NoteUpdate(title=args.title, content=args.content, tags=args.tags),
    )


@command("search_notes", SearchNotesArguments)
async def search_notes(service: NoteService, args: SearchNotesArguments) -> list[dict[str, Any]]:
    notes = await service.search_notes(args.query)
    return [note.model_dump() for note in notes]


def _parse_arguments(cmd: Command, arguments: Any) -> BaseModel:
    """Validate raw arguments against the command's model."""
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ValidationError(
            f"Invalid arguments for {cmd.name}: Arguments must be a JSON object"
        )
    try:
        return cmd.arguments.model_validate(arguments)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise ValidationError(
            f"Invalid arguments for {cmd.name}: {problems}",
            details={"errors": e.errors(include_url=False)},
        ) from e


class CommandDispatcher:
    """Routes command invocations to their handlers."""

    def __init__(self, service: NoteService) -> None:
        self.service = service

    async def invoke(
        self,
        name: str,
        arguments: Any = None,
    ) -> CommandResult:
        """
        Run a command.

        Args:
            name: Registered command name
            arguments: Raw command arguments, a JSON object or None

        Returns:
            CommandResult with either `result` or an `error` message
        """
        try:
            cmd = _commands.get(name)
            if cmd is None:
                raise CommandNotFoundError(f"Unknown command: {name}")
            args = _parse_arguments(cmd, arguments)
            result = await cmd.handler(self.service, args)
        except ApplicationError as e:
            logger.warning(
                "Command failed",
                extra={"command": name, "code": e.code, "error": e.message},
            )
            return CommandResult(command=name, ok=False, error=e.message, code=e.code)

        logger.debug("Command completed", extra={"command": name})
        return CommandResult(command=name, ok=True, result=result)
