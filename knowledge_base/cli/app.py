"""
CLI Application.

Typer application wiring the command groups together.

Usage:
    python cli.py notes create Alpha "first note" --tags x
    python cli.py notes list
    python cli.py notes search first
    python cli.py notes update <id> Beta "second note"
    python cli.py notes delete <id>
    python cli.py notes check
    python cli.py health status
    python cli.py server start --reload
"""

import typer
from rich.console import Console

from knowledge_base.backend.core.config import validate_project_root
from knowledge_base.cli.commands import health_app, notes_app, server_app

app = typer.Typer(
    name="cli",
    help="Knowledge Base CLI - notes, health checks and server management.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.add_typer(notes_app, name="notes")
app.add_typer(health_app, name="health")
app.add_typer(server_app, name="server")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
) -> None:
    """
    Knowledge Base CLI.

    Built with Typer for type-safe commands and Rich for formatted output.
    """
    validate_project_root()

    if debug:
        from knowledge_base.backend.core.logging import setup_logging
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        from knowledge_base.backend.core.logging import setup_logging
        setup_logging(level="INFO", format_type="console")
