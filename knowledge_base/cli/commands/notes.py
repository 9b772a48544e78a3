"""
Note Commands.

Thin wrappers over the backend command surface (requires running server).
"""

import asyncio
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from knowledge_base.cli.client import get_api_client

app = typer.Typer(help="Note commands")
console = Console()


def _parse_tags(tags: Optional[str]) -> list[str]:
    """Split a comma separated tag string, dropping blanks."""
    if not tags:
        return []
    return [tag.strip() for tag in tags.split(",") if tag.strip()]


def _invoke(command: str, **arguments: Any) -> Any:
    """Invoke a command and return its result, exiting on failure."""
    body = asyncio.run(_invoke_async(command, arguments))
    if not body.get("ok"):
        console.print(f"[red]Error: {body.get('error')}[/red]")
        raise typer.Exit(1)
    return body.get("result")


async def _invoke_async(command: str, arguments: dict[str, Any]) -> dict[str, Any]:
    client = get_api_client()
    try:
        return await client.invoke(command, **arguments)
    except Exception as e:
        if "Connection refused" in str(e) or "ConnectError" in type(e).__name__:
            return {"ok": False, "error": "Cannot connect to backend. Is the server running?"}
        return {"ok": False, "error": str(e)}
    finally:
        await client.close()


def _display_notes(notes: list[dict[str, Any]], title: str) -> None:
    if not notes:
        console.print("[dim]No notes[/dim]")
        return

    table = Table(title=title, show_header=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Tags")
    table.add_column("Content")

    for note in notes:
        table.add_row(
            note["id"],
            note["title"],
            ", ".join(note.get("tags", [])) or "-",
            note["content"],
        )

    console.print(table)


@app.command()
def check() -> None:
    """
    Check the backend's document store connection.

    Examples:
        cli.py notes check
    """
    console.print(f"[green]{_invoke('check_connection')}[/green]")


@app.command()
def create(
    title: str = typer.Argument(..., help="Note title"),
    content: str = typer.Argument("", help="Note content"),
    tags: Optional[str] = typer.Option(None, "--tags", "-t", help="Comma separated tags"),
) -> None:
    """
    Create a note and print its id.

    Examples:
        cli.py notes create Alpha "first note" --tags x,y
    """
    note_id = _invoke("create_note", title=title, content=content, tags=_parse_tags(tags))
    console.print(note_id)


@app.command("list")
def list_notes() -> None:
    """
    List all notes.

    Examples:
        cli.py notes list
    """
    _display_notes(_invoke("get_notes"), "Notes")


@app.command()
def search(
    query: str = typer.Argument(..., help="Search text"),
) -> None:
    """
    Full-text search, best matches first.

    Examples:
        cli.py notes search first
    """
    _display_notes(_invoke("search_notes", query=query), f"Search: {query}")


@app.command()
def update(
    note_id: str = typer.Argument(..., help="Note id"),
    title: str = typer.Argument(..., help="New title"),
    content: str = typer.Argument("", help="New content"),
    tags: Optional[str] = typer.Option(None, "--tags", "-t", help="Comma separated tags"),
) -> None:
    """
    Replace a note's title, content and tags.

    Examples:
        cli.py notes update 65f0c0ffee0000000000beef Beta "second note" -t y
    """
    message = _invoke(
        "update_note",
        id=note_id,
        title=title,
        content=content,
        tags=_parse_tags(tags),
    )
    console.print(f"[green]{message}[/green]")


@app.command()
def delete(
    note_id: str = typer.Argument(..., help="Note id"),
) -> None:
    """
    Delete a note.

    Examples:
        cli.py notes delete 65f0c0ffee0000000000beef
    """
    console.print(f"[green]{_invoke('delete_note', id=note_id)}[/green]")
