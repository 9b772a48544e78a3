"""
Health Check Commands.

Commands for checking backend health and status.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from knowledge_base.cli.client import get_api_client

app = typer.Typer(help="Health check commands")
console = Console()


@app.command()
def status() -> None:
    """
    Check backend readiness, including the document store (requires running server).

    Examples:
        cli.py health status
    """
    asyncio.run(_status())


async def _status() -> None:
    """Async implementation of status command."""
    client = get_api_client()

    try:
        response = await client.get("/health/ready")

        if response.status_code == 200:
            _display_health(response.json())
        elif response.status_code == 503:
            _display_health(response.json().get("detail", {}))
            raise typer.Exit(1)
        else:
            console.print(f"[red]Unexpected response: {response.status_code}[/red]")
            raise typer.Exit(1)

    except typer.Exit:
        raise
    except Exception as e:
        if "Connection refused" in str(e) or "ConnectError" in type(e).__name__:
            console.print("[red]Error: Cannot connect to backend[/red]")
            console.print("[dim]Is the server running? Start with: cli.py server start[/dim]")
        else:
            console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    finally:
        await client.close()


def _display_health(data: dict) -> None:
    """Display readiness results."""
    status = data.get("status", "unknown")
    status_color = "green" if status == "healthy" else "red"

    console.print(Panel(
        f"[{status_color}]{status.upper()}[/{status_color}]",
        title="Backend Status",
    ))

    table = Table(show_header=True)
    table.add_column("Component", style="cyan")
    table.add_column("Status")
    table.add_column("Details")

    for component, check in data.get("checks", {}).items():
        check_status = check.get("status", "unknown")
        color = "green" if check_status == "healthy" else "red"

        details = []
        if "latency_ms" in check:
            details.append(f"latency: {check['latency_ms']}ms")
        if "text_index" in check:
            details.append(f"text index: {check['text_index']}")
        if "error" in check:
            details.append(f"error: {check['error']}")

        table.add_row(
            component,
            f"[{color}]{check_status}[/{color}]",
            ", ".join(details) if details else "-",
        )

    console.print(table)


@app.command()
def ping() -> None:
    """
    Simple ping to check if backend is reachable.

    Examples:
        cli.py health ping
    """
    asyncio.run(_ping())


async def _ping() -> None:
    """Async implementation of ping command."""
    client = get_api_client()

    try:
        response = await client.get("/health")

        if response.status_code == 200:
            console.print("[green]✓ Backend is reachable[/green]")
        else:
            console.print(f"[yellow]Backend responded with status {response.status_code}[/yellow]")

    except Exception as e:
        if "Connection refused" in str(e) or "ConnectError" in type(e).__name__:
            console.print("[red]✗ Backend is not reachable[/red]")
        else:
            console.print(f"[red]✗ Error: {e}[/red]")
        raise typer.Exit(1)

    finally:
        await client.close()
