"""
CLI Commands.

Organized by domain/feature area.
"""

from knowledge_base.cli.commands.health import app as health_app
from knowledge_base.cli.commands.notes import app as notes_app
from knowledge_base.cli.commands.server import app as server_app

__all__ = [
    "health_app",
    "notes_app",
    "server_app",
]
