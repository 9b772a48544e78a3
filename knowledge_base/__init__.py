"""
Knowledge Base.

- backend/: Note repository, command surface, API, configuration
- cli/: Command-line client (Typer + Rich)
"""
