"""
CLI Client Module.

Command-line client built with Typer for communicating with the backend API.

Architecture:
- CLI is a thin presentation layer
- All note logic lives in the backend
- CLI calls backend via HTTP (httpx)
- Sends X-Frontend-ID: cli header for log routing

Usage:
    python cli.py --help
    python cli.py notes list
    python cli.py health status
"""
