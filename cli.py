#!/usr/bin/env python3
"""
Knowledge Base CLI.

Primary entry point for command-line operations.

Usage:
    python cli.py --help
    python cli.py server start
    python cli.py notes list
"""

import sys
from pathlib import Path

# Add project root to path for absolute imports
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from knowledge_base.backend.core.config import validate_project_root
from knowledge_base.cli.app import app

if __name__ == "__main__":
    validate_project_root()
    app()
