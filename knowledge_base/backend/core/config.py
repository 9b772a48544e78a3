"""
Configuration Management.

Loads secrets from config/.env and settings from config/settings/*.yaml.

Secrets (.env):
    MONGO_USERNAME, MONGO_PASSWORD (both optional)

Settings (YAML):
    application.yaml - App identity, server, cors, client timeouts
    database.yaml    - MongoDB address, database and collection names
    logging.yaml     - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any
from urllib.parse import quote_plus

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from knowledge_base.backend.core.config_schema import (
    ApplicationSchema,
    DatabaseSchema,
    LoggingSchema,
)


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Secrets loaded from config/.env. Only credentials."""

    mongo_username: str | None = None
    mongo_password: str | None = None

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._database = _load_validated(DatabaseSchema, "database.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def database(self) -> DatabaseSchema:
        """Document store settings."""
        return self._database

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached secrets instance. Resolves .env path from project root."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def build_mongo_uri(
    base_uri: str,
    username: str | None = None,
    password: str | None = None,
) -> str:
    """
    Inject credentials into a MongoDB URI.

    The URI is returned unchanged when no username is given or when it
    already carries credentials.

    Args:
        base_uri: URI from database.yaml (e.g. mongodb://localhost:27017)
        username: Optional username from config/.env
        password: Optional password from config/.env

    Returns:
        MongoDB connection URI string.
    """
    if not username or "@" in base_uri or "://" not in base_uri:
        return base_uri

    scheme, rest = base_uri.split("://", 1)
    credentials = quote_plus(username)
    if password:
        credentials = f"{credentials}:{quote_plus(password)}"
    return f"{scheme}://{credentials}@{rest}"


def get_mongo_uri() -> str:
    """Construct the MongoDB URI from YAML config and secrets."""
    settings = get_settings()
    return build_mongo_uri(
        get_app_config().database.uri,
        settings.mongo_username,
        settings.mongo_password,
    )


def get_server_base_url() -> tuple[str, float]:
    """
    Get the backend server base URL and timeout from application.yaml.

    Returns:
        Tuple of (base_url, timeout_seconds).
    """
    app = get_app_config().application
    server = app.server
    base_url = f"http://{server.host}:{server.port}"
    timeout = float(app.timeouts.client_request)
    return base_url, timeout
