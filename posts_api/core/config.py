"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here: no scattered magic strings.
"""

from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Runtime mode. Controls stack traces and error message detail."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Runtime mode. Stack traces are only exposed in development.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        docs_enabled: Serve the OpenAPI UI at /api-docs.
        host: Bind address for the bundled server.
        port: Bind port for the bundled server.
        create_tables: Create the posts table at startup if missing.

    Database settings: either an explicit ``database_url`` or the
    ``db_*`` parts used to build a PostgreSQL DSN.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Posts API"
    version: str = "1.0.0"
    environment: Environment = Environment.PRODUCTION
    log_level: str = "INFO"
    docs_enabled: bool = True
    host: str = "0.0.0.0"
    port: int = 3000
    create_tables: bool = True

    database_url: Optional[str] = None
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "posts"

    def get_database_dsn(self) -> str:
        """Return the effective database DSN.

        Priority:
        1. Explicit ``DATABASE_URL``.
        2. Built from the ``DB_*`` values (Docker Compose or local setups).
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.db_user}:{self.db_password}@"
            f"{self.db_host}:{self.db_port}/{self.db_name}"
        )


settings = Settings()
