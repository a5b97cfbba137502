"""
Database access.

Wraps a SQLAlchemy engine (and its connection pool) behind a single
``execute`` operation. Each call runs one statement in its own short
transaction. Driver errors leave this module as StorageError.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.sql.expression import Executable

from posts_api.infrastructure.errors import translate_driver_error
from posts_api.infrastructure.posts.tables import metadata

logger = logging.getLogger(__name__)


class Database:
    """Thin wrapper over a SQLAlchemy engine.

    The engine is created once at application start and disposed
    once at shutdown.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @classmethod
    def from_dsn(cls, dsn: str) -> "Database":
        """Build a Database with a pooled engine for the given DSN."""
        return cls(create_engine(dsn, pool_pre_ping=True))

    @property
    def engine(self) -> Engine:
        return self._engine

    def execute(
        self, statement: Executable, params: Optional[Mapping[str, Any]] = None
    ) -> list[dict[str, Any]]:
        """Run one statement and return its rows as dicts.

        Args:
            statement: A SQLAlchemy Core statement or ``text()`` clause.
            params: Bind parameters for the statement.

        Returns:
            The returned rows, or an empty list for statements without rows.

        Raises:
            StorageError: If the driver rejects the statement or the
                database cannot be reached.
        """
        try:
            with self._engine.begin() as conn:
                result = conn.execute(statement, dict(params) if params else {})
                if not result.returns_rows:
                    return []
                return [dict(row) for row in result.mappings()]
        except DBAPIError as e:
            raise translate_driver_error(e) from e

    def ping(self) -> None:
        """Check that the database answers a trivial query."""
        self.execute(text("SELECT 1"))

    def create_schema(self) -> None:
        """Create the posts table if it does not exist yet."""
        try:
            metadata.create_all(self._engine)
        except DBAPIError as e:
            raise translate_driver_error(e) from e
        logger.info("Database schema ready")

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
        logger.info("Database connection pool disposed")
