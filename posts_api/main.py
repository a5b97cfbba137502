"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handling (centralized domain/storage-to-HTTP mapping)
- Logging configuration
- Database connection pool (opened and closed by the lifespan)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from sqlalchemy.engine import make_url

from posts_api.core.config import Settings, settings
from posts_api.infrastructure.database import Database
from posts_api.infrastructure.errors import StorageError
from posts_api.interfaces.health import router as health_router
from posts_api.interfaces.posts.router import router as posts_router
from posts_api.shared.errors.handlers import ErrorHandler, register_error_handlers
from posts_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def _build_lifespan(app_settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database pool at startup and release it at shutdown."""
        dsn = app_settings.get_database_dsn()
        database = Database.from_dsn(dsn)
        try:
            database.ping()
            if app_settings.create_tables:
                database.create_schema()
        except StorageError as e:
            database.dispose()
            logger.error(
                "Could not connect to the database at %s: %s",
                make_url(dsn).render_as_string(hide_password=True),
                e.message,
            )
            raise RuntimeError(
                "Database unavailable. Make sure PostgreSQL is running "
                "(docker-compose up -d postgres) and DATABASE_URL/DB_* are set."
            ) from e

        app.state.database = database
        logger.info("%s %s started", app_settings.project_name, app_settings.version)

        try:
            yield
        finally:
            database.dispose()

    return lifespan


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers and the error handler.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        description="API para gerenciamento de posts",
        docs_url="/api-docs" if app_settings.docs_enabled else None,
        redoc_url=None,
        lifespan=_build_lifespan(app_settings),
    )

    # --- Error Handling ---
    error_handler = ErrorHandler(
        environment=app_settings.environment,
        logger=logging.getLogger("posts_api.errors"),
    )
    register_error_handlers(app, error_handler)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(posts_router)

    return app


app = create_app()


def serve() -> None:
    """Run the API with uvicorn on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
