"""
Main entrypoint for the Book API.

``create_app`` builds the FastAPI application: it configures logging,
constructs the book repository and service from the given settings and
includes the versioned routers.  The database is migrated (and
optionally seeded) when the application starts, not when it is built.
The module level ``app`` uses the environment derived settings, so the
service can be run with::

    uvicorn book_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .repositories.book_repository import BookRepository
from .services.book_service import BookService
from .services.data_initializer import load_initial_books

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Books", "description": "Operations pertaining to books"},
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to build the application with.  Defaults to the module
        level settings read from the environment.

    Returns
    -------
    FastAPI
        A configured application instance.  ``app.state.book_service``
        holds the service used by the endpoints.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    repository = BookRepository(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        version = init_db(settings.database_url)
        logger.info("Database %s ready at schema version %s", settings.database_url, version)
        if settings.seed_data:
            load_initial_books(repository)
        yield

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.book_service = BookService(repository)

    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
