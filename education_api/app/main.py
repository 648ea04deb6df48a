"""
Main entrypoint for the Education Management API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn or
another ASGI server, e.g.::

    uvicorn education_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .api.handlers import register_exception_handlers
from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    # Creates the database file if needed and applies pending migrations.
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug, lifespan=lifespan)
    register_exception_handlers(app)

    # Mount versioned routes under /api/v1.
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()
