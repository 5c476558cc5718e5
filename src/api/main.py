"""
FastAPI application factory and configuration.

The application owns one psycopg connection pool for its lifetime: it is
opened and the schema bootstrapped on startup, then closed on shutdown.
Endpoints that touch the database synchronously are plain functions so
Starlette runs them in its threadpool instead of on the event loop.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.errors import register_exception_handlers
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Account Registration API v1 - Create user accounts",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the connection pool and apply migrations for the app's lifetime."""
    settings = get_settings()

    logger.info("Opening database pool (min=%s, max=%s)", settings.pool_min_size, settings.pool_max_size)
    with ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    ) as pool:
        run_migrations(pool)
        app.state.pool = pool
        logger.info("Registration API ready")

        yield

        logger.info("Closing database pool")


def health_check(request: Request) -> dict[str, str]:
    """
    Report healthy once the database answers a trivial query.

    Runs in the threadpool: the pool checkout and query are blocking.
    Database errors propagate as a 500.
    """
    with request.app.state.pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}


def create_app() -> FastAPI:
    """Build the registration API with its routes and error handlers."""
    application = FastAPI(
        title="registrar",
        description="Account Registration API - Validated, hashed, duplicate-safe account creation",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    register_exception_handlers(application)
    application.include_router(v1_router, prefix="/v1")
    application.add_api_route("/health", health_check, methods=["GET"])
    return application


app = create_app()
