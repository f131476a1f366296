"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance, wires the
registration use case at startup, and mounts the REST and GraphQL
transports.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.dependencies import build_user_registration, get_pool
from src.api.graphql import create_graphql_router
from src.api.rest import router as rest_router
from src.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "registration",
        "description": "User registration - validate input, check email uniqueness, create the user",
    },
]


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Explicit settings; defaults to get_settings()
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        FastAPI lifespan context manager.

        Manages application startup and shutdown:
        - Creates database connection pool and runs migrations (postgres backend)
        - Builds the registration use case shared by both transports
        - Closes connection pool on shutdown
        """
        logger.info("Starting application...")

        pool = None
        if settings.repository_backend == "postgres":
            logger.info("Connecting to database...")
            pool = ConnectionPool(
                conninfo=settings.database_url,
                min_size=settings.pool_min_size,
                max_size=settings.pool_max_size,
                open=True,
            )
            logger.info("Running database migrations...")
            run_migrations(pool)
        else:
            logger.info(f"Using {settings.repository_backend} repository backend")

        app.state.pool = pool
        app.state.user_registration = build_user_registration(settings, pool)

        logger.info("Application startup complete")

        yield

        logger.info("Shutting down application...")
        if pool is not None:
            pool.close()
            logger.info("Database connection pool closed")

    app = FastAPI(
        title="user-registration",
        description="User registration over REST and GraphQL",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    app.include_router(rest_router)
    app.include_router(create_graphql_router(), prefix="/graphql", include_in_schema=False)

    @app.get("/health")
    async def health_check(pool: ConnectionPool | None = Depends(get_pool)) -> dict[str, str]:
        """
        Health check endpoint.

        With the postgres backend, validates database connectivity first.
        """
        if pool is not None:
            with pool.connection() as conn:
                conn.execute("SELECT 1")

        return {"status": "healthy"}

    return app


app = create_app()
