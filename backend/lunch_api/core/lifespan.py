"""
Application lifespan handler.
Manages startup and shutdown events for the FastAPI application.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from lunch_shared.infrastructure.db import engine, get_db_context
from lunch_shared.config.settings import settings
from lunch_shared.config.logging import setup_logging, rest_api_logger as logger
from lunch_api.models import Base
from lunch_api.seed import seed


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    Runs on startup and shutdown.
    """
    # Initialize logging
    setup_logging()

    # Validate production secrets before startup
    secret_errors = settings.validate_production_secrets()
    if secret_errors:
        for error in secret_errors:
            logger.error("Configuration error", error=error)
        if settings.environment == "production":
            raise RuntimeError(
                f"Production configuration errors: {'; '.join(secret_errors)}. "
                "Server will not start with insecure configuration."
            )
        else:
            logger.warning(
                "Running with insecure defaults (acceptable for development only)"
            )

    logger.info(
        "Starting lunch API",
        port=settings.rest_api_port,
        env=settings.environment,
        menu_timezone=settings.menu_timezone,
    )

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    if settings.seed_on_startup:
        with get_db_context() as db:
            seed(db)

    yield

    logger.info("Shutting down lunch API")
    engine.dispose()
