"""
SmartBite FastAPI Application
Main entry point with middleware, configuration management and router wiring
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import (
    health,
    auth,
    users,
    food_categories,
    foods,
    meal_plans,
    stores,
    progress,
    favorites,
    feedback,
    food_analysis,
)

# Import database and adapters
from domain.models import init_database
from adapters import usda_adapter

# Import configuration
from app.config import settings

# Import middleware
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    smartbite_exception_handler,
    general_exception_handler,
)
from app.exceptions import SmartBiteError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("smartbite.main")

# Routers that need the relational database
DB_ROUTERS = (
    auth.router,
    users.router,
    food_categories.router,
    foods.router,
    meal_plans.router,
    stores.router,
    progress.router,
    favorites.router,
    feedback.router,
)


async def _init_database_with_retries() -> None:
    last_exc: Optional[Exception] = None
    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            # Run blocking init in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(init_database)
            _logger.info("Database initialization succeeded")
            return
        except Exception as exc:
            last_exc = exc
            _logger.warning(
                "Database init attempt %d/%d failed: %s",
                attempt,
                settings.db_init_attempts,
                exc,
            )
            if attempt < settings.db_init_attempts:
                await anyio.sleep(settings.db_init_delay_sec)

    _logger.error(
        "Database initialization failed after %d attempts", settings.db_init_attempts
    )
    raise last_exc


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Handles database initialization with retries and the USDA client.
    """
    _logger.info(f"Starting SmartBite in {settings.environment.value} mode")

    if settings.db_enabled:
        await _init_database_with_retries()
    else:
        _logger.warning("Database disabled; only food analysis routes are served")

    usda_adapter.connect(
        settings.usda_api_key, settings.usda_base_url, settings.usda_timeout_sec
    )

    try:
        yield
    finally:
        _logger.info("Shutting down SmartBite")
        usda_adapter.close()


def create_app() -> FastAPI:
    """Build the FastAPI application from current settings."""
    application = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json"
            if not settings.is_production()
            else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=(
            f"{settings.api_prefix}/redoc" if not settings.is_production() else None
        ),
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    application.add_middleware(GZipMiddleware, minimum_size=settings.gzip_minimum_size)

    # Add request logging middleware
    application.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers
    application.add_exception_handler(
        RequestValidationError, validation_exception_handler
    )
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(SmartBiteError, smartbite_exception_handler)
    application.add_exception_handler(Exception, general_exception_handler)

    application.include_router(health.router, prefix=settings.api_prefix)
    application.include_router(food_analysis.router, prefix=settings.api_prefix)
    if settings.db_enabled:
        for router in DB_ROUTERS:
            application.include_router(router, prefix=settings.api_prefix)

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
