"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, course_catalog.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_catalog import __version__
from course_catalog.api.error_handlers import register_error_handlers
from course_catalog.boundary.db.connection import get_async_engine
from course_catalog.configs import get_settings
from course_catalog.observability.logger import configure_logging
from course_catalog.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import courses_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and releases pooled connections on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Application startup", extra={"environment": settings.environment})

    yield

    if get_async_engine.cache_info().currsize:
        await get_async_engine().dispose()
    logger.info("Database engine disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="Course Catalog API",
        description="Course catalog with enrollment tracking",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Added last so it runs first and the correlation ID is set for request logs
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_error_handlers(app)

    app.include_router(health_router, prefix=settings.api.prefix)
    app.include_router(courses_router, prefix=settings.api.prefix)

    return app


app = create_app()


def main() -> None:
    """Run the API with uvicorn using configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "course_catalog.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
    )


if __name__ == "__main__":
    main()
