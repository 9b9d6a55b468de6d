"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, thumbnail_studio.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from thumbnail_studio import __version__
from thumbnail_studio.api.deps.dependencies import get_service_cache
from thumbnail_studio.api.routers.thumbnails.thumbnail_error_handling import (
    thumbnail_studio_exception_handler,
    unexpected_exception_handler,
)
from thumbnail_studio.configs import get_settings
from thumbnail_studio.core.exceptions import ThumbnailStudioException
from thumbnail_studio.observability.logger import configure_logging
from thumbnail_studio.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)
from .routers import health_router, thumbnails_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and drops cached clients on shutdown.
    Clients are not pre-warmed: configuration is validated per request.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    yield

    get_service_cache().clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Thumbnail Studio API",
        description="Prompt-to-thumbnail generation with persisted, signed image links",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (added last = runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_exception_handler(ThumbnailStudioException, thumbnail_studio_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(thumbnails_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "thumbnail_studio.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
