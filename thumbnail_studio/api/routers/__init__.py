"""API routers."""

from .health import router as health_router
from .thumbnails import router as thumbnails_router

__all__ = [
    "health_router",
    "thumbnails_router",
]
