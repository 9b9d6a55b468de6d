"""Service orchestrators."""

from .thumbnail_service import ThumbnailClients, ThumbnailService

__all__ = [
    "ThumbnailClients",
    "ThumbnailService",
]
