"""
Thumbnails router package.

Exports the router for thumbnail generation endpoints.
"""

from .thumbnails_router import router

__all__ = ["router"]
