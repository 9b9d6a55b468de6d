"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - ThumbnailModel: Thumbnail metadata entity
  - thumbnail_crud: CRUD operation singleton

Dependencies: sqlalchemy, thumbnail_studio.configs
System role: Database adapter for thumbnail metadata
"""

from thumbnail_studio.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from thumbnail_studio.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from thumbnail_studio.boundary.db.models.thumbnail_model import ThumbnailModel
from thumbnail_studio.boundary.db.CRUD import BaseCRUD, ThumbnailCRUD, thumbnail_crud

__all__ = [
    "Base",
    "CreatedAtMixin",
    "UUIDMixin",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "ThumbnailModel",
    "BaseCRUD",
    "ThumbnailCRUD",
    "thumbnail_crud",
]
