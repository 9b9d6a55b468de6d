"""
CRUD operations for database models.

Usage:
    from thumbnail_studio.boundary.db.CRUD import thumbnail_crud

    thumbnail = await thumbnail_crud.get_by_id(db, thumbnail_id)
"""

from thumbnail_studio.boundary.db.CRUD.base_crud import BaseCRUD
from thumbnail_studio.boundary.db.CRUD.thumbnail_crud import ThumbnailCRUD, thumbnail_crud

__all__ = [
    "BaseCRUD",
    "ThumbnailCRUD",
    "thumbnail_crud",
]
