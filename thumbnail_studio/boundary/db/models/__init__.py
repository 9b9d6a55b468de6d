"""ORM models."""

from thumbnail_studio.boundary.db.models.thumbnail_model import ThumbnailModel

__all__ = ["ThumbnailModel"]
