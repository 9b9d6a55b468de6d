"""
Thumbnail ORM model.

Represents one generated image: who owns it, the prompt that produced it,
and where the object lives in storage.

Dependencies: sqlalchemy, thumbnail_studio.boundary.db.base
System role: Thumbnail metadata persistence
"""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from thumbnail_studio.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class ThumbnailModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Thumbnail ORM model.

    Rows are written once after the image has been uploaded and are never
    updated. There is no delete path.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Verified identity of the owner
        title: First 80 characters of the prompt
        prompt: Full prompt text, verbatim
        storage_bucket: Bucket holding the image object
        storage_path: Object key ({user_id}/{epoch_millis}-{uuid}.{ext})
        mime_type: image/png, image/jpeg or image/webp
        file_size_bytes: Decoded image payload length
        created_at: Database-assigned creation timestamp
    """

    __tablename__ = "thumbnails"
    __table_args__ = (
        Index("ix_thumbnails_user_id_created_at", "user_id", "created_at"),
    )

    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Owner identity from the identity service",
    )

    title: Mapped[str] = mapped_column(
        String(80),
        nullable=False,
        doc="Prompt prefix used as display title",
    )

    prompt: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Full submitted prompt",
    )

    storage_bucket: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    storage_path: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        unique=True,
        doc="Object key inside storage_bucket",
    )

    mime_type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="image/png",
    )

    file_size_bytes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )
