"""
Thumbnail CRUD operations.

Insert-once persistence for ThumbnailModel plus owner-scoped listing.

Dependencies: sqlalchemy, thumbnail_studio.boundary.db.models
System role: Thumbnail metadata persistence
"""

from typing import Sequence

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from thumbnail_studio.boundary.db.CRUD.base_crud import BaseCRUD
from thumbnail_studio.boundary.db.models.thumbnail_model import ThumbnailModel


class ThumbnailCRUD(BaseCRUD[ThumbnailModel]):
    """
    CRUD operations for ThumbnailModel.

    Extends BaseCRUD with owner-scoped queries. Rows are never updated
    or deleted.
    """

    def __init__(self) -> None:
        """Initialize ThumbnailCRUD with ThumbnailModel."""
        super().__init__(ThumbnailModel)

    async def create_thumbnail(
        self,
        session: AsyncSession,
        user_id: str,
        title: str,
        prompt: str,
        storage_bucket: str,
        storage_path: str,
        mime_type: str,
        file_size_bytes: int,
    ) -> ThumbnailModel:
        """
        Insert a thumbnail record.

        Args:
            session: Async database session
            user_id: Owner identity
            title: Prompt-derived title
            prompt: Full prompt
            storage_bucket: Bucket holding the object
            storage_path: Object key
            mime_type: Image MIME type
            file_size_bytes: Payload size

        Returns:
            ThumbnailModel: Created record with id and created_at populated
        """
        return await self.create(
            session,
            user_id=user_id,
            title=title,
            prompt=prompt,
            storage_bucket=storage_bucket,
            storage_path=storage_path,
            mime_type=mime_type,
            file_size_bytes=file_size_bytes,
        )

    async def list_by_user(
        self,
        session: AsyncSession,
        user_id: str,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ThumbnailModel]:
        """
        Retrieve a user's thumbnails, newest first.

        Args:
            session: Async database session
            user_id: Owner identity
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            Sequence of ThumbnailModels owned by the user
        """
        stmt = (
            select(ThumbnailModel)
            .where(ThumbnailModel.user_id == user_id)
            .order_by(desc(ThumbnailModel.created_at))
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


thumbnail_crud = ThumbnailCRUD()
