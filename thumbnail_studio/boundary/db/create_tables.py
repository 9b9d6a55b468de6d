"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, thumbnail_studio.configs
System role: Database schema initialization

Usage:
    python -m thumbnail_studio.boundary.db.create_tables
"""

import asyncio
import logging

from thumbnail_studio.boundary.db.base import Base
from thumbnail_studio.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from thumbnail_studio.boundary.db.models.thumbnail_model import ThumbnailModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("All tables created successfully.")


if __name__ == "__main__":
    from thumbnail_studio.observability.logger import configure_logging

    configure_logging()
    asyncio.run(create_all_tables())
