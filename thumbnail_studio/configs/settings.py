"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from thumbnail_studio.configs.base import BaseSettings
from thumbnail_studio.configs.backend_service import BackendServiceSettings
from thumbnail_studio.configs.database import DatabaseSettings
from thumbnail_studio.configs.gemini import GeminiSettings
from thumbnail_studio.configs.s3_thumbnails import S3ThumbnailsSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    gemini: GeminiSettings = GeminiSettings()
    service: BackendServiceSettings = BackendServiceSettings()
    s3_thumbnails: S3ThumbnailsSettings = S3ThumbnailsSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from thumbnail_studio.configs import get_settings
        settings = get_settings()
    """
    return Settings()
