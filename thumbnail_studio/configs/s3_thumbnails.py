"""
S3 thumbnails bucket configuration.

Settings for generated image storage and presigned URL generation.

Dependencies: pydantic_settings
System role: S3 thumbnails bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class S3ThumbnailsSettings(BaseSettings):
    """Settings for S3 thumbnails bucket operations."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="S3_THUMBNAILS_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(
        default="thumbnail-assets",
        description="S3 bucket for generated thumbnail images",
    )
    region: str = Field(
        default="ap-southeast-2",
        description="AWS region for S3 bucket",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible stores (None for AWS)",
    )
    signed_url_expiry: int = Field(
        default=3600,
        description="Presigned URL expiry in seconds (default 1 hour)",
    )
