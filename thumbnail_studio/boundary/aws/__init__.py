"""AWS/S3 boundary adapters."""

from thumbnail_studio.boundary.aws.s3_client import S3ThumbnailClient

__all__ = ["S3ThumbnailClient"]
