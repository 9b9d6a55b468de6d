"""
S3 client for thumbnail bucket operations.

Uploads generated images without overwriting existing keys and issues
presigned download URLs. Works against AWS S3 or any S3-compatible store
via a custom endpoint URL.

Dependencies: boto3
System role: Object storage adapter for generated thumbnails
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone

import boto3

logger = logging.getLogger(__name__)


class S3ThumbnailClient:
    """S3 client for thumbnail bucket operations."""

    def __init__(
        self,
        bucket: str,
        region: str = "ap-southeast-2",
        endpoint_url: str | None = None,
    ) -> None:
        """
        Initialize S3 client for the thumbnail bucket.

        Args:
            bucket: S3 bucket name for thumbnail storage
            region: AWS region for S3 bucket
            endpoint_url: Optional endpoint for S3-compatible stores
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = boto3.client(
            "s3",
            region_name=region,
            endpoint_url=endpoint_url,
        )

    @property
    def bucket(self) -> str:
        """Bucket every object is written to."""
        return self._bucket

    async def upload_image(
        self,
        s3_key: str,
        image_bytes: bytes,
        content_type: str,
    ) -> None:
        """
        Upload image bytes, failing if the key already exists.

        Uses a conditional write (If-None-Match: *) so an existing object is
        never replaced.

        Args:
            s3_key: S3 object key (path in bucket)
            image_bytes: Raw image payload
            content_type: MIME type stored on the object

        Raises:
            ClientError: If the upload fails or the key already exists
        """
        logger.debug(
            f"{__name__}:upload_image - Uploading to S3 "
            f"s3_key={s3_key}, size={len(image_bytes)} bytes"
        )

        await asyncio.to_thread(
            self._s3_client.put_object,
            Bucket=self._bucket,
            Key=s3_key,
            Body=image_bytes,
            ContentType=content_type,
            IfNoneMatch="*",
        )

        logger.info(
            f"{__name__}:upload_image - Uploaded "
            f"s3_key={s3_key}, content_type={content_type}"
        )

    def generate_presigned_download_url(
        self,
        s3_key: str,
        expires_in: int = 3600,
    ) -> tuple[str, datetime]:
        """
        Generate presigned URL for downloading/viewing an S3 object.

        Args:
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            tuple[str, datetime]: (presigned_url, expires_at)

        Raises:
            ClientError: If presigned URL generation fails
        """
        presigned_url = self._s3_client.generate_presigned_url(
            ClientMethod="get_object",
            Params={
                "Bucket": self._bucket,
                "Key": s3_key,
            },
            ExpiresIn=expires_in,
        )
        expires_at = datetime.now(timezone.utc) + timedelta(seconds=expires_in)
        return presigned_url, expires_at
