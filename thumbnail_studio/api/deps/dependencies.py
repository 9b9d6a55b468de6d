"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, thumbnail_studio.configs, thumbnail_studio.application,
    thumbnail_studio.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from thumbnail_studio.application.services import ThumbnailService
from thumbnail_studio.boundary.aws.s3_client import S3ThumbnailClient
from thumbnail_studio.boundary.db import get_async_db
from thumbnail_studio.boundary.gemini.gemini_client import GeminiImageClient
from thumbnail_studio.boundary.identity.identity_client import IdentityClient
from thumbnail_studio.configs import Settings, get_settings

BEARER_PREFIX = "Bearer "


class ServiceCache:
    """Container for lazily built client instances.

    Clients are constructed from settings on first access and reused across
    requests. The generation service reads them only after it has validated
    the configuration they depend on.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._identity_client: IdentityClient | None = None
        self._gemini_client: GeminiImageClient | None = None
        self._s3_client: S3ThumbnailClient | None = None

    @property
    def settings(self) -> Settings:
        """Settings the clients are built from."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def identity_client(self) -> IdentityClient:
        """Get cached identity client."""
        if self._identity_client is None:
            service = self.settings.service
            self._identity_client = IdentityClient(
                base_url=service.url,
                public_key=service.public_key,
                timeout=service.timeout_seconds,
            )
        return self._identity_client

    @property
    def gemini_client(self) -> GeminiImageClient:
        """Get cached Gemini image client."""
        if self._gemini_client is None:
            gemini = self.settings.gemini
            self._gemini_client = GeminiImageClient(
                api_key=gemini.api_key,
                model=gemini.primary_model,
            )
        return self._gemini_client

    @property
    def s3_client(self) -> S3ThumbnailClient:
        """Get cached S3 thumbnail client."""
        if self._s3_client is None:
            s3 = self.settings.s3_thumbnails
            self._s3_client = S3ThumbnailClient(
                bucket=s3.bucket,
                region=s3.region,
                endpoint_url=s3.endpoint_url,
            )
        return self._s3_client

    def clear(self) -> None:
        """Clear all cached instances."""
        self._identity_client = None
        self._gemini_client = None
        self._s3_client = None


# Process-wide cache, handed to services through get_service_cache()
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    """
    Extract the bearer token from the Authorization header.

    Returns an empty string when the header is absent or not a Bearer
    credential; the service turns that into a 401. The remainder after the
    prefix is passed on as is, so a whitespace-only credential reaches the
    identity service and is rejected there.

    Args:
        authorization: Raw Authorization header

    Returns:
        str: Token, or "" if none was supplied
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return ""
    return authorization[len(BEARER_PREFIX):]


def get_thumbnail_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
    cache: ServiceCache = Depends(get_service_cache),
) -> ThumbnailService:
    """
    Get thumbnail service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected via Depends)
        cache: Client cache (injected via Depends)

    Returns:
        ThumbnailService: Thumbnail service instance
    """
    return ThumbnailService(db=db, settings=settings, clients=cache)
