"""API-specific dependencies."""

from .dependencies import (
    ServiceCache,
    get_bearer_token,
    get_service_cache,
    get_settings_dependency,
    get_thumbnail_service,
)

__all__ = [
    "ServiceCache",
    "get_bearer_token",
    "get_service_cache",
    "get_settings_dependency",
    "get_thumbnail_service",
]
