"""
Backend service settings.

The backend service hosts the identity endpoint that verifies bearer tokens.
Its URL and public key are also required before any storage work begins.

Dependencies: pydantic_settings
System role: Identity/backend-as-a-service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendServiceSettings(BaseSettings):
    """Connection settings for the identity/backend service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SERVICE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(
        default=None,
        description="Base URL of the backend service (e.g. https://project.example.co)",
    )
    public_key: str | None = Field(
        default=None,
        description="Public (anon) API key sent as the apikey header",
    )
    timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for identity verification calls",
    )

    @property
    def is_configured(self) -> bool:
        """True when both URL and public key are present."""
        return bool(self.url and self.public_key)
