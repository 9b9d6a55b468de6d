"""
Gemini image generation settings.

Dependencies: pydantic_settings
System role: Image provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PRIMARY_GEMINI_MODEL = "gemini-3-pro-image-preview"


class GeminiSettings(BaseSettings):
    """Settings for the Gemini image generation provider."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Gemini API key (checked per request, not at startup)",
    )
    primary_model: str = Field(
        default=PRIMARY_GEMINI_MODEL,
        description="Model id used for every generation request",
    )
