"""Gemini image generation boundary adapter."""

from thumbnail_studio.boundary.gemini.gemini_client import (
    GeminiImageClient,
    GeminiImageResult,
    build_generation_config,
)

__all__ = ["GeminiImageClient", "GeminiImageResult", "build_generation_config"]
