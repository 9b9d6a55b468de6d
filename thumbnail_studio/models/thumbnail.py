"""Thumbnail API request/response models.

Defines Pydantic DTOs for the generation and listing endpoints. Field names
on the wire follow the camelCase contract used by the browser client.

Dependencies: pydantic
System role: API data models for thumbnail endpoints
"""

import json
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ASPECT_RATIO = "16:9"
DEFAULT_IMAGE_SIZE = "1K"


class GenerateThumbnailRequest(BaseModel):
    """Request to generate a thumbnail.

    All fields are optional at the schema level so that a missing prompt is
    reported as "Prompt is required." rather than a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    prompt: str | None = Field(default=None, description="Text prompt for the image")
    aspect_ratio: str | None = Field(
        default=None,
        alias="aspectRatio",
        description='Aspect ratio hint (default "16:9")',
    )
    image_size: str | None = Field(
        default=None,
        alias="imageSize",
        description='Image size hint for the primary model (default "1K")',
    )

    @field_validator("prompt", "aspect_ratio", "image_size", mode="before")
    @classmethod
    def non_string_as_absent(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @classmethod
    def from_json_body(cls, body: bytes) -> "GenerateThumbnailRequest":
        """
        Parse a raw request body.

        A JSON value that is not an object carries no prompt.

        Args:
            body: Raw request body

        Returns:
            GenerateThumbnailRequest: Parsed request

        Raises:
            ValueError: If the body is empty or not valid JSON
        """
        payload = json.loads(body)
        if not isinstance(payload, dict):
            payload = {}
        return cls.model_validate(payload)


class ThumbnailSummary(BaseModel):
    """Persisted thumbnail fields returned after generation."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    storage_bucket: str
    storage_path: str
    created_at: datetime


class GenerateThumbnailResponse(BaseModel):
    """Successful generation result."""

    model_config = ConfigDict(populate_by_name=True)

    thumbnail: ThumbnailSummary
    image_url: str = Field(alias="imageUrl", description="Presigned URL valid for one hour")
    model: str = Field(description="Provider model id used")
    text: str | None = Field(default=None, description="Provider commentary, if any")


class ThumbnailListItem(BaseModel):
    """Thumbnail record with a freshly issued presigned URL."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: UUID
    title: str
    prompt: str
    storage_bucket: str
    storage_path: str
    mime_type: str
    file_size_bytes: int
    created_at: datetime
    image_url: str = Field(alias="imageUrl")
