"""
Common response models.

Error schema shared by every endpoint.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Error response schema (optional fields are omitted when absent)."""

    model_config = ConfigDict(populate_by_name=True)

    error: str = Field(description="Stable error label")
    detail: str | None = Field(default=None, description="Upstream or diagnostic detail")
    provider_message: str | None = Field(
        default=None,
        alias="providerMessage",
        description="Raw provider error text (quota errors only)",
    )
    model: str | None = Field(default=None, description="Provider model id that was called")
