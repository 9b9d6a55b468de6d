"""
Exception hierarchy for Thumbnail Studio.

Every failure of the generation pipeline maps to one exception class with a
fixed HTTP status and a stable error label. The API layer renders them as
``{error, detail?, providerMessage?, model?}`` JSON bodies.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class ThumbnailStudioException(Exception):
    """Base exception for all Thumbnail Studio application errors."""

    status_code: int = 500
    label: str = "Unexpected server error."

    def __init__(
        self,
        detail: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
    ) -> None:
        """
        Initialize base exception with optional upstream detail and context.

        Args:
            detail: Human-readable detail, usually upstream error text
            details: Optional dictionary of additional context for debugging
            status_code: Override for the class-level HTTP status
        """
        self.message = self.label
        self.detail = detail
        self.details = details or {}
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation including detail."""
        if self.detail:
            return f"{self.message} | Detail: {self.detail}"
        return self.message

    def to_payload(self) -> dict[str, Any]:
        """
        Build the JSON error body.

        Returns:
            dict: Error body with absent optional fields omitted
        """
        payload: dict[str, Any] = {"error": self.message}
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload


class MissingAuthTokenError(ThumbnailStudioException):
    """Raised when the request carries no bearer token."""

    status_code = 401
    label = "Missing auth token."


class InvalidAuthTokenError(ThumbnailStudioException):
    """Raised when the identity service rejects the bearer token."""

    status_code = 401
    label = "Invalid auth token."


class ValidationError(ThumbnailStudioException):
    """Raised when input validation fails."""

    status_code = 400
    label = "Invalid request."

    def __init__(
        self,
        detail: str | None = None,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            detail: Error detail
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(detail, details)


class PromptRequiredError(ValidationError):
    """Raised when the prompt is missing or blank after trimming."""

    label = "Prompt is required."

    def __init__(self) -> None:
        super().__init__(field="prompt")


class MissingConfigurationError(ThumbnailStudioException):
    """Raised when the image provider API key is not configured."""

    status_code = 500
    label = "Missing configuration."


class StorageNotConfiguredError(ThumbnailStudioException):
    """Raised when the backend service or storage bucket is not configured."""

    status_code = 500
    label = "Storage not configured."


class ProviderError(ThumbnailStudioException):
    """Base exception for image provider failures."""

    def __init__(
        self,
        detail: str | None = None,
        model: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize provider error.

        Args:
            detail: Provider error text
            model: Model id that was called
            status_code: HTTP status to respond with
            details: Additional context
        """
        self.model = model
        super().__init__(detail, details, status_code)

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if self.model is not None:
            payload["model"] = self.model
        return payload


class ProviderQuotaExceededError(ProviderError):
    """Raised when the provider signals a quota, billing or rate limit."""

    status_code = 429
    label = "Quota exceeded."

    QUOTA_HINT = (
        "The image provider quota or billing limit has been reached. "
        "Enable billing or raise the quota for this API key, then retry."
    )

    def __init__(self, provider_message: str, model: str | None = None) -> None:
        """
        Initialize quota error.

        Args:
            provider_message: Raw error text returned by the provider
            model: Model id that was called
        """
        self.provider_message = provider_message
        super().__init__(self.QUOTA_HINT, model=model)

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["providerMessage"] = self.provider_message
        return payload


class ProviderRequestError(ProviderError):
    """Raised when the provider call fails for a non-quota reason."""

    label = "Request failed."


class NoGeneratedImageError(ThumbnailStudioException):
    """Raised when the provider response holds no usable image part."""

    status_code = 502
    label = "No generated image found."


class UploadFailedError(ThumbnailStudioException):
    """Raised when the image upload to object storage fails."""

    status_code = 500
    label = "Upload failed."


class UrlCreationFailedError(ThumbnailStudioException):
    """Raised when a presigned retrieval URL cannot be issued."""

    status_code = 500
    label = "URL creation failed."


class MetadataSaveError(ThumbnailStudioException):
    """Raised when the thumbnail metadata row cannot be persisted."""

    status_code = 500
    label = "Metadata save failed."


class UnexpectedServerError(ThumbnailStudioException):
    """Raised for any failure outside the known taxonomy."""

    status_code = 500
    label = "Unexpected server error."
