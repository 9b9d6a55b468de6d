"""
Test suite for the exception taxonomy.

Verifies status codes, labels and JSON payload shapes.

System role: Verification of error contract
"""

import pytest

from thumbnail_studio.core.exceptions import (
    InvalidAuthTokenError,
    MetadataSaveError,
    MissingAuthTokenError,
    MissingConfigurationError,
    NoGeneratedImageError,
    PromptRequiredError,
    ProviderQuotaExceededError,
    StorageNotConfiguredError,
    UnexpectedServerError,
    UploadFailedError,
    UrlCreationFailedError,
)


@pytest.mark.parametrize(
    ("exc", "status_code", "label"),
    [
        (MissingAuthTokenError(), 401, "Missing auth token."),
        (PromptRequiredError(), 400, "Prompt is required."),
        (MissingConfigurationError(), 500, "Missing configuration."),
        (StorageNotConfiguredError(), 500, "Storage not configured."),
        (InvalidAuthTokenError(), 401, "Invalid auth token."),
        (NoGeneratedImageError(), 502, "No generated image found."),
        (UploadFailedError(), 500, "Upload failed."),
        (UrlCreationFailedError(), 500, "URL creation failed."),
        (MetadataSaveError(), 500, "Metadata save failed."),
        (UnexpectedServerError(), 500, "Unexpected server error."),
    ],
)
def test_status_and_label(exc, status_code: int, label: str) -> None:
    assert exc.status_code == status_code
    assert exc.to_payload() == {"error": label}


def test_detail_is_included_when_present() -> None:
    exc = UploadFailedError("PreconditionFailed")
    assert exc.to_payload() == {"error": "Upload failed.", "detail": "PreconditionFailed"}
    assert "PreconditionFailed" in str(exc)


def test_prompt_required_records_field() -> None:
    assert PromptRequiredError().details == {"field": "prompt"}


def test_quota_payload_carries_provider_message_and_model() -> None:
    exc = ProviderQuotaExceededError(provider_message="quota exhausted", model="m-1")

    payload = exc.to_payload()

    assert exc.status_code == 429
    assert payload["error"] == "Quota exceeded."
    assert payload["providerMessage"] == "quota exhausted"
    assert payload["model"] == "m-1"
    assert payload["detail"]
