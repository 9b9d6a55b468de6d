"""
Provider response interpretation for thumbnail generation.

Pure functions that turn a Gemini ``generateContent`` result into the pieces
the generation pipeline persists: the chosen image part, its file extension,
the storage path, the title and the text commentary. Also classifies provider
errors into quota and generic failures.

Dependencies: google.genai (types, errors)
System role: Domain rules for the generation pipeline
"""

import re
import time
import uuid
from typing import Sequence

from google.genai import errors, types

from thumbnail_studio.core.exceptions import (
    ProviderError,
    ProviderQuotaExceededError,
    ProviderRequestError,
)

TITLE_MAX_LENGTH = 80

QUOTA_ERROR_PATTERN = re.compile(
    r"quota|rate limit|billing|free_tier|please retry",
    re.IGNORECASE,
)

_EXTENSIONS = {
    "image/jpeg": "jpg",
    "image/webp": "webp",
}


def first_candidate_parts(
    response: types.GenerateContentResponse,
) -> list[types.Part]:
    """
    Return the ordered parts of the first candidate.

    Args:
        response: Gemini generateContent response

    Returns:
        list[types.Part]: Parts in provider order (empty if absent)
    """
    candidates = response.candidates or []
    if not candidates:
        return []
    content = candidates[0].content
    if content is None or not content.parts:
        return []
    return list(content.parts)


def _is_image_part(part: types.Part) -> bool:
    if part.thought:
        return False
    inline_data = part.inline_data
    if inline_data is None or not inline_data.data:
        return False
    return (inline_data.mime_type or "").startswith("image/")


def select_image_part(parts: Sequence[types.Part]) -> types.Part | None:
    """
    Select the last non-thought part carrying inline image data.

    Providers may emit reasoning and text parts ahead of the final image, and
    sometimes several image candidates; the last one wins.

    Args:
        parts: Parts in provider order

    Returns:
        types.Part | None: Selected part, or None if no image part exists
    """
    for part in reversed(parts):
        if _is_image_part(part):
            return part
    return None


def extension_for_mime_type(mime_type: str) -> str:
    """
    Map an image MIME type to a file extension.

    Args:
        mime_type: MIME type reported by the provider

    Returns:
        str: "jpg" for JPEG, "webp" for WebP, "png" otherwise
    """
    return _EXTENSIONS.get(mime_type, "png")


def collect_text(parts: Sequence[types.Part]) -> str | None:
    """
    Join the text of every part carrying text, thought parts included.

    Args:
        parts: Parts in provider order

    Returns:
        str | None: Newline-joined, trimmed text, or None if empty
    """
    texts = [
        part.text
        for part in parts
        if isinstance(part.text, str)
    ]
    joined = "\n".join(texts).strip()
    return joined or None


def make_title(prompt: str) -> str:
    """Derive a record title from the first characters of the prompt."""
    return prompt[:TITLE_MAX_LENGTH]


def build_storage_path(
    owner_id: str,
    extension: str,
    timestamp_ms: int | None = None,
    unique_id: str | None = None,
) -> str:
    """
    Build a per-owner, per-upload object key.

    Args:
        owner_id: Verified caller identity
        extension: File extension without dot
        timestamp_ms: Epoch milliseconds (defaults to now)
        unique_id: Random component (defaults to a fresh uuid4)

    Returns:
        str: Key of the form {owner}/{epoch_millis}-{uuid}.{ext}
    """
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    if unique_id is None:
        unique_id = str(uuid.uuid4())
    return f"{owner_id}/{timestamp_ms}-{unique_id}.{extension}"


def is_quota_error(status_code: int | None, error_text: str) -> bool:
    """
    Decide whether a provider failure is a quota or rate-limit signal.

    Args:
        status_code: HTTP status returned by the provider
        error_text: Provider error message

    Returns:
        bool: True for status 429 or quota/billing vocabulary in the text
    """
    if status_code == 429:
        return True
    return bool(QUOTA_ERROR_PATTERN.search(error_text or ""))


def provider_error_text(error: errors.APIError) -> str:
    """Extract the most specific error text from a provider API error."""
    if error.message:
        return error.message
    if error.details:
        return str(error.details)
    return str(error)


def classify_provider_error(error: errors.APIError, model: str) -> ProviderError:
    """
    Convert a provider API error into the matching domain exception.

    Args:
        error: google-genai API error
        model: Model id that was called

    Returns:
        ProviderError: Quota error or generic request failure
    """
    error_text = provider_error_text(error)
    status_code = error.code if isinstance(error.code, int) else None

    if is_quota_error(status_code, error_text):
        return ProviderQuotaExceededError(provider_message=error_text, model=model)

    return ProviderRequestError(
        detail=error_text,
        model=model,
        status_code=status_code or 500,
    )
