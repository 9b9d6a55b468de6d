"""
Test suite for GeminiImageClient and generation config building.

System role: Verification of image provider adapter
"""

from unittest.mock import MagicMock

import pytest
from google.genai import errors

from conftest import image_part, make_response
from thumbnail_studio.boundary.gemini.gemini_client import (
    GeminiImageClient,
    build_generation_config,
)
from thumbnail_studio.configs.gemini import PRIMARY_GEMINI_MODEL


def test_primary_model_config_includes_image_size():
    config = build_generation_config(PRIMARY_GEMINI_MODEL, "16:9", "2K")

    assert config.response_modalities == ["TEXT", "IMAGE"]
    assert config.image_config.aspect_ratio == "16:9"
    assert config.image_config.image_size == "2K"


def test_primary_model_defaults_image_size():
    config = build_generation_config(PRIMARY_GEMINI_MODEL, "1:1")

    assert config.image_config.image_size == "1K"


def test_other_model_omits_image_size():
    config = build_generation_config("gemini-2.5-flash-image", "4:3", "2K")

    assert config.image_config.aspect_ratio == "4:3"
    assert config.image_config.image_size is None


@pytest.mark.asyncio
async def test_generate_image_calls_sdk_once():
    response = make_response([image_part()])
    sdk = MagicMock()
    sdk.models.generate_content.return_value = response
    client = GeminiImageClient(api_key="key", client=sdk)

    result = await client.generate_image("A red fox", aspect_ratio="16:9", image_size="1K")

    assert result.model == PRIMARY_GEMINI_MODEL
    assert result.response is response
    sdk.models.generate_content.assert_called_once()
    kwargs = sdk.models.generate_content.call_args.kwargs
    assert kwargs["model"] == PRIMARY_GEMINI_MODEL
    assert kwargs["contents"][0].role == "user"
    assert kwargs["contents"][0].parts[0].text == "A red fox"
    assert kwargs["config"].response_modalities == ["TEXT", "IMAGE"]


@pytest.mark.asyncio
async def test_generate_image_propagates_api_error():
    sdk = MagicMock()
    sdk.models.generate_content.side_effect = errors.ClientError(
        429, {"error": {"code": 429, "message": "quota", "status": "RESOURCE_EXHAUSTED"}}
    )
    client = GeminiImageClient(api_key="key", client=sdk)

    with pytest.raises(errors.APIError):
        await client.generate_image("x", aspect_ratio="16:9")
