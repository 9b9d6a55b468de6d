"""
Gemini image generation client.

Calls ``generate_content`` once per request, asking for both text and image
modalities. The underlying google-genai client is built lazily so a missing
API key surfaces as a configuration error at request time rather than at
import time.

Dependencies: asyncio, google.genai
System role: Image provider adapter
"""

import asyncio
import logging
from dataclasses import dataclass

from google import genai
from google.genai import types

from thumbnail_studio.configs.gemini import PRIMARY_GEMINI_MODEL

logger = logging.getLogger(__name__)

RESPONSE_MODALITIES = ["TEXT", "IMAGE"]


@dataclass
class GeminiImageResult:
    """Successful provider response together with the model that produced it."""

    model: str
    response: types.GenerateContentResponse


def build_generation_config(
    model: str,
    aspect_ratio: str,
    image_size: str | None = None,
) -> types.GenerateContentConfig:
    """
    Build the generation config for a model.

    Only the primary model accepts an image size; other models get the
    aspect ratio alone.

    Args:
        model: Gemini model id
        aspect_ratio: Requested aspect ratio (e.g. "16:9")
        image_size: Requested image size (e.g. "1K")

    Returns:
        types.GenerateContentConfig: Config requesting text and image output
    """
    if model == PRIMARY_GEMINI_MODEL:
        image_config = types.ImageConfig(
            aspect_ratio=aspect_ratio,
            image_size=image_size or "1K",
        )
    else:
        image_config = types.ImageConfig(aspect_ratio=aspect_ratio)

    return types.GenerateContentConfig(
        response_modalities=RESPONSE_MODALITIES,
        image_config=image_config,
    )


class GeminiImageClient:
    """Thin wrapper around google-genai for single-shot image generation."""

    def __init__(
        self,
        api_key: str | None,
        model: str = PRIMARY_GEMINI_MODEL,
        client: "genai.Client | None" = None,
    ) -> None:
        """
        Initialize Gemini image client.

        Args:
            api_key: Gemini API key
            model: Model id used for generation
            client: Prebuilt google-genai client (used by tests)
        """
        self._api_key = api_key
        self.model = model
        self._client = client

    def _get_client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate_image(
        self,
        prompt: str,
        aspect_ratio: str,
        image_size: str | None = None,
    ) -> GeminiImageResult:
        """
        Request one image (plus optional commentary) for a prompt.

        Args:
            prompt: Trimmed user prompt
            aspect_ratio: Requested aspect ratio
            image_size: Requested image size (primary model only)

        Returns:
            GeminiImageResult: Raw response and model id

        Raises:
            google.genai.errors.APIError: If the provider returns an error status
        """
        logger.info(
            f"{__name__}:generate_image - START "
            f"model={self.model}, prompt_len={len(prompt)}, aspect_ratio={aspect_ratio}"
        )

        config = build_generation_config(self.model, aspect_ratio, image_size)
        contents = [
            types.Content(role="user", parts=[types.Part(text=prompt)]),
        ]

        response = await asyncio.to_thread(
            self._get_client().models.generate_content,
            model=self.model,
            contents=contents,
            config=config,
        )

        logger.info(f"{__name__}:generate_image - END model={self.model}")
        return GeminiImageResult(model=self.model, response=response)
