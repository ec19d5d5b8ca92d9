"""
Gemini Generation Provider: structured JSON output via Gemini.

Implements IGenerationProvider with the async client of the
`google-genai` SDK (not the deprecated `google-generativeai`).
"""

import logging

import httpx
from google import genai
from google.genai import errors, types

from brainstormer.core.errors import ProviderError
from brainstormer.core.interfaces.generation_provider import IGenerationProvider

logger = logging.getLogger(__name__)


class GeminiGenerationProvider(IGenerationProvider):
    """Gemini-backed generation provider."""

    def __init__(self, api_key: str, model_name: str = "gemini-2.5-flash"):
        self.model_name = model_name
        self.client = genai.Client(api_key=api_key)

    async def generate_json(self, prompt: str, schema: dict, temperature: float) -> str:
        """Send one generate_content request and return the response text."""
        logger.debug(f"Calling Gemini ({self.model_name}) with temperature={temperature}")
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=schema,
                    temperature=temperature,
                ),
            )
        except errors.APIError as e:
            raise ProviderError(str(e)) from e
        except httpx.HTTPError as e:
            raise ProviderError(str(e) or type(e).__name__) from e

        text = response.text or ""
        logger.debug(f"Received response of length: {len(text)}")
        return text
