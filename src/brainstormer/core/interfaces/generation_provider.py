"""
Contract: Generation Provider

Sends a prompt to a generative-AI text API and returns the raw
structured (JSON) text. Any implementation (Gemini, a fake for tests,
another vendor) must respect this contract.
"""

from abc import ABC, abstractmethod


class IGenerationProvider(ABC):
    """
    Port: Generation Provider

    One call = one outbound request. Implementations must not retry or
    cache; transport and provider-side failures are raised as
    ProviderError.
    """

    @abstractmethod
    async def generate_json(self, prompt: str, schema: dict, temperature: float) -> str:
        """
        Request a JSON response matching `schema`.

        Args:
            prompt: Full natural-language prompt.
            schema: Response schema (OpenAPI subset, as accepted by Gemini).
            temperature: Sampling temperature.

        Returns:
            The response text, expected to be JSON.
        """
        ...
