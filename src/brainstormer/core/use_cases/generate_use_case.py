"""
Use Case: Generate Use Case

Prompt → Gemini (structured JSON) → validated UseCase.

One request per call: no retries, no caching. Every failure leaves here
as a GenerationError subclass with a user-facing message.
"""

import asyncio
import json
import logging
import time
from typing import Sequence

from brainstormer.core.entities.modality import Modality
from brainstormer.core.entities.randomness import RandomnessLevel
from brainstormer.core.entities.use_case import Feedback, UseCase
from brainstormer.core.errors import (
    GenerationFailed,
    MalformedResponse,
    ProviderError,
    UnknownError,
    ValidationError,
)
from brainstormer.core.interfaces.generation_provider import IGenerationProvider
from brainstormer.core.use_cases.build_prompt import USE_CASE_SCHEMA, build_prompt

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("useCaseTitle", "useCaseDescription", "examplePrompt")


def _strip_code_fence(raw: str) -> str:
    raw = raw.strip()
    if raw.startswith("```"):
        lines = raw.split("\n")
        raw = "\n".join(lines[1:])  # drop ```json
        if raw.rstrip().endswith("```"):
            raw = raw.rstrip()[:-3]
        raw = raw.strip()
    return raw


def parse_use_case(raw: str) -> UseCase:
    """
    Parse and validate the provider's JSON text.

    Raises:
        MalformedResponse: not JSON, a required field is missing/empty,
            or `benefits` is not an array.
    """
    try:
        data = json.loads(_strip_code_fence(raw or ""))
    except json.JSONDecodeError as e:
        logger.warning(f"Response is not valid JSON: {e}. Raw: {(raw or '')[:200]}")
        raise MalformedResponse() from e

    if not isinstance(data, dict):
        raise MalformedResponse()
    for key in REQUIRED_TEXT_FIELDS:
        if not data.get(key) or not isinstance(data[key], str):
            logger.warning(f"Response field {key!r} missing or not a string")
            raise MalformedResponse()
    benefits = data.get("benefits")
    if not isinstance(benefits, list):
        logger.warning(f"Response field 'benefits' is not an array: {type(benefits).__name__}")
        raise MalformedResponse()

    if not all(isinstance(b, str) for b in benefits):
        logger.warning("Response field 'benefits' contains non-string items")
        raise MalformedResponse()
    if not 3 <= len(benefits) <= 5:
        logger.warning(f"Expected 3-5 benefits, got {len(benefits)}")

    return UseCase(
        title=data["useCaseTitle"],
        description=data["useCaseDescription"],
        example_prompt=data["examplePrompt"],
        benefits=tuple(benefits),
    )


class GenerateUseCaseUseCase:
    """
    Use Case: selections + feedback → one Gemini request → UseCase.

    Stateless; the provider comes in through the constructor.
    """

    def __init__(self, provider: IGenerationProvider, feedback_warn_threshold: int = 50):
        self._provider = provider
        self._feedback_warn_threshold = feedback_warn_threshold

    async def execute(
        self,
        modality: Modality,
        randomness: RandomnessLevel | int,
        feedback_history: Sequence[Feedback] = (),
    ) -> UseCase:
        """
        Generate one use case.

        Raises:
            ValidationError: modality missing or randomness out of range.
            MalformedResponse: response did not match the schema.
            GenerationFailed: network / provider failure, or any other
                error that carries a message.
            UnknownError: an error with no message at all.
        """
        if modality is None:
            raise ValidationError("Please select a modality first.")
        level = RandomnessLevel.from_value(randomness)

        if len(feedback_history) > self._feedback_warn_threshold:
            logger.warning(
                f"Feedback history has {len(feedback_history)} entries; "
                f"the prompt includes all of them"
            )

        prompt = build_prompt(modality, level, feedback_history)

        t0 = time.perf_counter()
        try:
            raw = await self._provider.generate_json(
                prompt=prompt,
                schema=USE_CASE_SCHEMA,
                temperature=level.temperature,
            )
            use_case = parse_use_case(raw)
        except MalformedResponse:
            raise
        except (ProviderError, OSError, asyncio.TimeoutError) as e:
            logger.error(f"Error generating use case: {e!r}")
            raise GenerationFailed(str(e) or type(e).__name__) from e
        except Exception as e:
            if not str(e):
                # nothing to show the user
                logger.exception(f"Unexpected error generating use case: {e!r}")
                raise UnknownError() from e
            logger.error(f"Error generating use case: {e!r}")
            raise GenerationFailed(str(e)) from e

        latency = (time.perf_counter() - t0) * 1000
        logger.info(
            f"Generated use case {use_case.title!r} for {modality.id} "
            f"(randomness={level.value}, feedback={len(feedback_history)}) in {latency:.0f}ms"
        )
        return use_case
