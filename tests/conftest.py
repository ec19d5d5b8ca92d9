"""Shared fixtures: a scripted generation provider and sample payloads."""

import json

import pytest

from brainstormer.core.entities.use_case import Feedback, FeedbackPolarity, UseCase
from brainstormer.core.interfaces.generation_provider import IGenerationProvider


def make_payload(**overrides) -> str:
    data = {
        "useCaseTitle": "X",
        "useCaseDescription": "Y",
        "examplePrompt": "Z",
        "benefits": ["a", "b", "c"],
    }
    data.update(overrides)
    return json.dumps(data)


class FakeProvider(IGenerationProvider):
    """Returns queued responses (the last one repeats) or raises `error`."""

    def __init__(self, responses=None, error: Exception | None = None):
        self.responses = list(responses or [make_payload()])
        self.error = error
        self.calls: list[dict] = []

    async def generate_json(self, prompt: str, schema: dict, temperature: float) -> str:
        self.calls.append({"prompt": prompt, "schema": schema, "temperature": temperature})
        if self.error is not None:
            raise self.error
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]


def make_use_case(title: str, description: str = "") -> UseCase:
    return UseCase(
        title=title,
        description=description or f"{title} description",
        example_prompt=f"{title} prompt",
        benefits=("one", "two", "three"),
    )


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def mixed_history():
    return [
        Feedback(make_use_case("Podcast Dubber"), FeedbackPolarity.POSITIVE),
        Feedback(make_use_case("Meeting Minutes"), FeedbackPolarity.NEGATIVE),
        Feedback(make_use_case("Bedtime Storyteller"), FeedbackPolarity.POSITIVE),
        Feedback(make_use_case("Voicemail Reader"), FeedbackPolarity.NEGATIVE),
    ]
