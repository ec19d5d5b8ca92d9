"""
Use Case: Build Prompt

Turns (modality, randomness, feedback history) into the prompt sent to
the generator, plus the fixed response schema. Pure functions only.
"""

from typing import Sequence

from brainstormer.core.entities.modality import Modality
from brainstormer.core.entities.randomness import RandomnessLevel
from brainstormer.core.entities.use_case import Feedback, FeedbackPolarity


USE_CASE_SCHEMA: dict = {
    "type": "OBJECT",
    "properties": {
        "useCaseTitle": {
            "type": "STRING",
            "description": "A short, catchy title for the use case.",
        },
        "useCaseDescription": {
            "type": "STRING",
            "description": "A detailed paragraph explaining the use case, its function, and target audience.",
        },
        "examplePrompt": {
            "type": "STRING",
            "description": "An example prompt a user would provide to this AI application.",
        },
        "benefits": {
            "type": "ARRAY",
            "description": "A list of 3-5 key benefits of this application.",
            "items": {"type": "STRING"},
        },
    },
    "required": ["useCaseTitle", "useCaseDescription", "examplePrompt", "benefits"],
}

ROLE_STATEMENT = (
    "You are an expert AI product manager and futurist, specializing in identifying "
    "innovative applications for cutting-edge generative AI technologies."
)

FEEDBACK_PREAMBLE = (
    "You are continuing a brainstorming session. The user has provided feedback on "
    "previous ideas. Please learn from their preferences."
)
LIKED_HEADER = (
    "Here are the ideas the user liked ('Love It!'). Try to generate something with a "
    "similar level of creativity or in a similar domain:"
)
AVOID_HEADER = (
    "Here are the ideas the user found 'Boring'. Please avoid generating anything "
    "similar to these:"
)


def _feedback_lines(history: Sequence[Feedback], polarity: FeedbackPolarity) -> list[str]:
    return [
        f'- Title: "{f.use_case.title}". Description: {f.use_case.description}'
        for f in history
        if f.polarity == polarity
    ]


def build_feedback_section(history: Sequence[Feedback]) -> str:
    """Liked / avoid sections, or "" when there is no feedback yet."""
    if not history:
        return ""

    parts = [FEEDBACK_PREAMBLE]

    liked = _feedback_lines(history, FeedbackPolarity.POSITIVE)
    if liked:
        parts.append("")
        parts.append(LIKED_HEADER)
        parts.extend(liked)

    avoid = _feedback_lines(history, FeedbackPolarity.NEGATIVE)
    if avoid:
        parts.append("")
        parts.append(AVOID_HEADER)
        parts.extend(avoid)

    return "\n".join(parts)


def build_prompt(
    modality: Modality,
    randomness: RandomnessLevel,
    feedback_history: Sequence[Feedback] = (),
) -> str:
    """
    Build the generation prompt.

    Args:
        modality: Target modality (required).
        randomness: Level 1-5.
        feedback_history: Feedback so far, in insertion order.

    Returns:
        Prompt text.
    """
    level = RandomnessLevel.from_value(int(randomness))

    parts = [ROLE_STATEMENT]

    feedback = build_feedback_section(feedback_history)
    if feedback:
        parts.append(feedback)

    parts.append(
        f'Your task is to brainstorm a use case for the following AI modality: "{modality.name}".\n'
        f'The user has specified a "randomness" level of {level.value}/5. '
        f"A randomness of {level.value} means you should generate a {level.description}"
    )
    parts.append(
        "Based on the modality and randomness level, please generate a response in the "
        "specified JSON format with the fields useCaseTitle (string), useCaseDescription "
        "(string), examplePrompt (string) and benefits (an array of 3-5 strings). All four "
        "fields are required. The use case should be described clearly. The example prompt "
        "should be realistic for a user of such an application. The benefits should be "
        "tangible and compelling."
    )

    return "\n\n".join(parts)
