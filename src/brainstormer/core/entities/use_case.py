"""
Entity: Use Case + Feedback

A generated use case idea and the user's verdict on it.
Pure domain models, no framework dependency.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class UseCase:
    """A use case idea returned by the generator."""
    title: str
    description: str
    example_prompt: str
    benefits: tuple[str, ...]     # 3-5 items, order preserved

    def to_dict(self) -> dict:
        """Serialise with the provider's field names."""
        return {
            "useCaseTitle": self.title,
            "useCaseDescription": self.description,
            "examplePrompt": self.example_prompt,
            "benefits": list(self.benefits),
        }


class FeedbackPolarity(str, Enum):
    POSITIVE = "positive"   # "Love It!"
    NEGATIVE = "negative"   # "Boring"


@dataclass(frozen=True)
class Feedback:
    """One entry of the append-only feedback history."""
    use_case: UseCase
    polarity: FeedbackPolarity
