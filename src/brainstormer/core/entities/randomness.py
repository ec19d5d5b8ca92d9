"""
Entity: Randomness Level

How far-out the generated idea should be, from 1 (Conventional) to
5 (Far-Out). Each level carries a UI label, the phrase used in the prompt
and the Gemini temperature.
"""

from enum import IntEnum

from brainstormer.core.errors import ValidationError


class RandomnessLevel(IntEnum):
    CONVENTIONAL = 1
    PRACTICAL = 2
    CREATIVE = 3
    INNOVATIVE = 4
    FAR_OUT = 5

    @classmethod
    def from_value(cls, value: int) -> "RandomnessLevel":
        """Coerce an int to a level, rejecting anything outside 1-5."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Randomness level must be an integer, got {value!r}")
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Randomness level must be between 1 and 5, got {value}") from None

    @property
    def label(self) -> str:
        return RANDOMNESS_LABELS[self]

    @property
    def description(self) -> str:
        return RANDOMNESS_DESCRIPTIONS[self]

    @property
    def temperature(self) -> float:
        # 0.3 → 1.1, rounded so float noise doesn't leak into the request
        return round(self.value * 0.2 + 0.1, 2)


DEFAULT_RANDOMNESS = RandomnessLevel.CREATIVE

RANDOMNESS_LABELS: dict[RandomnessLevel, str] = {
    RandomnessLevel.CONVENTIONAL: "Conventional",
    RandomnessLevel.PRACTICAL: "Practical",
    RandomnessLevel.CREATIVE: "Creative",
    RandomnessLevel.INNOVATIVE: "Innovative",
    RandomnessLevel.FAR_OUT: "Far-Out",
}

RANDOMNESS_DESCRIPTIONS: dict[RandomnessLevel, str] = {
    RandomnessLevel.CONVENTIONAL: "very practical, common, or conventional use case that is likely already being developed.",
    RandomnessLevel.PRACTICAL: "practical and slightly innovative use case that builds upon existing ideas.",
    RandomnessLevel.CREATIVE: "creative use case that balances innovation with feasibility.",
    RandomnessLevel.INNOVATIVE: "highly creative and innovative idea that pushes current boundaries.",
    RandomnessLevel.FAR_OUT: "highly speculative, 'far-out' idea that explores future possibilities, regardless of current technical feasibility.",
}
