"""
Entity: Session State

Everything one brainstorming session remembers. Mutated only by
BrainstormSession.
"""

from dataclasses import dataclass, field

from brainstormer.core.entities.modality import Modality
from brainstormer.core.entities.randomness import DEFAULT_RANDOMNESS, RandomnessLevel
from brainstormer.core.entities.use_case import Feedback, UseCase


@dataclass
class SessionState:
    selected_modality: Modality | None = None
    randomness: RandomnessLevel = DEFAULT_RANDOMNESS
    use_case: UseCase | None = None
    is_loading: bool = False
    error: str | None = None
    feedback_history: list[Feedback] = field(default_factory=list)
    feedback_given: bool = False

    @property
    def can_generate(self) -> bool:
        """Whether the generate trigger should be enabled."""
        return self.selected_modality is not None and not self.is_loading
