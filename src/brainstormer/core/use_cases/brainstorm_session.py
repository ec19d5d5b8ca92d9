"""
Use Case: Brainstorm Session

Holds one user's selections, the latest result and the feedback history,
and reacts to the user's events:

  select modality → change randomness → generate → feedback → generate ...

Generation errors never escape `request_generation`; they end up in
`state.error` for display.
"""

import logging

from brainstormer.core.entities.modality import Modality
from brainstormer.core.entities.randomness import RandomnessLevel
from brainstormer.core.entities.session_state import SessionState
from brainstormer.core.entities.use_case import Feedback, FeedbackPolarity
from brainstormer.core.errors import GenerationError, GenerationInProgress, ValidationError
from brainstormer.core.use_cases.generate_use_case import GenerateUseCaseUseCase

logger = logging.getLogger(__name__)

NO_MODALITY_MESSAGE = "Please select a modality first."


class BrainstormSession:
    """Session State Holder."""

    def __init__(self, generator: GenerateUseCaseUseCase, session_id: str = ""):
        self.session_id = session_id
        self.state = SessionState()
        self._generator = generator

    def select_modality(self, modality: Modality) -> None:
        self.state.selected_modality = modality

    def change_randomness(self, level: int) -> None:
        """Set the randomness level. Raises ValidationError outside 1-5."""
        self.state.randomness = RandomnessLevel.from_value(level)

    async def request_generation(self) -> SessionState:
        """
        Run one generation cycle: Idle → Loading → Success | Failed → Idle.

        Raises:
            GenerationInProgress: a generation is already running.
        """
        state = self.state
        if state.is_loading:
            raise GenerationInProgress()

        if state.selected_modality is None:
            state.error = NO_MODALITY_MESSAGE
            return state

        # set before the first await so a concurrent call sees it
        state.is_loading = True
        state.error = None
        state.use_case = None

        try:
            use_case = await self._generator.execute(
                state.selected_modality,
                state.randomness,
                tuple(state.feedback_history),
            )
            state.use_case = use_case
            state.feedback_given = False
        except GenerationError as e:
            logger.info(f"Session {self.session_id}: generation failed: {e}")
            state.error = str(e)
        finally:
            state.is_loading = False

        return state

    def submit_feedback(self, polarity: FeedbackPolarity | str) -> bool:
        """
        Record feedback for the current use case.

        Returns:
            True if recorded, False if there was nothing to rate or the
            current use case was already rated.
        """
        try:
            polarity = FeedbackPolarity(polarity)
        except ValueError:
            raise ValidationError(f"Unknown feedback polarity: {polarity!r}") from None

        state = self.state
        if state.use_case is None or state.feedback_given:
            return False

        state.feedback_history.append(Feedback(use_case=state.use_case, polarity=polarity))
        state.feedback_given = True
        logger.debug(
            f"Session {self.session_id}: {polarity.value} feedback on "
            f"{state.use_case.title!r} ({len(state.feedback_history)} total)"
        )
        return True
