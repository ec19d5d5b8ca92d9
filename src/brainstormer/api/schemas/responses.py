"""
Pydantic schemas: request/response models for the API.
"""

from pydantic import BaseModel, Field

from brainstormer.core.entities.modality import Modality
from brainstormer.core.entities.randomness import RandomnessLevel
from brainstormer.core.entities.session_state import SessionState
from brainstormer.core.entities.use_case import Feedback, FeedbackPolarity, UseCase


# ── Requests ──

class SelectModalityRequest(BaseModel):
    modality_id: str


class RandomnessRequest(BaseModel):
    level: int = Field(ge=1, le=5)


class FeedbackRequest(BaseModel):
    polarity: FeedbackPolarity


# ── Responses ──

class ModalityResponse(BaseModel):
    id: str
    name: str
    description: str

    @classmethod
    def from_entity(cls, modality: Modality) -> "ModalityResponse":
        return cls(id=modality.id, name=modality.name, description=modality.description)


class RandomnessLevelResponse(BaseModel):
    level: int
    label: str
    description: str
    temperature: float

    @classmethod
    def from_entity(cls, level: RandomnessLevel) -> "RandomnessLevelResponse":
        return cls(
            level=level.value,
            label=level.label,
            description=level.description,
            temperature=level.temperature,
        )


class UseCaseResponse(BaseModel):
    useCaseTitle: str
    useCaseDescription: str
    examplePrompt: str
    benefits: list[str]

    @classmethod
    def from_entity(cls, use_case: UseCase) -> "UseCaseResponse":
        return cls(**use_case.to_dict())


class FeedbackResponse(BaseModel):
    use_case: UseCaseResponse
    polarity: FeedbackPolarity

    @classmethod
    def from_entity(cls, feedback: Feedback) -> "FeedbackResponse":
        return cls(use_case=UseCaseResponse.from_entity(feedback.use_case), polarity=feedback.polarity)


class SessionResponse(BaseModel):
    session_id: str
    selected_modality: ModalityResponse | None = None
    randomness: int
    randomness_label: str
    use_case: UseCaseResponse | None = None
    is_loading: bool = False
    error: str | None = None
    feedback_history: list[FeedbackResponse] = []
    feedback_given: bool = False
    can_generate: bool = False

    @classmethod
    def from_state(cls, session_id: str, state: SessionState) -> "SessionResponse":
        return cls(
            session_id=session_id,
            selected_modality=(
                ModalityResponse.from_entity(state.selected_modality)
                if state.selected_modality else None
            ),
            randomness=state.randomness.value,
            randomness_label=state.randomness.label,
            use_case=UseCaseResponse.from_entity(state.use_case) if state.use_case else None,
            is_loading=state.is_loading,
            error=state.error,
            feedback_history=[FeedbackResponse.from_entity(f) for f in state.feedback_history],
            feedback_given=state.feedback_given,
            can_generate=state.can_generate,
        )


class FeedbackResult(BaseModel):
    recorded: bool
    session: SessionResponse


class HealthResponse(BaseModel):
    status: str
    version: str
    model: str
    sessions: int
