"""
Entity: Modality

The fixed catalogue of generative-AI modalities a user can brainstorm for.
"""

from dataclasses import dataclass

from brainstormer.core.errors import ValidationError


@dataclass(frozen=True)
class Modality:
    """A generative-AI capability (e.g. Text to Speech)."""
    id: str
    name: str
    description: str


ALL_MODALITIES: tuple[Modality, ...] = (
    Modality("video_analysis", "Video Analysis", "Extract insights from video content."),
    Modality("audio_analysis", "Audio Analysis", "Transcribe and understand spoken language."),
    Modality("text_to_video", "Text to Video", "Generate video clips from text prompts."),
    Modality("image_to_video", "Image to Video", "Animate static images into dynamic videos."),
    Modality("text_to_speech", "Text to Speech", "Create natural-sounding audio from text."),
    Modality("realtime_conversation", "Real-time Audio Conversation", "Engage in live, spoken dialogue with AI."),
)

_BY_ID = {m.id: m for m in ALL_MODALITIES}


def get_modality(modality_id: str) -> Modality:
    """Look up a modality by id."""
    try:
        return _BY_ID[modality_id]
    except KeyError:
        raise ValidationError(f"Unknown modality: {modality_id!r}") from None
