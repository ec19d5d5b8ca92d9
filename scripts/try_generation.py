"""Generate one use case per randomness level against the real Gemini API."""
import asyncio
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env"))

from brainstormer.config.settings import configure_logging, get_settings
from brainstormer.core.entities.modality import get_modality
from brainstormer.core.entities.randomness import RandomnessLevel
from brainstormer.core.entities.use_case import FeedbackPolarity
from brainstormer.core.errors import ConfigurationError
from brainstormer.core.use_cases.brainstorm_session import BrainstormSession
from brainstormer.core.use_cases.generate_use_case import GenerateUseCaseUseCase
from brainstormer.infrastructure.llm.gemini_provider import GeminiGenerationProvider

try:
    settings = get_settings()
except ConfigurationError as e:
    print(f"ERROR: {e}")
    sys.exit(1)

configure_logging(settings.log_level)

modality_id = sys.argv[1] if len(sys.argv) > 1 else "text_to_speech"
provider = GeminiGenerationProvider(api_key=settings.api_key, model_name=settings.gemini_model)
session = BrainstormSession(GenerateUseCaseUseCase(provider))
session.select_modality(get_modality(modality_id))

print("=" * 70)
print(f"  Use Case Brainstormer — {session.state.selected_modality.name} ({provider.model_name})")
print("=" * 70)


async def main():
    for i, level in enumerate(RandomnessLevel):
        print(f"\n{'─'*70}")
        print(f"  Randomness {level.value}/5 — {level.label} (temperature={level.temperature})")
        print(f"{'─'*70}")

        session.change_randomness(level)
        state = await session.request_generation()

        if state.error:
            print(f"  ❌ Error: {state.error}")
            continue

        uc = state.use_case
        print(f"  ✅ {uc.title}")
        print(f"  {uc.description}")
        print(f"  Example prompt: {uc.example_prompt}")
        for b in uc.benefits:
            print(f"    • {b}")

        # alternate feedback so later prompts carry both sections
        polarity = FeedbackPolarity.POSITIVE if i % 2 == 0 else FeedbackPolarity.NEGATIVE
        session.submit_feedback(polarity)
        print(f"  Feedback: {polarity.value}")


asyncio.run(main())

print(f"\n{'='*70}")
print(f"DONE ({len(session.state.feedback_history)} feedback entries)")
