"""
FastAPI Application: Multimodal AI Use Case Brainstormer.

Architecture:
  - Gemini (google-genai) for structured use case generation
  - In-memory brainstorming sessions, one per client
  - Feedback history folded back into every prompt
"""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brainstormer import __version__
from brainstormer.api.routes.brainstorm import router as brainstorm_router
from brainstormer.api.schemas.responses import HealthResponse
from brainstormer.config.settings import Settings, configure_logging, get_settings
from brainstormer.core.interfaces.generation_provider import IGenerationProvider
from brainstormer.core.use_cases.generate_use_case import GenerateUseCaseUseCase
from brainstormer.infrastructure.llm.gemini_provider import GeminiGenerationProvider
from brainstormer.infrastructure.sessions.session_repository import InMemorySessionRepository

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    provider: IGenerationProvider | None = None,
) -> FastAPI:
    """
    Build the application.

    Settings are resolved first: a missing API key raises
    ConfigurationError and no app is created.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    if provider is None:
        provider = GeminiGenerationProvider(
            api_key=settings.api_key,
            model_name=settings.gemini_model,
        )
    generator = GenerateUseCaseUseCase(
        provider=provider,
        feedback_warn_threshold=settings.feedback_warn_threshold,
    )

    app = FastAPI(
        title="Multimodal AI Use Case Brainstormer",
        description="Generate use case ideas for generative-AI modalities, steered by your feedback.",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.sessions = InMemorySessionRepository(generator, max_sessions=settings.max_sessions)

    app.include_router(brainstorm_router, prefix="/api/v1", tags=["Brainstorm"])

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(
            status="ok",
            version=__version__,
            model=settings.gemini_model,
            sessions=app.state.sessions.count(),
        )

    logger.info(f"Brainstormer ready (model={settings.gemini_model}, env={settings.env})")
    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
