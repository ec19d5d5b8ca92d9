"""
Routes: modalities, randomness levels and brainstorming sessions.
"""

from fastapi import APIRouter, HTTPException, Request, Response

from brainstormer.api.schemas.responses import (
    FeedbackRequest,
    FeedbackResult,
    ModalityResponse,
    RandomnessLevelResponse,
    RandomnessRequest,
    SelectModalityRequest,
    SessionResponse,
)
from brainstormer.core.entities.modality import ALL_MODALITIES, get_modality
from brainstormer.core.entities.randomness import RandomnessLevel
from brainstormer.core.errors import GenerationInProgress, ValidationError
from brainstormer.core.use_cases.brainstorm_session import BrainstormSession
from brainstormer.infrastructure.sessions.session_repository import InMemorySessionRepository

router = APIRouter()


def _get_session(request: Request, session_id: str) -> BrainstormSession:
    repo: InMemorySessionRepository = request.app.state.sessions
    session = repo.get_by_id(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _to_response(session: BrainstormSession) -> SessionResponse:
    return SessionResponse.from_state(session.session_id, session.state)


@router.get("/modalities", response_model=list[ModalityResponse])
async def list_modalities():
    return [ModalityResponse.from_entity(m) for m in ALL_MODALITIES]


@router.get("/randomness-levels", response_model=list[RandomnessLevelResponse])
async def list_randomness_levels():
    return [RandomnessLevelResponse.from_entity(level) for level in RandomnessLevel]


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def create_session(request: Request):
    """Start a brainstorming session (no modality, randomness 3, no feedback)."""
    session = request.app.state.sessions.create()
    return _to_response(session)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(request: Request, session_id: str):
    return _to_response(_get_session(request, session_id))


@router.put("/sessions/{session_id}/modality", response_model=SessionResponse)
async def select_modality(request: Request, session_id: str, body: SelectModalityRequest):
    session = _get_session(request, session_id)
    try:
        session.select_modality(get_modality(body.modality_id))
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _to_response(session)


@router.put("/sessions/{session_id}/randomness", response_model=SessionResponse)
async def change_randomness(request: Request, session_id: str, body: RandomnessRequest):
    session = _get_session(request, session_id)
    try:
        session.change_randomness(body.level)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _to_response(session)


@router.post("/sessions/{session_id}/generate", response_model=SessionResponse)
async def generate(request: Request, session_id: str):
    """
    Generate a use case for the session's current selections.

    Generation failures come back in the session's `error` field,
    not as HTTP errors.
    """
    session = _get_session(request, session_id)
    try:
        await session.request_generation()
    except GenerationInProgress as e:
        raise HTTPException(status_code=409, detail=str(e))
    return _to_response(session)


@router.post("/sessions/{session_id}/feedback", response_model=FeedbackResult)
async def submit_feedback(request: Request, session_id: str, body: FeedbackRequest):
    """Rate the current use case. Only the first rating per use case counts."""
    session = _get_session(request, session_id)
    recorded = session.submit_feedback(body.polarity)
    return FeedbackResult(recorded=recorded, session=_to_response(session))


@router.delete("/sessions/{session_id}", status_code=204)
async def delete_session(request: Request, session_id: str):
    """End a session; its selections and feedback history are discarded."""
    if not request.app.state.sessions.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
    return Response(status_code=204)
