"""
Session Repository: in-memory brainstorming sessions.

Sessions live until the client deletes them or, once `max_sessions`
is reached, until they are the oldest. Nothing is persisted.
"""

import logging
import uuid
from typing import Optional

from brainstormer.core.use_cases.brainstorm_session import BrainstormSession
from brainstormer.core.use_cases.generate_use_case import GenerateUseCaseUseCase

logger = logging.getLogger(__name__)


class InMemorySessionRepository:
    """Repository for brainstorming sessions."""

    def __init__(self, generator: GenerateUseCaseUseCase, max_sessions: int = 1000):
        self._generator = generator
        self._max_sessions = max_sessions
        self._sessions: dict[str, BrainstormSession] = {}

    def create(self) -> BrainstormSession:
        """Start a new session with default selections."""
        session_id = str(uuid.uuid4())
        session = BrainstormSession(self._generator, session_id=session_id)
        while self._sessions and len(self._sessions) >= self._max_sessions:
            # dicts keep insertion order: first key is the oldest session
            oldest = next(iter(self._sessions))
            del self._sessions[oldest]
            logger.info(f"Evicted session {oldest} (limit {self._max_sessions})")
        self._sessions[session_id] = session
        logger.info(f"Created session {session_id}")
        return session

    def get_by_id(self, session_id: str) -> Optional[BrainstormSession]:
        return self._sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        """Drop a session and its feedback history. False if unknown."""
        if self._sessions.pop(session_id, None) is None:
            return False
        logger.info(f"Deleted session {session_id}")
        return True

    def count(self) -> int:
        return len(self._sessions)
