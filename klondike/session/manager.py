"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Presentation layer starts a game -> session created, state dealt
2. During play, moves are applied to the session's one GameState
3. Restart replaces the GameState wholesale with a new deal
4. Game ends -> session destroyed, ALL state deleted

PERSISTENCE RULES:
- No database, no save files
- Game state is ephemeral (session-scoped only)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import logging
import uuid
import time

from ..engine_core.state import GameState
from ..engine_core.dealer import deal_new_game
from ..engine_core.action import Action, ActionResult
from ..engine_core.reducer import Reducer

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    WON = "won"  # All foundations complete
    GAME_OVER = "game_over"  # Session ended normally
    ABANDONED = "abandoned"  # User quit or session went stale


@dataclass
class Session:
    """
    An ephemeral game session.

    Holds the single GameState the engine mutates.
    The session is destroyed when the game ends.
    """
    session_id: str
    created_at: float

    state: SessionState = SessionState.ACTIVE
    game_state: GameState | None = None

    moves_made: int = 0
    last_activity: float = 0.0

    # Session metadata
    metadata: dict[str, Any] = field(default_factory=dict)

    def is_active(self) -> bool:
        """Check if session still accepts moves."""
        return self.state == SessionState.ACTIVE


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions with a freshly dealt game
    - Apply moves to a session's state
    - Track and clean up sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, reducer: Reducer | None = None):
        self._sessions: dict[str, Session] = {}
        self.reducer = reducer or Reducer()

    def create_session(self, random_seed: int | None = None) -> Session:
        """
        Create a new game session.

        Args:
            random_seed: Seed for a reproducible deal

        Returns:
            New Session with a dealt game
        """
        session_id = str(uuid.uuid4())
        now = time.time()

        session = Session(
            session_id=session_id,
            created_at=now,
            game_state=deal_new_game(random_seed),
            last_activity=now,
        )

        self._sessions[session_id] = session
        logger.info("Session created", extra={"session_id": session_id})
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def apply(self, session: Session, action: Action) -> ActionResult:
        """
        Apply a move to the session's game state.

        Moves on a finished session are rejected without touching the state.
        """
        if not session.is_active():
            return ActionResult.failure(
                f"Session is {session.state.value}", error_code="SESSION_INACTIVE"
            )

        result = self.reducer.apply(session.game_state, action)
        session.last_activity = time.time()

        if not result.success:
            logger.debug(
                result.error,
                extra={
                    "session_id": session.session_id,
                    "action_type": action.action_type.value,
                    "error_code": result.error_code,
                },
            )
            return result

        session.moves_made += 1
        if result.is_won:
            session.state = SessionState.WON
            logger.info("Game won", extra={"session_id": session.session_id})
        return result

    def restart_session(self, session_id: str, random_seed: int | None = None) -> Session | None:
        """Replace a session's game with a new deal."""
        session = self._sessions.get(session_id)
        if not session:
            return None

        session.game_state = deal_new_game(random_seed)
        session.state = SessionState.ACTIVE
        session.moves_made = 0
        session.last_activity = time.time()
        logger.info("Session restarted", extra={"session_id": session_id})
        return session

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and clean up.

        The session is removed from memory.
        Returns False if no such session existed.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        if reason == "completed":
            session.state = SessionState.GAME_OVER
        else:
            session.state = SessionState.ABANDONED

        session.game_state = None
        logger.info(
            "Session ended (%s)", reason, extra={"session_id": session_id}
        )
        return True

    def list_sessions(self) -> list[str]:
        """List IDs of all held sessions."""
        return list(self._sessions)

    def list_active_sessions(self) -> list[str]:
        """List IDs of sessions still accepting moves."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> int:
        """
        Remove sessions idle for longer than max_age_seconds.

        Returns the number removed.
        """
        current_time = time.time()
        to_remove = [
            session_id
            for session_id, session in self._sessions.items()
            if current_time - session.last_activity > max_age_seconds
        ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")

        return len(to_remove)
