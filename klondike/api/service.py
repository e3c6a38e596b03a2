"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine actions
2. Manages sessions
3. Formats state for the mobile client

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    # Requests
    CreateSessionRequest,
    RestartSessionRequest,
    MoveRequest,
    # Responses
    SessionResponse,
    GameStateResponse,
    MoveResponse,
    LegalMovesResponse,
    ErrorResponse,
    # Shared
    CardInfo,
    MoveInfo,
    # Enums
    SessionStatus,
    ErrorCode,
)
from ..session import SessionManager, Session
from ..engine_core.state import Card, Suit, SUITS
from ..engine_core.action import Action, ActionType, ActionPayload, ActionResult
from ..engine_core.action_generator import legal_actions, has_legal_move
from ..engine_core.moves import check_win
from ..engine_core.reducer import INVALID_ACTION
from ..render import card_label

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service for the mobile app.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest(random_seed=7))
        state = service.get_game_state(session.session_id)
        result = service.apply_move(session.session_id, MoveRequest(...))

    Lookups on unknown sessions return an ErrorResponse instead of raising.
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """Create a new session with a freshly dealt game."""
        session = self.session_manager.create_session(random_seed=request.random_seed)
        return self._session_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        return self._session_response(session)

    def restart_session(
        self, session_id: str, request: RestartSessionRequest
    ) -> SessionResponse | ErrorResponse:
        """Deal a new game into an existing session."""
        session = self.session_manager.restart_session(session_id, request.random_seed)
        if not session:
            return _not_found(session_id)
        return self._session_response(session)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_sessions()

    def get_game_state(self, session_id: str) -> GameStateResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)
        return self._game_state_response(session)

    def draw(self, session_id: str) -> MoveResponse | ErrorResponse:
        """Draw from stock, recycling the waste when the stock is empty."""
        return self._apply(session_id, Action.draw())

    def apply_move(self, session_id: str, request: MoveRequest) -> MoveResponse | ErrorResponse:
        """Apply a client-requested move."""
        payload = ActionPayload(
            from_column=request.from_column,
            from_card_index=request.from_card_index,
            to_column=request.to_column,
            suit=Suit(request.suit.value) if request.suit else None,
        )
        action = Action(action_type=ActionType(request.move_type.value), payload=payload)
        return self._apply(session_id, action)

    def legal_moves(self, session_id: str) -> LegalMovesResponse | ErrorResponse:
        """List every move the engine would accept right now."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)

        state = session.game_state
        moves = []
        if session.is_active():
            moves = [_move_info(action) for action in legal_actions(state)]

        return LegalMovesResponse(
            session_id=session_id,
            moves=moves,
            has_legal_move=session.is_active() and has_legal_move(state),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _apply(self, session_id: str, action: Action) -> MoveResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return _not_found(session_id)

        result: ActionResult = self.session_manager.apply(session, action)
        if result.error_code == INVALID_ACTION:
            return ErrorResponse(
                error=result.error,
                error_code=ErrorCode.INVALID_MOVE_REQUEST,
            )

        return MoveResponse(
            session_id=session_id,
            success=result.success,
            error=result.error,
            error_code=ErrorCode(result.error_code) if result.error_code else None,
            state_changes=result.state_changes,
            game_state=self._game_state_response(session),
        )

    def _session_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(session.state.value),
            created_at=session.created_at,
            random_seed=session.game_state.random_seed if session.game_state else None,
            moves_made=session.moves_made,
        )

    def _game_state_response(self, session: Session) -> GameStateResponse:
        state = session.game_state
        return GameStateResponse(
            session_id=session.session_id,
            status=SessionStatus(session.state.value),
            stock_count=len(state.stock),
            stock=[_card_info(c) for c in state.stock],
            waste=[_card_info(c) for c in state.waste],
            tableau=[[_card_info(c) for c in column] for column in state.tableau],
            foundation={
                suit.value: [_card_info(c) for c in state.foundation_for(suit)]
                for suit in SUITS
            },
            is_won=check_win(state),
            moves_made=session.moves_made,
        )


def _not_found(session_id: str) -> ErrorResponse:
    return ErrorResponse(
        error=f"Session {session_id} not found",
        error_code=ErrorCode.SESSION_NOT_FOUND,
    )


def _card_info(card: Card) -> CardInfo:
    """Face-down cards expose only their id."""
    if not card.face_up:
        return CardInfo(card_id=card.card_id, face_up=False)
    return CardInfo(
        card_id=card.card_id,
        face_up=True,
        suit=card.suit.value,
        rank=card.rank,
        color=card.color.value,
        label=card_label(card),
    )


def _move_info(action: Action) -> MoveInfo:
    p = action.payload
    return MoveInfo(
        action_type=action.action_type.value,
        description=action.describe(),
        from_column=p.from_column,
        from_card_index=p.from_card_index,
        to_column=p.to_column,
        suit=p.suit.value if p.suit else None,
    )
