"""
FastAPI Application - REST API for the mobile app.

Endpoints:
    GET    /api/v1/health                       Health check
    POST   /api/v1/sessions                     Deal a new game
    GET    /api/v1/sessions                     List sessions
    GET    /api/v1/sessions/{id}                Get session status
    DELETE /api/v1/sessions/{id}                End session
    POST   /api/v1/sessions/{id}/restart        Deal a new game into the session
    GET    /api/v1/sessions/{id}/state          Get game state
    POST   /api/v1/sessions/{id}/draw           Draw from stock
    POST   /api/v1/sessions/{id}/moves          Apply a move
    GET    /api/v1/sessions/{id}/moves          List legal moves

Rejected moves answer 200 with success=false; the state is unchanged.
Malformed moves answer 400, unknown sessions 404.

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union
import logging
import os

from fastapi import FastAPI, Body, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..observability import setup_logging
from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    RestartSessionRequest,
    MoveRequest,
    # Response models
    SessionResponse,
    GameStateResponse,
    MoveResponse,
    LegalMovesResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)

# Environment configuration
KLONDIKE_ENV = os.getenv("KLONDIKE_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
KLONDIKE_LOG_LEVEL = os.getenv("KLONDIKE_LOG_LEVEL", "INFO")
KLONDIKE_LOG_FORMAT = os.getenv(
    "KLONDIKE_LOG_FORMAT", "json" if KLONDIKE_ENV == "production" else "text"
)
KLONDIKE_SESSION_TTL = int(os.getenv("KLONDIKE_SESSION_TTL", "3600"))

logger = logging.getLogger(__name__)

_STATUS_FOR_ERROR = {
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.INVALID_MOVE_REQUEST: 400,
    ErrorCode.VALIDATION_ERROR: 400,
}


def create_app(service=None, configure_logging: bool = False):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)
        configure_logging: Install the root log handler

    Returns:
        FastAPI application instance
    """
    if configure_logging:
        setup_logging(KLONDIKE_LOG_LEVEL, KLONDIKE_LOG_FORMAT)

    app = FastAPI(
        title="Klondike Engine API",
        description="Klondike solitaire rules engine for the mobile client.",
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    # CORS for mobile app
    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(response: ErrorResponse) -> JSONResponse:
        """Wrap an ErrorResponse with the matching HTTP status."""
        return JSONResponse(
            status_code=_STATUS_FOR_ERROR.get(response.error_code, 400),
            content=response.model_dump(mode="json"),
        )

    def respond(response):
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    def sweep_stale_sessions():
        removed = api_service.session_manager.cleanup_stale_sessions(KLONDIKE_SESSION_TTL)
        if removed:
            logger.info("Removed %d stale sessions", removed)

    # =========================================================================
    # Health
    # =========================================================================

    @app.get("/api/v1/health", response_model=HealthResponse, tags=["Health"])
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__, environment=KLONDIKE_ENV)

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        tags=["Sessions"],
        summary="Deal a new game",
    )
    async def create_session(
        body: Annotated[Optional[CreateSessionRequest], Body()] = None,
    ) -> SessionResponse:
        """Create a session holding a freshly dealt game."""
        sweep_stale_sessions()
        return api_service.create_session(body or CreateSessionRequest())

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.get_session(session_id))

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "completed",
    ) -> EndSessionResponse:
        """End a game session and release its state."""
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    @app.post(
        "/api/v1/sessions/{session_id}/restart",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Deal a new game into the session",
    )
    async def restart_session(
        session_id: str,
        body: Annotated[Optional[RestartSessionRequest], Body()] = None,
    ) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.restart_session(session_id, body or RestartSessionRequest()))

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get current game state",
    )
    async def get_game_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.get_game_state(session_id))

    @app.post(
        "/api/v1/sessions/{session_id}/draw",
        response_model=MoveResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Draw from stock",
    )
    async def draw(session_id: str) -> Union[MoveResponse, JSONResponse]:
        """Draw one card, or recycle the waste when the stock is empty."""
        return respond(api_service.draw(session_id))

    @app.post(
        "/api/v1/sessions/{session_id}/moves",
        response_model=MoveResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Malformed move"},
            404: {"model": ErrorResponse, "description": "Session not found"},
        },
        tags=["Game"],
        summary="Apply a move",
    )
    async def apply_move(
        session_id: str,
        body: MoveRequest,
    ) -> Union[MoveResponse, JSONResponse]:
        """
        Apply a move.

        **Request Body:**
        ```json
        {"move_type": "tableau_to_tableau", "from_column": 2, "from_card_index": 2, "to_column": 5}
        ```
        """
        return respond(api_service.apply_move(session_id, body))

    @app.get(
        "/api/v1/sessions/{session_id}/moves",
        response_model=LegalMovesResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="List legal moves",
    )
    async def get_legal_moves(session_id: str) -> Union[LegalMovesResponse, JSONResponse]:
        return respond(api_service.legal_moves(session_id))

    return app


# For running directly: uvicorn klondike.api.app:app
app = create_app(configure_logging=True)
