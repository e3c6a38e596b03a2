"""
API Module - Mobile app interface.

Exposes the engine via REST API for the mobile client.
The mobile app:
1. Creates a session (a dealt game)
2. Reads the game state and renders it
3. Submits draws and moves
4. Asks for legal moves to highlight targets

All state is session-scoped. Nothing is persisted.
"""

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
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "RestartSessionRequest",
    "MoveRequest",
    # Responses
    "SessionResponse",
    "GameStateResponse",
    "MoveResponse",
    "LegalMovesResponse",
    "ErrorResponse",
    # Shared
    "CardInfo",
    "MoveInfo",
    # Service
    "APIService",
    "create_app",
]
