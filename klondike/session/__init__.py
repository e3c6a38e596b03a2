"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through:
- Created when the user starts a game
- Holds the current game state
- Replaced wholesale on restart
- Destroyed when the game ends

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
