"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between the mobile app and the engine.
Face-down cards are sent without suit or rank so the client cannot peek.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has expired
- SESSION_INACTIVE: Session is won or ended and takes no more moves
- ILLEGAL_MOVE: The move breaks a solitaire rule; state is unchanged
- INVALID_MOVE_REQUEST: Missing fields or out-of-range indices
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    WON = "won"
    GAME_OVER = "game_over"
    ABANDONED = "abandoned"


class MoveType(str, Enum):
    """Moves a client may request (drawing has its own endpoint)."""
    WASTE_TO_FOUNDATION = "waste_to_foundation"
    WASTE_TO_TABLEAU = "waste_to_tableau"
    TABLEAU_TO_FOUNDATION = "tableau_to_foundation"
    FOUNDATION_TO_TABLEAU = "foundation_to_tableau"
    TABLEAU_TO_TABLEAU = "tableau_to_tableau"


class SuitName(str, Enum):
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    SESSION_INACTIVE = "SESSION_INACTIVE"
    ILLEGAL_MOVE = "ILLEGAL_MOVE"
    INVALID_MOVE_REQUEST = "INVALID_MOVE_REQUEST"
    VALIDATION_ERROR = "VALIDATION_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    card_id: int = Field(description="Stable rendering identity, 0-51")
    face_up: bool
    suit: Optional[SuitName] = None
    rank: Optional[int] = Field(None, ge=1, le=13)
    color: Optional[str] = None
    label: Optional[str] = Field(None, description="Short label such as H1 or S13")

    model_config = {"from_attributes": True}


class MoveInfo(BaseModel):
    """A legal move the client can offer."""
    action_type: str
    description: str
    from_column: Optional[int] = None
    from_card_index: Optional[int] = None
    to_column: Optional[int] = None
    suit: Optional[SuitName] = None


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new game session."""
    random_seed: Optional[int] = Field(None, description="Seed for reproducible deals")


class RestartSessionRequest(BaseModel):
    """Request to deal a new game in an existing session."""
    random_seed: Optional[int] = Field(None, description="Seed for reproducible deals")


class MoveRequest(BaseModel):
    """
    Request to apply a move.

    Fields needed per move type:
    - waste_to_foundation: none
    - waste_to_tableau: to_column
    - tableau_to_foundation: from_column
    - foundation_to_tableau: suit, to_column
    - tableau_to_tableau: from_column, from_card_index, to_column
    """
    move_type: MoveType
    from_column: Optional[int] = Field(None, description="Source tableau column, 0-6")
    from_card_index: Optional[int] = Field(None, description="First card of the run to move")
    to_column: Optional[int] = Field(None, description="Destination tableau column, 0-6")
    suit: Optional[SuitName] = Field(None, description="Foundation to take from")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """Response containing session information."""
    session_id: str
    status: SessionStatus
    created_at: float = 0.0
    random_seed: Optional[int] = None
    moves_made: int = 0
    api_version: str = "v1"


class GameStateResponse(BaseModel):
    """Complete game state for display."""
    session_id: str
    status: SessionStatus
    stock_count: int
    stock: list[CardInfo] = Field(default_factory=list)
    waste: list[CardInfo] = Field(default_factory=list)
    tableau: list[list[CardInfo]] = Field(default_factory=list)
    foundation: dict[str, list[CardInfo]] = Field(default_factory=dict)
    is_won: bool = False
    moves_made: int = 0
    api_version: str = "v1"


class MoveResponse(BaseModel):
    """Result of a move request. Rejected moves are not HTTP errors."""
    session_id: str
    success: bool
    error: Optional[str] = None
    error_code: Optional[ErrorCode] = None
    state_changes: list[str] = Field(default_factory=list)
    game_state: Optional[GameStateResponse] = None
    api_version: str = "v1"


class LegalMovesResponse(BaseModel):
    """Moves currently available in a session."""
    session_id: str
    moves: list[MoveInfo] = Field(default_factory=list)
    has_legal_move: bool = Field(
        description="False when only drawing or shuttling foundation cards remains"
    )
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """List of session IDs."""
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    """Response from ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
    environment: str
