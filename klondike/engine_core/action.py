"""
Action System - Moves expressed as data, and their results.

Actions let presentation layers, the legal-move probe and the demo
loop talk about moves without calling mutators directly.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .state import Suit


class ActionType(Enum):
    """Types of moves in the engine."""
    DRAW = "draw"
    WASTE_TO_FOUNDATION = "waste_to_foundation"
    WASTE_TO_TABLEAU = "waste_to_tableau"
    TABLEAU_TO_FOUNDATION = "tableau_to_foundation"
    FOUNDATION_TO_TABLEAU = "foundation_to_tableau"
    TABLEAU_TO_TABLEAU = "tableau_to_tableau"


@dataclass
class ActionPayload:
    """
    Parameters of a move.

    Different action types use different fields; the reducer
    validates that the ones it needs are present.
    """
    from_column: int | None = None
    from_card_index: int | None = None
    to_column: int | None = None
    suit: Suit | None = None


@dataclass
class Action:
    """A complete move to be applied to the game state."""
    action_type: ActionType
    payload: ActionPayload = field(default_factory=ActionPayload)

    @classmethod
    def draw(cls) -> Action:
        return cls(action_type=ActionType.DRAW)

    @classmethod
    def waste_to_foundation(cls) -> Action:
        return cls(action_type=ActionType.WASTE_TO_FOUNDATION)

    @classmethod
    def waste_to_tableau(cls, to_column: int) -> Action:
        return cls(
            action_type=ActionType.WASTE_TO_TABLEAU,
            payload=ActionPayload(to_column=to_column),
        )

    @classmethod
    def tableau_to_foundation(cls, from_column: int) -> Action:
        return cls(
            action_type=ActionType.TABLEAU_TO_FOUNDATION,
            payload=ActionPayload(from_column=from_column),
        )

    @classmethod
    def foundation_to_tableau(cls, suit: Suit | str, to_column: int) -> Action:
        return cls(
            action_type=ActionType.FOUNDATION_TO_TABLEAU,
            payload=ActionPayload(suit=Suit(suit), to_column=to_column),
        )

    @classmethod
    def tableau_to_tableau(
        cls, from_column: int, from_card_index: int, to_column: int
    ) -> Action:
        return cls(
            action_type=ActionType.TABLEAU_TO_TABLEAU,
            payload=ActionPayload(
                from_column=from_column,
                from_card_index=from_card_index,
                to_column=to_column,
            ),
        )

    def describe(self) -> str:
        """Human-readable description, 1-based columns."""
        p = self.payload
        if self.action_type == ActionType.DRAW:
            return "Draw from stock"
        if self.action_type == ActionType.WASTE_TO_FOUNDATION:
            return "Move waste card to foundation"
        if self.action_type == ActionType.WASTE_TO_TABLEAU:
            return f"Move waste card to tableau pile {p.to_column + 1}"
        if self.action_type == ActionType.TABLEAU_TO_FOUNDATION:
            return f"Move tableau card to foundation from pile {p.from_column + 1}"
        if self.action_type == ActionType.FOUNDATION_TO_TABLEAU:
            return f"Move {p.suit.value} foundation card to tableau pile {p.to_column + 1}"
        return (
            f"Move cards from tableau pile {p.from_column + 1} "
            f"(card {p.from_card_index + 1}) to pile {p.to_column + 1}"
        )


@dataclass
class ActionResult:
    """
    Result of applying an action.

    The state is mutated in place; new_state is that same object,
    handed back so callers can re-render from it.
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    # For UI/presentation
    state_changes: list[str] = field(default_factory=list)
    is_won: bool = False

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(
        cls,
        state: Any,
        changes: list[str] | None = None,
        is_won: bool = False,
    ) -> ActionResult:
        """Create a success result with the mutated state."""
        return cls(
            success=True,
            new_state=state,
            state_changes=changes or [],
            is_won=is_won,
        )
