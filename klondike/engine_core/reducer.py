"""
Reducer - Applies actions to game state.

The reducer is the data-driven entry point over the mutators.

Design principles:
- (state, action) -> ActionResult, with the state mutated in place
- Validates the payload shape before dispatching
- Rule violations come back as failures, never as exceptions
"""

from __future__ import annotations

from .state import GameState, TABLEAU_SIZE
from .action import Action, ActionType, ActionResult
from .moves import (
    draw_from_stock,
    move_waste_to_foundation,
    move_waste_to_tableau,
    move_tableau_to_foundation,
    move_foundation_to_tableau,
    move_card_to_tableau,
    check_win,
)

INVALID_ACTION = "INVALID_ACTION"
ILLEGAL_MOVE = "ILLEGAL_MOVE"
NO_HANDLER = "NO_HANDLER"

# Payload fields each action type needs
_REQUIRED_FIELDS = {
    ActionType.DRAW: (),
    ActionType.WASTE_TO_FOUNDATION: (),
    ActionType.WASTE_TO_TABLEAU: ("to_column",),
    ActionType.TABLEAU_TO_FOUNDATION: ("from_column",),
    ActionType.FOUNDATION_TO_TABLEAU: ("suit", "to_column"),
    ActionType.TABLEAU_TO_TABLEAU: ("from_column", "from_card_index", "to_column"),
}


class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult; on failure the state is unchanged.
        """
        validation_error = self._validate_action(state, action)
        if validation_error:
            return ActionResult.failure(validation_error, error_code=INVALID_ACTION)

        handler = self._get_handler(action.action_type)
        if not handler:
            return ActionResult.failure(
                f"No handler for action type: {action.action_type}",
                error_code=NO_HANDLER,
            )

        if not handler(state, action):
            return ActionResult.failure(
                f"Illegal move: {action.describe()}",
                error_code=ILLEGAL_MOVE,
            )

        return ActionResult.success_with_state(
            state,
            changes=[action.describe()],
            is_won=check_win(state),
        )

    def _validate_action(self, state: GameState, action: Action) -> str | None:
        """
        Validate that the payload is complete and indices are in range.

        Returns error message if invalid, None if valid.
        """
        required = _REQUIRED_FIELDS.get(action.action_type, ())
        payload = action.payload

        for name in required:
            if getattr(payload, name) is None:
                return f"{action.action_type.value} requires {name}"

        for name in ("from_column", "to_column"):
            if name in required:
                index = getattr(payload, name)
                if not 0 <= index < TABLEAU_SIZE:
                    return f"{name} {index} out of range"

        if "from_card_index" in required:
            column = state.tableau[payload.from_column]
            if not 0 <= payload.from_card_index < len(column):
                return (
                    f"from_card_index {payload.from_card_index} out of range "
                    f"for column {payload.from_column}"
                )

        return None

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.DRAW: self._handle_draw,
            ActionType.WASTE_TO_FOUNDATION: self._handle_waste_to_foundation,
            ActionType.WASTE_TO_TABLEAU: self._handle_waste_to_tableau,
            ActionType.TABLEAU_TO_FOUNDATION: self._handle_tableau_to_foundation,
            ActionType.FOUNDATION_TO_TABLEAU: self._handle_foundation_to_tableau,
            ActionType.TABLEAU_TO_TABLEAU: self._handle_tableau_to_tableau,
        }
        return handlers.get(action_type)

    def _handle_draw(self, state: GameState, action: Action) -> bool:
        # Drawing never fails, but recycling an empty stock and waste is a no-op
        if not state.stock and not state.waste:
            return False
        draw_from_stock(state)
        return True

    def _handle_waste_to_foundation(self, state: GameState, action: Action) -> bool:
        return move_waste_to_foundation(state)

    def _handle_waste_to_tableau(self, state: GameState, action: Action) -> bool:
        return move_waste_to_tableau(state, action.payload.to_column)

    def _handle_tableau_to_foundation(self, state: GameState, action: Action) -> bool:
        return move_tableau_to_foundation(state, action.payload.from_column)

    def _handle_foundation_to_tableau(self, state: GameState, action: Action) -> bool:
        p = action.payload
        return move_foundation_to_tableau(state, p.suit, p.to_column)

    def _handle_tableau_to_tableau(self, state: GameState, action: Action) -> bool:
        p = action.payload
        return move_card_to_tableau(state, p.from_column, p.from_card_index, p.to_column)


def apply_action(state: GameState, action: Action) -> ActionResult:
    """Convenience function to apply an action."""
    return Reducer().apply(state, action)
