"""
Engine Core - Klondike game state and move validation.

The engine is the runtime that:
1. Builds and shuffles the deck
2. Deals the initial layout
3. Checks moves against the rule predicates
4. Applies moves to the caller's GameState in place
5. Reports when the game is won
"""

from .state import GameState, Card, Suit, Color, SUITS, RANKS
from .deck import generate_deck, shuffle_deck
from .dealer import deal_new_game
from .rules import can_move_card_to_tableau, can_move_card_to_foundation, can_place_on_column
from .moves import (
    move_card_to_tableau,
    draw_from_stock,
    move_waste_to_foundation,
    move_waste_to_tableau,
    move_tableau_to_foundation,
    move_foundation_to_tableau,
    check_win,
)
from .action import Action, ActionType, ActionPayload, ActionResult
from .reducer import Reducer, apply_action
from .action_generator import legal_actions, has_legal_move

__all__ = [
    "GameState",
    "Card",
    "Suit",
    "Color",
    "SUITS",
    "RANKS",
    "generate_deck",
    "shuffle_deck",
    "deal_new_game",
    "can_move_card_to_tableau",
    "can_move_card_to_foundation",
    "can_place_on_column",
    "move_card_to_tableau",
    "draw_from_stock",
    "move_waste_to_foundation",
    "move_waste_to_tableau",
    "move_tableau_to_foundation",
    "move_foundation_to_tableau",
    "check_win",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "Reducer",
    "apply_action",
    "legal_actions",
    "has_legal_move",
]
