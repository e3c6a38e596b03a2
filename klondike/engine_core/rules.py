"""
Rule Predicates - Pure checks deciding whether a move is legal.

None of these mutate their arguments.
"""

from __future__ import annotations

from .state import Card, ACE, KING


def can_move_card_to_tableau(from_card: Card, to_card: Card) -> bool:
    """Alternating color, descending by exactly one."""
    return from_card.color != to_card.color and from_card.rank == to_card.rank - 1


def can_move_card_to_foundation(card: Card, foundation_pile: list[Card]) -> bool:
    """Aces start a pile; otherwise same suit, ascending by exactly one."""
    if not foundation_pile:
        return card.rank == ACE

    top = foundation_pile[-1]
    return top.suit == card.suit and card.rank == top.rank + 1


def can_place_on_column(card: Card, column: list[Card]) -> bool:
    """
    Check a card against a tableau column's current top.

    Only a King may go on an empty column.
    """
    if not column:
        return card.rank == KING
    return can_move_card_to_tableau(card, column[-1])
