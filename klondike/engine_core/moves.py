"""
State Mutators - Apply validated moves to the game state in place.

Each mutator checks its rule predicate first. A rejected move returns
False and leaves the state untouched; nothing is raised for ordinary
rule violations. Out-of-range indices are caller bugs and raise IndexError.
"""

from __future__ import annotations

from .state import GameState, Card, Suit, RANKS
from .rules import can_move_card_to_foundation, can_place_on_column


def _column(state: GameState, index: int) -> list[Card]:
    """Get a tableau column, rejecting negative indices too."""
    if not 0 <= index < len(state.tableau):
        raise IndexError(f"tableau column {index} out of range")
    return state.tableau[index]


def _reveal_top(column: list[Card]) -> None:
    if column and not column[-1].face_up:
        column[-1].face_up = True


def move_card_to_tableau(
    state: GameState,
    from_pile_index: int,
    from_card_index: int,
    to_pile_index: int,
) -> bool:
    """
    Move the run starting at from_card_index onto another column.

    The whole run moves as one block; only its lead card is checked
    against the destination. The new top of the source is revealed.
    """
    from_pile = _column(state, from_pile_index)
    to_pile = _column(state, to_pile_index)
    if not 0 <= from_card_index < len(from_pile):
        raise IndexError(
            f"card {from_card_index} out of range for column {from_pile_index}"
        )

    if from_pile_index == to_pile_index:
        return False

    lead = from_pile[from_card_index]
    if not lead.face_up or not can_place_on_column(lead, to_pile):
        return False

    moving = from_pile[from_card_index:]
    del from_pile[from_card_index:]
    _reveal_top(from_pile)
    to_pile.extend(moving)
    return True


def draw_from_stock(state: GameState) -> None:
    """
    Turn the top stock card onto the waste.

    With an empty stock, the waste goes back to the stock in its
    current order, face-down. Both empty: nothing happens.
    """
    if not state.stock:
        for card in state.waste:
            card.face_up = False
        state.stock = state.waste
        state.waste = []
        return

    card = state.stock.pop()
    card.face_up = True
    state.waste.append(card)


def move_waste_to_foundation(state: GameState) -> bool:
    """Move the top waste card onto its suit's foundation."""
    if not state.waste:
        return False

    card = state.waste[-1]
    pile = state.foundation_for(card.suit)
    if not can_move_card_to_foundation(card, pile):
        return False

    state.waste.pop()
    pile.append(card)
    return True


def move_waste_to_tableau(state: GameState, to_pile_index: int) -> bool:
    """Move the top waste card onto a tableau column."""
    to_pile = _column(state, to_pile_index)
    if not state.waste:
        return False

    card = state.waste[-1]
    if not can_place_on_column(card, to_pile):
        return False

    state.waste.pop()
    to_pile.append(card)
    return True


def move_tableau_to_foundation(state: GameState, from_pile_index: int) -> bool:
    """Move a column's face-up top card to its foundation, revealing the next."""
    from_pile = _column(state, from_pile_index)
    if not from_pile:
        return False

    card = from_pile[-1]
    if not card.face_up:
        return False

    pile = state.foundation_for(card.suit)
    if not can_move_card_to_foundation(card, pile):
        return False

    from_pile.pop()
    pile.append(card)
    _reveal_top(from_pile)
    return True


def move_foundation_to_tableau(
    state: GameState,
    suit: Suit | str,
    to_pile_index: int,
) -> bool:
    """
    Move a foundation's top card back onto a tableau column.

    A legal reversible move, not an undo.
    Raises ValueError for an unknown suit name.
    """
    pile = state.foundation_for(Suit(suit))
    to_pile = _column(state, to_pile_index)
    if not pile:
        return False

    card = pile[-1]
    if not can_place_on_column(card, to_pile):
        return False

    pile.pop()
    to_pile.append(card)
    return True


def check_win(state: GameState) -> bool:
    """All four foundations complete."""
    return all(len(pile) == len(RANKS) for pile in state.foundation)
