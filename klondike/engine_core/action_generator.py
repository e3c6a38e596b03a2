"""
Action Generator - Enumerates legal moves from a game state.

The action generator is used by:
1. The demo loop to pick moves
2. UI to show available moves
3. Stuck-game detection (has_legal_move)

It sits outside the mutator contract: it only consults the rule
predicates and never mutates the state it is given.
"""

from __future__ import annotations

from .state import GameState, Card, SUITS
from .action import Action, ActionType
from .rules import can_move_card_to_foundation, can_place_on_column


def legal_actions(
    state: GameState,
    include_draw: bool = True,
    include_reverse: bool = True,
) -> list[Action]:
    """
    Generate every move that the mutators would accept right now.

    Args:
        include_draw: Include drawing from stock (always legal while
            stock or waste holds cards)
        include_reverse: Include foundation -> tableau moves
    """
    actions = []

    if include_draw and (state.stock or state.waste):
        actions.append(Action.draw())

    actions.extend(_waste_actions(state))
    actions.extend(_tableau_to_foundation_actions(state))
    actions.extend(_tableau_to_tableau_actions(state))

    if include_reverse:
        actions.extend(_foundation_to_tableau_actions(state))

    return actions


def has_legal_move(state: GameState, include_reverse: bool = False) -> bool:
    """
    Check whether the game can still progress.

    Drawing alone does not count. A stock or waste card counts if it
    could be played once cycled to the top of the waste.
    Foundation -> tableau moves are ignored unless include_reverse is
    set, since shuttling a card back and forth is always possible.
    A tableau -> tableau move only counts when it changes what can be
    reached:

    - it turns over a face-down card
    - it empties a column that a King can then fill
    - it uncovers a card the foundation accepts
    """
    for action in legal_actions(state, include_draw=False, include_reverse=include_reverse):
        if action.action_type != ActionType.TABLEAU_TO_TABLEAU or _makes_progress(state, action):
            return True

    return any(_is_playable_from_waste(state, card) for card in state.stock + state.waste)


def _makes_progress(state: GameState, action: Action) -> bool:
    payload = action.payload
    column = state.tableau[payload.from_column]
    index = payload.from_card_index

    if index == 0:
        # a King moving between empty columns leaves one empty column behind
        return bool(state.tableau[payload.to_column])

    uncovered = column[index - 1]
    if not uncovered.face_up:
        return True
    return can_move_card_to_foundation(uncovered, state.foundation_for(uncovered.suit))


def _is_playable_from_waste(state: GameState, card: Card) -> bool:
    if can_move_card_to_foundation(card, state.foundation_for(card.suit)):
        return True
    return any(can_place_on_column(card, column) for column in state.tableau)


def _waste_actions(state: GameState) -> list[Action]:
    if not state.waste:
        return []

    card = state.waste[-1]
    actions = []
    if can_move_card_to_foundation(card, state.foundation_for(card.suit)):
        actions.append(Action.waste_to_foundation())

    for index, column in enumerate(state.tableau):
        if can_place_on_column(card, column):
            actions.append(Action.waste_to_tableau(index))

    return actions


def _tableau_to_foundation_actions(state: GameState) -> list[Action]:
    actions = []
    for index, column in enumerate(state.tableau):
        if not column or not column[-1].face_up:
            continue
        card = column[-1]
        if can_move_card_to_foundation(card, state.foundation_for(card.suit)):
            actions.append(Action.tableau_to_foundation(index))
    return actions


def _tableau_to_tableau_actions(state: GameState) -> list[Action]:
    actions = []
    for from_index, from_column in enumerate(state.tableau):
        for card_index, card in enumerate(from_column):
            if not card.face_up:
                continue
            for to_index, to_column in enumerate(state.tableau):
                if to_index == from_index:
                    continue
                if can_place_on_column(card, to_column):
                    actions.append(
                        Action.tableau_to_tableau(from_index, card_index, to_index)
                    )
    return actions


def _foundation_to_tableau_actions(state: GameState) -> list[Action]:
    actions = []
    for suit in SUITS:
        pile = state.foundation_for(suit)
        if not pile:
            continue
        for index, column in enumerate(state.tableau):
            if can_place_on_column(pile[-1], column):
                actions.append(Action.foundation_to_tableau(suit, index))
    return actions
