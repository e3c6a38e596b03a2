"""
Pytest fixtures for Klondike tests.
"""

import logging

import pytest

from ..engine_core.state import GameState, Card, Suit, SUITS, RANKS
from ..engine_core.deck import generate_deck
from ..engine_core.dealer import deal_new_game


def make_card(suit: Suit, rank: int, face_up: bool = True) -> Card:
    """Build a card with the same id generate_deck would give it."""
    return Card(
        suit=suit,
        rank=rank,
        card_id=SUITS.index(suit) * len(RANKS) + rank - 1,
        face_up=face_up,
    )


def foundation_up_to(suit: Suit, rank: int) -> list[Card]:
    """A foundation pile holding Ace..rank of a suit."""
    return [make_card(suit, r) for r in range(1, rank + 1)]


@pytest.fixture
def empty_state() -> GameState:
    """A state with every zone empty."""
    return GameState()


@pytest.fixture
def dealt_state() -> GameState:
    """A seeded deal."""
    return deal_new_game(random_seed=42)


@pytest.fixture
def won_state() -> GameState:
    """All 52 cards on the foundations."""
    deck = generate_deck()
    state = GameState()
    for card in deck:
        card.face_up = True
        state.foundation_for(card.suit).append(card)
    return state


def assert_invariants(state: GameState):
    """Check the invariants every reachable state must hold."""
    cards = list(state.all_cards())
    assert len(cards) == 52
    assert len({c.card_id for c in cards}) == 52
    assert {(c.suit, c.rank) for c in cards} == {(s, r) for s in SUITS for r in RANKS}

    for suit in SUITS:
        pile = state.foundation_for(suit)
        assert [c.rank for c in pile] == list(range(1, len(pile) + 1))
        assert all(c.suit == suit for c in pile)

    for column in state.tableau:
        orientations = [c.face_up for c in column]
        # face-down cards only below face-up ones
        assert orientations == sorted(orientations)
        if column:
            assert column[-1].face_up

    assert all(c.face_up for c in state.waste)
    assert not any(c.face_up for c in state.stock)


@pytest.fixture
def root_logging():
    """The root logger, with its handlers and level restored afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
