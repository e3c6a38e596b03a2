"""
Game State - The single mutable aggregate the engine operates on.

Design principles:
- Owned by the caller, passed by reference into every engine operation
- Mutators change it in place; callers re-read the same object
- Every card of the 52-card universe lives in exactly one zone
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterator
from copy import deepcopy
from enum import Enum


class Color(Enum):
    """Card colors. Tableau stacking must alternate them."""
    RED = "red"
    BLACK = "black"


class Suit(Enum):
    """The four suits, in foundation order."""
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    @property
    def color(self) -> Color:
        if self in (Suit.HEARTS, Suit.DIAMONDS):
            return Color.RED
        return Color.BLACK

    @property
    def foundation_index(self) -> int:
        """Index of this suit's pile in GameState.foundation."""
        return SUITS.index(self)


SUITS: tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)

ACE = 1
KING = 13
RANKS: tuple[int, ...] = tuple(range(ACE, KING + 1))

TABLEAU_SIZE = 7
FOUNDATION_COUNT = len(SUITS)
DECK_SIZE = len(SUITS) * len(RANKS)


@dataclass
class Card:
    """
    A playing card.

    Identity (suit, rank, id) never changes; orientation does.
    The id is the card's index in the ordered 52-card universe.
    """
    suit: Suit
    rank: int
    card_id: int
    face_up: bool = False

    @property
    def color(self) -> Color:
        return self.suit.color

    def __hash__(self):
        return hash(self.card_id)

    def __eq__(self, other):
        if not isinstance(other, Card):
            return False
        return self.card_id == other.card_id

    def __repr__(self):
        face = "up" if self.face_up else "down"
        return f"Card({self.suit.value} {self.rank}, {face})"


@dataclass
class GameState:
    """
    Complete Klondike state at a point in time.

    Top of every pile is the end of its list.
    """
    stock: list[Card] = field(default_factory=list)
    waste: list[Card] = field(default_factory=list)
    tableau: list[list[Card]] = field(
        default_factory=lambda: [[] for _ in range(TABLEAU_SIZE)]
    )
    foundation: list[list[Card]] = field(
        default_factory=lambda: [[] for _ in range(FOUNDATION_COUNT)]
    )

    # Seed the deal was shuffled with, if any
    random_seed: int | None = None

    # Metadata
    metadata: dict[str, Any] = field(default_factory=dict)

    def foundation_for(self, suit: Suit) -> list[Card]:
        """Get the foundation pile that builds the given suit."""
        return self.foundation[suit.foundation_index]

    def all_cards(self) -> Iterator[Card]:
        """Iterate every card in every zone."""
        yield from self.stock
        yield from self.waste
        for column in self.tableau:
            yield from column
        for pile in self.foundation:
            yield from pile

    @property
    def card_count(self) -> int:
        return sum(1 for _ in self.all_cards())

    def snapshot(self) -> tuple:
        """
        Hashable picture of card placement and orientation.

        Two states with equal snapshots are indistinguishable to the rules.
        """
        def pile(cards: list[Card]) -> tuple:
            return tuple((c.card_id, c.face_up) for c in cards)

        return (
            pile(self.stock),
            pile(self.waste),
            tuple(pile(col) for col in self.tableau),
            tuple(pile(p) for p in self.foundation),
        )

    def clone(self) -> GameState:
        """Deep copy the state."""
        return deepcopy(self)
