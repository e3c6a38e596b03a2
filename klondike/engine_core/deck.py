"""
Deck Factory - Builds and shuffles the 52-card universe.
"""

from __future__ import annotations
import random

from .state import Card, SUITS, RANKS


def generate_deck() -> list[Card]:
    """
    Build the ordered 52-card deck.

    One card per (suit, rank), all face-down. Card ids are the
    position in this ordering, so they are stable across games.
    """
    deck = []
    for suit in SUITS:
        for rank in RANKS:
            deck.append(Card(suit=suit, rank=rank, card_id=len(deck)))
    return deck


def shuffle_deck(deck: list[Card], rng: random.Random | None = None) -> list[Card]:
    """
    Return a uniformly shuffled copy of the deck (Fisher-Yates).

    The input list is left untouched.
    """
    rng = rng or random.Random()
    shuffled = list(deck)

    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return shuffled
