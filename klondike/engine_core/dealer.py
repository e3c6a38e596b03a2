"""
Dealer - Creates the initial Klondike layout.

This module handles:
- Shuffling a fresh deck, seeded for determinism when asked
- Dealing columns of 1..7 cards with only the last card face-up
- Leaving the remaining 24 cards face-down in the stock
"""

from __future__ import annotations
import random

from .state import GameState, Card, TABLEAU_SIZE
from .deck import generate_deck, shuffle_deck


def deal_new_game(random_seed: int | None = None) -> GameState:
    """
    Deal a new game.

    Args:
        random_seed: Seed for deterministic shuffling

    Returns:
        Fresh GameState; every call builds new Card objects, so
        games never share cards.
    """
    rng = random.Random(random_seed)
    deck = shuffle_deck(generate_deck(), rng)

    tableau = []
    for i in range(TABLEAU_SIZE):
        column, deck = deck[:i + 1], deck[i + 1:]
        tableau.append(_orient_column(column))

    for card in deck:
        card.face_up = False

    return GameState(
        stock=deck,
        waste=[],
        tableau=tableau,
        random_seed=random_seed,
    )


def _orient_column(column: list[Card]) -> list[Card]:
    """Turn the last card face-up and every other card face-down."""
    for index, card in enumerate(column):
        card.face_up = index == len(column) - 1
    return column
