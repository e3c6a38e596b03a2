"""
Tests for deck construction and shuffling.
"""

import random

from ..engine_core.state import Suit, Color, SUITS, RANKS
from ..engine_core.deck import generate_deck, shuffle_deck


class TestGenerateDeck:
    """Tests for generate_deck."""

    def test_one_card_per_suit_and_rank(self):
        """The deck holds each (suit, rank) exactly once."""
        deck = generate_deck()

        assert len(deck) == 52
        pairs = [(c.suit, c.rank) for c in deck]
        assert len(set(pairs)) == 52
        assert set(pairs) == {(s, r) for s in SUITS for r in RANKS}

    def test_all_face_down(self):
        """A new deck is entirely face-down."""
        assert not any(c.face_up for c in generate_deck())

    def test_ids_are_distinct_and_stable(self):
        """Ids are the position in the ordered deck, same every time."""
        first = [c.card_id for c in generate_deck()]
        second = [c.card_id for c in generate_deck()]

        assert first == list(range(52))
        assert first == second

    def test_color_follows_suit(self):
        """Hearts and diamonds are red, clubs and spades black."""
        for card in generate_deck():
            if card.suit in (Suit.HEARTS, Suit.DIAMONDS):
                assert card.color == Color.RED
            else:
                assert card.color == Color.BLACK


class TestShuffleDeck:
    """Tests for shuffle_deck."""

    def test_returns_permutation(self):
        """Shuffling keeps exactly the same cards."""
        deck = generate_deck()
        shuffled = shuffle_deck(deck, random.Random(1))

        assert len(shuffled) == 52
        assert sorted(c.card_id for c in shuffled) == list(range(52))

    def test_does_not_mutate_input(self):
        """The input deck keeps its order."""
        deck = generate_deck()
        before = [c.card_id for c in deck]

        shuffled = shuffle_deck(deck, random.Random(1))

        assert [c.card_id for c in deck] == before
        assert shuffled is not deck

    def test_seeded_shuffle_is_reproducible(self):
        """Same seed, same order."""
        a = shuffle_deck(generate_deck(), random.Random(99))
        b = shuffle_deck(generate_deck(), random.Random(99))

        assert [c.card_id for c in a] == [c.card_id for c in b]

    def test_shuffle_changes_order(self):
        """A shuffle almost surely moves cards."""
        deck = generate_deck()
        shuffled = shuffle_deck(deck, random.Random(5))

        assert [c.card_id for c in shuffled] != [c.card_id for c in deck]

    def test_every_position_reachable(self):
        """Over many shuffles the first card takes many different values."""
        rng = random.Random(0)
        deck = generate_deck()
        firsts = {shuffle_deck(deck, rng)[0].card_id for _ in range(500)}

        assert len(firsts) > 40

    def test_empty_and_single(self):
        """Degenerate decks shuffle to themselves."""
        assert shuffle_deck([]) == []
        card = generate_deck()[0]
        assert shuffle_deck([card]) == [card]
