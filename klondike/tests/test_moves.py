"""
Tests for the state mutators and win checker.

Tests:
- Successful moves mutate the right zones
- Rejected moves return False and leave the state unchanged
- Revealing the new top of a source column
- Stock draw and recycle
"""

import pytest

from ..engine_core.state import GameState, Suit
from ..engine_core.moves import (
    move_card_to_tableau,
    draw_from_stock,
    move_waste_to_foundation,
    move_waste_to_tableau,
    move_tableau_to_foundation,
    move_foundation_to_tableau,
    check_win,
)
from .conftest import make_card, foundation_up_to


class TestDrawFromStock:
    """Tests for draw_from_stock."""

    def test_draw_moves_one_card(self, dealt_state):
        """One card goes from stock to waste, face-up."""
        top = dealt_state.stock[-1]

        draw_from_stock(dealt_state)

        assert len(dealt_state.stock) == 23
        assert len(dealt_state.waste) == 1
        assert dealt_state.waste[-1] is top
        assert top.face_up

    def test_recycle_after_stock_empties(self, dealt_state):
        """Drawing on an empty stock returns the waste, face-down, in order."""
        original = [c.card_id for c in dealt_state.stock]
        for _ in range(24):
            draw_from_stock(dealt_state)
        assert dealt_state.stock == []
        waste_order = [c.card_id for c in dealt_state.waste]

        draw_from_stock(dealt_state)

        assert dealt_state.waste == []
        assert [c.card_id for c in dealt_state.stock] == waste_order
        assert sorted(waste_order) == sorted(original)
        assert not any(c.face_up for c in dealt_state.stock)

    def test_draw_on_empty_game_is_noop(self, empty_state):
        draw_from_stock(empty_state)

        assert empty_state.stock == []
        assert empty_state.waste == []

    def test_returns_none(self, dealt_state):
        assert draw_from_stock(dealt_state) is None


class TestWasteToFoundation:
    """Tests for move_waste_to_foundation."""

    def test_ace_starts_foundation(self, empty_state):
        ace = make_card(Suit.HEARTS, 1)
        empty_state.waste = [make_card(Suit.CLUBS, 5), ace]

        assert move_waste_to_foundation(empty_state)

        assert empty_state.foundation_for(Suit.HEARTS) == [ace]
        assert len(empty_state.waste) == 1

    def test_next_rank_succeeds(self, empty_state):
        empty_state.foundation[Suit.HEARTS.foundation_index] = foundation_up_to(Suit.HEARTS, 1)
        empty_state.waste = [make_card(Suit.HEARTS, 2)]

        assert move_waste_to_foundation(empty_state)
        assert [c.rank for c in empty_state.foundation_for(Suit.HEARTS)] == [1, 2]
        assert empty_state.waste == []

    def test_skipped_rank_fails_unchanged(self, empty_state):
        empty_state.foundation[Suit.HEARTS.foundation_index] = foundation_up_to(Suit.HEARTS, 1)
        empty_state.waste = [make_card(Suit.HEARTS, 3)]
        before = empty_state.snapshot()

        assert not move_waste_to_foundation(empty_state)
        assert empty_state.snapshot() == before

    def test_empty_waste_fails(self, empty_state):
        assert not move_waste_to_foundation(empty_state)

    def test_goes_to_own_suit_pile(self, empty_state):
        """Foundations are per suit, in hearts/diamonds/clubs/spades order."""
        empty_state.waste = [make_card(Suit.SPADES, 1)]

        assert move_waste_to_foundation(empty_state)
        assert len(empty_state.foundation[3]) == 1


class TestWasteToTableau:
    """Tests for move_waste_to_tableau."""

    def test_valid_placement(self, empty_state):
        empty_state.tableau[2] = [make_card(Suit.CLUBS, 9)]
        card = make_card(Suit.DIAMONDS, 8)
        empty_state.waste = [card]

        assert move_waste_to_tableau(empty_state, 2)
        assert empty_state.tableau[2][-1] is card
        assert empty_state.waste == []

    def test_invalid_placement_unchanged(self, empty_state):
        empty_state.tableau[2] = [make_card(Suit.CLUBS, 9)]
        empty_state.waste = [make_card(Suit.SPADES, 8)]
        before = empty_state.snapshot()

        assert not move_waste_to_tableau(empty_state, 2)
        assert empty_state.snapshot() == before

    def test_king_on_empty_column(self, empty_state):
        empty_state.waste = [make_card(Suit.HEARTS, 13)]
        assert move_waste_to_tableau(empty_state, 0)
        assert len(empty_state.tableau[0]) == 1

    def test_non_king_on_empty_column(self, empty_state):
        empty_state.waste = [make_card(Suit.HEARTS, 12)]
        assert not move_waste_to_tableau(empty_state, 0)
        assert len(empty_state.waste) == 1

    def test_empty_waste_fails(self, empty_state):
        assert not move_waste_to_tableau(empty_state, 0)

    def test_bad_column_raises(self, empty_state):
        empty_state.waste = [make_card(Suit.HEARTS, 13)]
        with pytest.raises(IndexError):
            move_waste_to_tableau(empty_state, 7)
        with pytest.raises(IndexError):
            move_waste_to_tableau(empty_state, -1)


class TestTableauToFoundation:
    """Tests for move_tableau_to_foundation."""

    def test_moves_and_reveals(self, empty_state):
        hidden = make_card(Suit.SPADES, 10, face_up=False)
        ace = make_card(Suit.CLUBS, 1)
        empty_state.tableau[4] = [hidden, ace]

        assert move_tableau_to_foundation(empty_state, 4)

        assert empty_state.foundation_for(Suit.CLUBS) == [ace]
        assert empty_state.tableau[4] == [hidden]
        assert hidden.face_up

    def test_empty_column_fails(self, empty_state):
        assert not move_tableau_to_foundation(empty_state, 0)

    def test_face_down_top_fails(self, empty_state):
        empty_state.tableau[0] = [make_card(Suit.CLUBS, 1, face_up=False)]
        assert not move_tableau_to_foundation(empty_state, 0)
        assert empty_state.foundation_for(Suit.CLUBS) == []

    def test_rule_failure_unchanged(self, empty_state):
        empty_state.tableau[0] = [make_card(Suit.CLUBS, 2)]
        before = empty_state.snapshot()

        assert not move_tableau_to_foundation(empty_state, 0)
        assert empty_state.snapshot() == before


class TestFoundationToTableau:
    """Tests for move_foundation_to_tableau."""

    def test_moves_top_back(self, empty_state):
        empty_state.foundation[Suit.HEARTS.foundation_index] = foundation_up_to(Suit.HEARTS, 5)
        empty_state.tableau[1] = [make_card(Suit.SPADES, 6)]

        assert move_foundation_to_tableau(empty_state, Suit.HEARTS, 1)

        assert len(empty_state.foundation_for(Suit.HEARTS)) == 4
        assert empty_state.tableau[1][-1].rank == 5

    def test_accepts_suit_name(self, empty_state):
        empty_state.foundation[Suit.CLUBS.foundation_index] = foundation_up_to(Suit.CLUBS, 13)

        assert move_foundation_to_tableau(empty_state, "clubs", 0)
        assert empty_state.tableau[0][-1].rank == 13

    def test_empty_foundation_fails(self, empty_state):
        assert not move_foundation_to_tableau(empty_state, Suit.HEARTS, 0)

    def test_invalid_target_unchanged(self, empty_state):
        empty_state.foundation[Suit.HEARTS.foundation_index] = foundation_up_to(Suit.HEARTS, 5)
        empty_state.tableau[1] = [make_card(Suit.DIAMONDS, 6)]
        before = empty_state.snapshot()

        assert not move_foundation_to_tableau(empty_state, Suit.HEARTS, 1)
        assert empty_state.snapshot() == before

    def test_unknown_suit_raises(self, empty_state):
        with pytest.raises(ValueError):
            move_foundation_to_tableau(empty_state, "stars", 0)


class TestCardToTableau:
    """Tests for move_card_to_tableau."""

    def test_moves_run_and_reveals(self, empty_state):
        hidden = make_card(Suit.CLUBS, 2, face_up=False)
        run = [make_card(Suit.HEARTS, 8), make_card(Suit.SPADES, 7)]
        empty_state.tableau[0] = [hidden] + run
        empty_state.tableau[3] = [make_card(Suit.CLUBS, 9)]

        assert move_card_to_tableau(empty_state, 0, 1, 3)

        assert empty_state.tableau[0] == [hidden]
        assert hidden.face_up
        assert [c.rank for c in empty_state.tableau[3]] == [9, 8, 7]

    def test_only_lead_card_checked(self, empty_state):
        """The run moves as a block even if it is not itself a sequence."""
        empty_state.tableau[0] = [make_card(Suit.HEARTS, 8), make_card(Suit.HEARTS, 2)]
        empty_state.tableau[1] = [make_card(Suit.CLUBS, 9)]

        assert move_card_to_tableau(empty_state, 0, 0, 1)
        assert len(empty_state.tableau[1]) == 3
        assert empty_state.tableau[0] == []

    def test_king_run_to_empty_column(self, empty_state):
        empty_state.tableau[5] = [make_card(Suit.SPADES, 13), make_card(Suit.HEARTS, 12)]

        assert move_card_to_tableau(empty_state, 5, 0, 6)
        assert empty_state.tableau[5] == []
        assert [c.rank for c in empty_state.tableau[6]] == [13, 12]

    def test_non_king_to_empty_column_fails(self, empty_state):
        empty_state.tableau[5] = [make_card(Suit.SPADES, 12)]
        before = empty_state.snapshot()

        assert not move_card_to_tableau(empty_state, 5, 0, 6)
        assert empty_state.snapshot() == before

    def test_invalid_lead_fails_unchanged(self, empty_state):
        empty_state.tableau[0] = [make_card(Suit.CLUBS, 3, face_up=False), make_card(Suit.HEARTS, 8)]
        empty_state.tableau[1] = [make_card(Suit.DIAMONDS, 9)]
        before = empty_state.snapshot()

        assert not move_card_to_tableau(empty_state, 0, 1, 1)
        assert empty_state.snapshot() == before

    def test_face_down_lead_fails(self, empty_state):
        empty_state.tableau[0] = [make_card(Suit.HEARTS, 8, face_up=False), make_card(Suit.CLUBS, 2)]
        empty_state.tableau[1] = [make_card(Suit.SPADES, 9)]

        assert not move_card_to_tableau(empty_state, 0, 0, 1)
        assert len(empty_state.tableau[0]) == 2

    def test_same_column_fails(self, empty_state):
        empty_state.tableau[0] = [make_card(Suit.SPADES, 13)]
        assert not move_card_to_tableau(empty_state, 0, 0, 0)

    def test_bad_card_index_raises(self, empty_state):
        empty_state.tableau[0] = [make_card(Suit.SPADES, 13)]
        with pytest.raises(IndexError):
            move_card_to_tableau(empty_state, 0, 1, 1)
        with pytest.raises(IndexError):
            move_card_to_tableau(empty_state, 0, -1, 1)

    def test_bad_column_raises(self, empty_state):
        with pytest.raises(IndexError):
            move_card_to_tableau(empty_state, 7, 0, 0)


class TestCheckWin:
    """Tests for check_win."""

    def test_all_foundations_full(self, won_state):
        assert check_win(won_state)

    def test_one_card_elsewhere(self, won_state):
        card = won_state.foundation[2].pop()
        won_state.tableau[0].append(card)

        assert not check_win(won_state)

    def test_fresh_deal_not_won(self, dealt_state):
        assert not check_win(dealt_state)

    def test_does_not_mutate(self, won_state):
        before = won_state.snapshot()
        check_win(won_state)
        assert won_state.snapshot() == before

    def test_empty_state(self):
        assert not check_win(GameState())
