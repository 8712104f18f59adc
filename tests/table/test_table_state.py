"""
Tests for the immutable table state and its views.
"""

from dataclasses import FrozenInstanceError

import pytest

from deckofcards.common.card import Card, Rank, Suit
from deckofcards.table.constants import DRAW_LABEL, EMPTY_DECK_LABEL, RejectReason
from deckofcards.table.state import Outcome, TableState


def test_default_state_has_full_deck():
    state = TableState()
    assert state.deck_count == 52
    assert len(set(state.deck)) == 52
    assert state.hand == ()
    assert state.selection is None


def test_states_get_distinct_ids():
    assert TableState().id != TableState().id


def test_state_is_frozen():
    state = TableState()
    with pytest.raises(FrozenInstanceError):
        state.hand = ()


def test_selection_must_be_in_hand(ace_of_spades, king_of_hearts):
    with pytest.raises(ValueError):
        TableState(hand=(), selection=ace_of_spades)
    with pytest.raises(ValueError):
        TableState(hand=(king_of_hearts,), selection=ace_of_spades)


def test_deck_cannot_hold_duplicates(ace_of_spades):
    with pytest.raises(ValueError):
        TableState(deck=(ace_of_spades, ace_of_spades))


def test_hand_may_hold_duplicates(ace_of_spades):
    state = TableState(hand=(ace_of_spades, ace_of_spades), selection=ace_of_spades)
    assert state.hand_count == 2


def test_adapter_format_fresh_table():
    view = TableState().to_adapter_format()

    assert view["deck_count"] == 52
    assert view["can_draw"] is True
    assert view["draw_label"] == DRAW_LABEL
    assert view["hand"] == []
    assert view["actions"] == {
        "draw": True,
        "deal_5": True,
        "deal_7": True,
        "reset": True,
        "toss": False,
        "wildcard": True,
        "regroup": False,
    }


def test_adapter_format_empty_deck():
    view = TableState(deck=()).to_adapter_format()

    assert view["can_draw"] is False
    assert view["draw_label"] == EMPTY_DECK_LABEL
    assert view["actions"]["draw"] is False


def test_adapter_format_tags_selection(ace_of_spades, king_of_hearts):
    state = TableState(
        hand=(ace_of_spades, king_of_hearts, ace_of_spades), selection=ace_of_spades
    )
    view = state.to_adapter_format()

    assert [entry["selected"] for entry in view["hand"]] == [True, False, True]
    assert view["hand"][0] == {"card": "A♠", "suit": "♠", "rank": "A", "selected": True}
    assert view["actions"]["toss"] is True
    assert view["actions"]["regroup"] is True


def test_to_dict(king_of_hearts):
    state = TableState(deck=(Card(Suit.CLUBS, Rank.TWO),), hand=(king_of_hearts,))
    data = state.to_dict()

    assert data["deck"] == ["2♣"]
    assert data["hand"] == ["K♥"]
    assert data["selection"] is None
    assert data["id"] == state.id


def test_outcome_str():
    assert str(Outcome.accepted("draw")) == "draw: applied"
    assert (
        str(Outcome.rejected("toss", RejectReason.NO_SELECTION))
        == "toss: rejected (no_selection)"
    )
