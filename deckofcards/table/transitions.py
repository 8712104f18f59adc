"""
State transition functions for the card table.

This module provides pure functions for transitioning between table states,
without modifying the original state objects. An operation that cannot apply
returns the original state object unchanged and announces the rejection on
the event bus.
"""

from typing import Any, Optional, Tuple
from dataclasses import replace
import logging
import random
import time

from deckofcards.common.card import RANKS, SUITS, Card
from deckofcards.common.deck import Deck, full_deck
from deckofcards.events import EventBus, TableEventType
from deckofcards.table.constants import RejectReason
from deckofcards.table.state import TableState

logger = logging.getLogger(__name__)

OPERATIONS = (
    "draw",
    "deal",
    "reset",
    "pick",
    "pick_or_swap",
    "toss",
    "add_wildcard",
    "regroup",
)
RANDOMIZED_OPERATIONS = ("draw", "deal", "add_wildcard", "regroup")


class StateTransitionEngine:
    """
    Pure functions for state transitions on the card table.

    This class contains static methods that implement table state transitions.
    Each method takes a state and returns a new state, without modifying the
    original. Methods that need randomness take a ``random.Random`` so a
    seeded source gives reproducible results.
    """

    @staticmethod
    def validate(state: TableState, operation: str, *args: Any) -> Optional[RejectReason]:
        """
        Check whether an operation would change the table.

        Args:
            state: Current table state
            operation: Name of the operation (``draw``, ``deal``, ``pick`` ...)
            args: The operation's arguments

        Returns:
            The reason the operation would be a no-op, or None if it applies
        """
        if operation == "draw":
            if not state.deck:
                return RejectReason.EMPTY_DECK
        elif operation == "deal":
            num_cards = args[0]
            if isinstance(num_cards, bool) or not isinstance(num_cards, int) or num_cards < 0:
                return RejectReason.INVALID_COUNT
            if len(state.deck) < num_cards:
                return RejectReason.INSUFFICIENT_CARDS
        elif operation in ("pick", "pick_or_swap"):
            if args[0] not in state.hand:
                return RejectReason.CARD_NOT_IN_HAND
        elif operation == "toss":
            if state.selection is None:
                return RejectReason.NO_SELECTION
        elif operation == "regroup":
            if not state.hand:
                return RejectReason.EMPTY_HAND
        return None

    @staticmethod
    def reject(state: TableState, operation: str, reason: RejectReason) -> TableState:
        logger.debug("%s rejected: %s", operation, reason.value)
        EventBus.get_instance().emit(
            TableEventType.ACTION_REJECTED,
            {
                "table_id": state.id,
                "operation": operation,
                "reason": reason.value,
                "timestamp": time.time(),
            },
        )
        return state

    @staticmethod
    def _emit(event_type: TableEventType, state: TableState, **data: Any) -> None:
        payload = {
            "table_id": state.id,
            "deck_count": state.deck_count,
            "hand_count": state.hand_count,
            "timestamp": state.timestamp,
        }
        payload.update(data)
        EventBus.get_instance().emit(event_type, payload)

    @staticmethod
    def apply(
        state: TableState,
        operation: str,
        *args: Any,
        rng: Optional[random.Random] = None,
    ) -> Tuple[TableState, Optional[RejectReason]]:
        """
        Validate an operation once and run it if it applies.

        Args:
            state: Current table state
            operation: One of ``OPERATIONS``
            args: The operation's arguments
            rng: Random source, for the operations that need one

        Returns:
            The resulting state and the rejection reason, or None if the
            operation was applied

        Raises:
            ValueError: If ``operation`` is not a table operation
        """
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation: {operation!r}")

        reason = StateTransitionEngine.validate(state, operation, *args)
        if reason:
            return StateTransitionEngine.reject(state, operation, reason), reason

        transition = getattr(StateTransitionEngine, f"_{operation}")
        if operation in RANDOMIZED_OPERATIONS:
            args = args + (rng,)
        return transition(state, *args), None

    @staticmethod
    def draw(state: TableState, rng: random.Random) -> TableState:
        return StateTransitionEngine.apply(state, "draw", rng=rng)[0]

    @staticmethod
    def deal(state: TableState, num_cards: int, rng: random.Random) -> TableState:
        return StateTransitionEngine.apply(state, "deal", num_cards, rng=rng)[0]

    @staticmethod
    def reset(state: TableState) -> TableState:
        return StateTransitionEngine.apply(state, "reset")[0]

    @staticmethod
    def pick(state: TableState, card: Card) -> TableState:
        return StateTransitionEngine.apply(state, "pick", card)[0]

    @staticmethod
    def pick_or_swap(state: TableState, card: Card) -> TableState:
        return StateTransitionEngine.apply(state, "pick_or_swap", card)[0]

    @staticmethod
    def toss(state: TableState) -> TableState:
        return StateTransitionEngine.apply(state, "toss")[0]

    @staticmethod
    def add_wildcard(state: TableState, rng: random.Random) -> TableState:
        return StateTransitionEngine.apply(state, "add_wildcard", rng=rng)[0]

    @staticmethod
    def regroup(state: TableState, rng: random.Random) -> TableState:
        return StateTransitionEngine.apply(state, "regroup", rng=rng)[0]

    @staticmethod
    def _draw(state: TableState, rng: random.Random) -> TableState:
        """
        Move one random card from the deck to the end of the hand.

        Args:
            state: Current table state
            rng: Random source

        Returns:
            New table state with the card drawn and the selection cleared
        """
        deck = Deck(state.deck, rng=rng)
        card = deck.draw_random()

        new_state = replace(
            state,
            deck=tuple(deck.cards),
            hand=state.hand + (card,),
            selection=None,
            timestamp=time.time(),
        )

        logger.debug("drew %s, %d left in deck", card, new_state.deck_count)
        StateTransitionEngine._emit(TableEventType.CARD_DRAWN, new_state, card=str(card))

        return new_state

    @staticmethod
    def _deal(state: TableState, num_cards: int, rng: random.Random) -> TableState:
        """
        Replace the hand with ``num_cards`` distinct random cards from the deck.

        The previous hand is discarded, not returned to the deck.

        Args:
            state: Current table state
            num_cards: Number of cards to deal
            rng: Random source

        Returns:
            New table state with the new hand and the selection cleared
        """
        deck = Deck(state.deck, rng=rng)
        dealt = deck.deal_random(num_cards)

        new_state = replace(
            state,
            deck=tuple(deck.cards),
            hand=tuple(dealt),
            selection=None,
            timestamp=time.time(),
        )

        logger.debug("dealt %d cards, %d left in deck", num_cards, new_state.deck_count)
        StateTransitionEngine._emit(
            TableEventType.CARDS_DEALT,
            new_state,
            cards=[str(card) for card in dealt],
            discarded=[str(card) for card in state.hand],
        )

        return new_state

    @staticmethod
    def _reset(state: TableState) -> TableState:
        """
        Restore a full deck and clear the hand and the selection.

        Args:
            state: Current table state

        Returns:
            New table state with a full deck
        """
        new_state = replace(
            state,
            deck=tuple(full_deck()),
            hand=(),
            selection=None,
            timestamp=time.time(),
        )

        logger.debug("table reset")
        StateTransitionEngine._emit(TableEventType.TABLE_RESET, new_state)

        return new_state

    @staticmethod
    def _pick(state: TableState, card: Card) -> TableState:
        """
        Select a card in the hand, or clear the selection if it is already selected.

        Picking a different card moves the selection; it never swaps.

        Args:
            state: Current table state
            card: Card to pick, matched by value

        Returns:
            New table state with the updated selection
        """
        if state.is_selected(card):
            new_state = replace(state, selection=None, timestamp=time.time())
            StateTransitionEngine._emit(
                TableEventType.SELECTION_CLEARED, new_state, card=str(card)
            )
            return new_state

        new_state = replace(state, selection=card, timestamp=time.time())
        StateTransitionEngine._emit(TableEventType.CARD_PICKED, new_state, card=str(card))

        return new_state

    @staticmethod
    def _pick_or_swap(state: TableState, card: Card) -> TableState:
        """
        Select a card, or swap it with the card already selected.

        With nothing selected the card becomes the selection; picking the
        selected card again clears it. Otherwise the first card in the hand
        equal to the selection and the first card equal to ``card`` exchange
        positions and the selection is cleared.

        Args:
            state: Current table state
            card: Card that was clicked, matched by value

        Returns:
            New table state
        """
        if state.selection is None or state.is_selected(card):
            return StateTransitionEngine._pick(state, card)

        selected = state.selection
        hand = list(state.hand)
        selected_index = hand.index(selected)
        card_index = hand.index(card)
        hand[selected_index], hand[card_index] = hand[card_index], hand[selected_index]

        new_state = replace(
            state, hand=tuple(hand), selection=None, timestamp=time.time()
        )

        logger.debug("swapped %s and %s", selected, card)
        StateTransitionEngine._emit(
            TableEventType.CARDS_SWAPPED,
            new_state,
            cards=[str(selected), str(card)],
            positions=[selected_index, card_index],
        )

        return new_state

    @staticmethod
    def _toss(state: TableState) -> TableState:
        """
        Permanently discard one copy of the selected card from the hand.

        Args:
            state: Current table state

        Returns:
            New table state without the selected card and with no selection
        """
        tossed = state.selection
        hand = list(state.hand)
        hand.remove(tossed)

        new_state = replace(state, hand=tuple(hand), selection=None, timestamp=time.time())

        logger.debug("tossed %s", tossed)
        StateTransitionEngine._emit(TableEventType.CARD_TOSSED, new_state, card=str(tossed))

        return new_state

    @staticmethod
    def _add_wildcard(state: TableState, rng: random.Random) -> TableState:
        """
        Append a card of random suit and rank to the hand.

        The wildcard bypasses the deck, so it may duplicate a card already in
        the deck or the hand.

        Args:
            state: Current table state
            rng: Random source

        Returns:
            New table state with the wildcard at the end of the hand
        """
        wildcard = Card(rng.choice(SUITS), rng.choice(RANKS))

        new_state = replace(state, hand=state.hand + (wildcard,), timestamp=time.time())

        logger.debug("added wildcard %s", wildcard)
        StateTransitionEngine._emit(
            TableEventType.WILDCARD_ADDED, new_state, card=str(wildcard)
        )

        return new_state

    @staticmethod
    def _regroup(state: TableState, rng: random.Random) -> TableState:
        """
        Randomly reorder the hand.

        The deck and the selection are untouched.

        Args:
            state: Current table state
            rng: Random source

        Returns:
            New table state with the hand shuffled
        """
        hand = list(state.hand)
        rng.shuffle(hand)

        new_state = replace(state, hand=tuple(hand), timestamp=time.time())

        StateTransitionEngine._emit(
            TableEventType.HAND_REGROUPED,
            new_state,
            hand=[str(card) for card in hand],
        )

        return new_state
