"""
The HandStateMachine: the card table as the presentation layer sees it.

The machine holds the current immutable ``TableState`` together with the
random source and pick policy, and applies one operation at a time through
``StateTransitionEngine``. Each operation returns the resulting state and
records an ``Outcome`` so callers can tell applied operations from no-ops.
"""

from typing import Any, Callable, Dict, Optional
import logging
import random

from deckofcards.common.card import Card
from deckofcards.config import TableConfig
from deckofcards.events import EventBus, TableEventType
from deckofcards.exceptions import UnknownIntentError
from deckofcards.table.constants import Intent, PickPolicy
from deckofcards.table.state import Outcome, TableState
from deckofcards.table.transitions import StateTransitionEngine

logger = logging.getLogger(__name__)


class HandStateMachine:
    """
    Owns the deck, the hand and the selection.

    >>> table = HandStateMachine(TableConfig(seed=1))
    >>> table.deal(5).deck_count
    47
    >>> table.deal(50).deck_count
    47
    >>> str(table.last_outcome)
    'deal: rejected (insufficient_cards)'
    """

    def __init__(
        self,
        config: Optional[TableConfig] = None,
        rng: Optional[random.Random] = None,
        state: Optional[TableState] = None,
    ):
        """
        Initialize the table.

        Args:
            config: Table configuration; defaults to ``TableConfig()``
            rng: Random source; defaults to one seeded from ``config.seed``
            state: Starting state; defaults to a full deck and an empty hand
        """
        self.config = config or TableConfig()
        self.rng = rng or self.config.make_rng()
        self.state = state or TableState()
        self.last_outcome: Optional[Outcome] = None
        self.event_bus = EventBus.get_instance()

        self.event_bus.emit(
            TableEventType.TABLE_CREATED,
            {
                "table_id": self.state.id,
                "pick_policy": self.config.pick_policy.value,
                "seed": self.config.seed,
                "timestamp": self.state.timestamp,
            },
        )

    @property
    def pick_policy(self) -> PickPolicy:
        return self.config.pick_policy

    @property
    def deck(self):
        return self.state.deck

    @property
    def hand(self):
        return self.state.hand

    @property
    def selection(self) -> Optional[Card]:
        return self.state.selection

    def _apply(self, operation: str, *args: Any) -> TableState:
        self.state, reason = StateTransitionEngine.apply(
            self.state, operation, *args, rng=self.rng
        )
        if reason is None:
            self.last_outcome = Outcome.accepted(operation)
        else:
            self.last_outcome = Outcome.rejected(operation, reason)

        self.event_bus.emit(
            TableEventType.UI_UPDATE_NEEDED,
            {
                "table_id": self.state.id,
                "operation": operation,
                "applied": self.last_outcome.applied,
                "view": self.view(),
            },
        )
        return self.state

    def draw(self) -> TableState:
        """Draw one random card from the deck into the hand."""
        return self._apply("draw")

    def deal(self, num_cards: int) -> TableState:
        """Replace the hand with ``num_cards`` random cards from the deck."""
        return self._apply("deal", num_cards)

    def reset(self) -> TableState:
        """Start over with a full deck and an empty hand."""
        return self._apply("reset")

    def pick(self, card: Card) -> TableState:
        """Select ``card``, or clear the selection if ``card`` is selected."""
        return self._apply("pick", card)

    def pick_or_swap(self, card: Card) -> TableState:
        """Select ``card``, or swap it with the selected card."""
        return self._apply("pick_or_swap", card)

    def select(self, card: Card) -> TableState:
        """
        Handle a click on a card in the hand using the configured pick policy.
        """
        if self.pick_policy is PickPolicy.SWAP:
            return self.pick_or_swap(card)
        return self.pick(card)

    def select_at(self, position: int) -> TableState:
        """
        Handle a click on the card at ``position`` (0-based) in the hand.

        A position outside the hand is rejected like any card not in the hand.
        """
        if 0 <= position < len(self.state.hand):
            return self.select(self.state.hand[position])

        operation = "pick_or_swap" if self.pick_policy is PickPolicy.SWAP else "pick"
        return self._apply(operation, None)

    def _select(self, target: Any) -> TableState:
        # The console forwards hand positions, scripts may forward cards
        if isinstance(target, int) and not isinstance(target, bool):
            return self.select_at(target)
        return self.select(target)

    def toss(self) -> TableState:
        """Discard the selected card from the hand."""
        return self._apply("toss")

    def add_wildcard(self) -> TableState:
        """Append a random wildcard to the hand."""
        return self._apply("add_wildcard")

    def regroup(self) -> TableState:
        """Shuffle the cards in the hand."""
        return self._apply("regroup")

    def dispatch(self, intent: Any, *args: Any) -> TableState:
        """
        Forward one presentation intent to the matching operation.

        Args:
            intent: An Intent or its name (``"draw"``, ``"deal"`` ...)
            args: Arguments for the operation (``deal`` takes a count,
                  ``select`` a card)

        Returns:
            The resulting table state

        Raises:
            UnknownIntentError: If the intent is not recognised
        """
        try:
            intent = intent if isinstance(intent, Intent) else Intent(intent)
        except ValueError:
            raise UnknownIntentError(intent) from None

        handlers: Dict[Intent, Callable[..., TableState]] = {
            Intent.DRAW: self.draw,
            Intent.DEAL: self.deal,
            Intent.RESET: self.reset,
            Intent.SELECT: self._select,
            Intent.TOSS: self.toss,
            Intent.WILDCARD: self.add_wildcard,
            Intent.REGROUP: self.regroup,
        }

        logger.debug("dispatching %s%r", intent.value, args)
        return handlers[intent](*args)

    def view(self) -> Dict[str, Any]:
        """The presentation view of the current state."""
        return self.state.to_adapter_format(self.config.deal_sizes)
