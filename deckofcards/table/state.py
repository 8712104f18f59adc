"""
Immutable state models for the card table.

This module provides dataclasses for representing the deck, the hand on
display and the current selection in an immutable manner. These classes are
designed to be used with pure transition functions that create new state
instances rather than modifying existing ones.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Tuple
import time
import uuid

from deckofcards.common.card import Card
from deckofcards.common.deck import full_deck
from deckofcards.table.constants import (
    DEFAULT_DEAL_SIZES,
    DRAW_LABEL,
    EMPTY_DECK_LABEL,
    RejectReason,
)


@dataclass(frozen=True)
class TableState:
    """
    Immutable representation of the card table.

    Attributes:
        deck: Undrawn cards, each at most once
        hand: Cards on display, in display order (may hold duplicates)
        selection: The picked card, if any; always equal to a card in ``hand``
        id: Unique identifier for this table
        timestamp: Time when this state was created
    """

    deck: Tuple[Card, ...] = field(default_factory=lambda: tuple(full_deck()))
    hand: Tuple[Card, ...] = ()
    selection: Optional[Card] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: float = field(default_factory=lambda: time.time())

    def __post_init__(self):
        if len(set(self.deck)) != len(self.deck):
            raise ValueError("A deck cannot hold the same card twice")
        if self.selection is not None and self.selection not in self.hand:
            raise ValueError(f"Selection {self.selection} is not in the hand")

    @property
    def deck_count(self) -> int:
        return len(self.deck)

    @property
    def hand_count(self) -> int:
        return len(self.hand)

    def is_selected(self, card: Card) -> bool:
        """True when ``card`` equals the current selection."""
        return self.selection is not None and card == self.selection

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the table state to a dictionary suitable for serialization.

        Returns:
            Dictionary representation of the table state
        """
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "deck": [str(card) for card in self.deck],
            "hand": [str(card) for card in self.hand],
            "selection": str(self.selection) if self.selection else None,
        }

    def to_adapter_format(
        self, deal_sizes: Iterable[int] = DEFAULT_DEAL_SIZES
    ) -> Dict[str, Any]:
        """
        Convert the table state to a format suitable for platform adapters.

        Args:
            deal_sizes: Sizes offered as deal buttons

        Returns:
            Dictionary in adapter-friendly format
        """
        can_draw = self.deck_count > 0

        actions = {"draw": can_draw}
        for size in deal_sizes:
            actions[f"deal_{size}"] = True
        actions["reset"] = True
        actions["toss"] = self.selection is not None
        actions["wildcard"] = True
        actions["regroup"] = self.hand_count > 0

        return {
            "deck_count": self.deck_count,
            "can_draw": can_draw,
            "draw_label": DRAW_LABEL if can_draw else EMPTY_DECK_LABEL,
            "actions": actions,
            "hand": [
                {
                    "card": str(card),
                    "suit": str(card.suit),
                    "rank": card.rank.rank_str,
                    "selected": self.is_selected(card),
                }
                for card in self.hand
            ],
        }


@dataclass(frozen=True)
class Outcome:
    """
    Result of the last table operation.

    Attributes:
        operation: Name of the operation that ran
        applied: Whether the operation changed the table
        reason: Why the operation was rejected, if it was
    """

    operation: str
    applied: bool = True
    reason: Optional[RejectReason] = None

    @classmethod
    def accepted(cls, operation: str) -> "Outcome":
        return cls(operation=operation)

    @classmethod
    def rejected(cls, operation: str, reason: RejectReason) -> "Outcome":
        return cls(operation=operation, applied=False, reason=reason)

    def __str__(self) -> str:
        if self.applied:
            return f"{self.operation}: applied"
        return f"{self.operation}: rejected ({self.reason.value})"
