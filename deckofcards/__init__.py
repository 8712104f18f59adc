"""
A 52-card table: draw and deal from a deck, pick, swap and toss cards in the
hand, add wildcards and regroup the hand.
"""

from deckofcards.common.card import Card, Rank, Suit
from deckofcards.config import TableConfig
from deckofcards.table import Intent, Outcome, PickPolicy, RejectReason, TableState
from deckofcards.table.machine import HandStateMachine

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "TableConfig",
    "Intent",
    "Outcome",
    "PickPolicy",
    "RejectReason",
    "TableState",
    "HandStateMachine",
]
