"""
Immutable state management for the card table.

This package provides the table state, the pure transition functions that
move cards between the deck and the hand, and the table's enumerations.
The ``HandStateMachine`` that drives them lives in ``deckofcards.table.machine``.
"""

from deckofcards.table.constants import Intent, PickPolicy, RejectReason
from deckofcards.table.state import Outcome, TableState
from deckofcards.table.transitions import StateTransitionEngine

__all__ = [
    "Intent",
    "PickPolicy",
    "RejectReason",
    "Outcome",
    "TableState",
    "StateTransitionEngine",
]
