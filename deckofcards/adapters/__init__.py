"""
Presentation adapters for the card table.

This package provides adapters that translate between the table and the
platform showing it (console, scripted tests).
"""

from deckofcards.adapters.base import IntentRequest, PlatformAdapter
from deckofcards.adapters.cli import CLIAdapter
from deckofcards.adapters.dummy import DummyAdapter

__all__ = ["IntentRequest", "PlatformAdapter", "CLIAdapter", "DummyAdapter"]
