"""
Event system for the deckofcards table.

This package provides the event emitter, the process-wide event bus and the
event types announced by table operations.
"""

from deckofcards.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    TableEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "TableEventType"]
