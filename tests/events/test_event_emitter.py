"""
Tests for the event system.

This module contains tests for the EventEmitter and EventBus classes
to ensure they provide the expected behavior for event handling.
"""

import logging
from unittest.mock import MagicMock

from deckofcards.events import EventBus, EventEmitter, EventPriority, TableEventType


def test_on_with_string_event_type():
    """Test subscribing to an event with a string event type."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on("test_event", callback)

    test_data = {"value": "test"}
    emitter.emit("test_event", test_data)
    callback.assert_called_once_with(test_data)

    # Unsubscribe and emit again
    unsubscribe()
    emitter.emit("test_event", {"value": "test2"})
    assert callback.call_count == 1


def test_on_with_enum_event_type():
    """Enum and name subscriptions refer to the same event."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.on(TableEventType.CARD_DRAWN, callback)

    emitter.emit(TableEventType.CARD_DRAWN, {"card": "A♠"})
    emitter.emit("CARD_DRAWN", {"card": "K♥"})

    assert callback.call_count == 2
    assert callback.call_args_list[0][0][0] == {"card": "A♠"}


def test_once_subscription():
    """Test subscribing to an event for a single occurrence."""
    emitter = EventEmitter()
    callback = MagicMock()

    emitter.once("test_event", callback)

    emitter.emit("test_event", {"id": 1})
    emitter.emit("test_event", {"id": 2})

    callback.assert_called_once()
    assert callback.call_args[0][0]["id"] == 1
    assert emitter.listener_count("test_event") == 0


def test_once_unsubscribes_when_callback_raises():
    emitter = EventEmitter()

    def explode(data):
        raise RuntimeError("boom")

    emitter.once("test_event", explode)
    emitter.emit("test_event", {})

    assert emitter.listener_count("test_event") == 0


def test_on_any_subscription():
    """Test subscribing to all events."""
    emitter = EventEmitter()
    callback = MagicMock()

    unsubscribe = emitter.on_any(callback)

    emitter.emit("event1", {"id": 1})
    emitter.emit(TableEventType.CARD_TOSSED, {"id": 2})

    assert callback.call_count == 2
    event_type, event_data = callback.call_args_list[0][0][0]
    assert event_type == "event1"
    assert event_data["id"] == 1
    assert callback.call_args_list[1][0][0][0] == "CARD_TOSSED"

    unsubscribe()
    emitter.emit("event3", {"id": 3})
    assert callback.call_count == 2


def test_emitter_priority():
    """Test that handlers are called in priority order."""
    emitter = EventEmitter()
    call_order = []

    emitter.on("test_event", lambda data: call_order.append("normal"), EventPriority.NORMAL)
    emitter.on("test_event", lambda data: call_order.append("low"), EventPriority.LOW)
    emitter.on(
        "test_event", lambda data: call_order.append("critical"), EventPriority.CRITICAL
    )
    emitter.on("test_event", lambda data: call_order.append("high"), EventPriority.HIGH)
    emitter.on("test_event", lambda data: call_order.append("normal2"), EventPriority.NORMAL)

    emitter.emit("test_event", {})

    assert call_order == ["critical", "high", "normal", "normal2", "low"]


def test_unsubscribe_removes_only_that_subscription():
    emitter = EventEmitter()
    callback = MagicMock()

    first = emitter.on("test_event", callback)
    emitter.on("test_event", callback)

    first()
    emitter.emit("test_event", {})

    callback.assert_called_once()


def test_remove_all_listeners():
    """Test removing all listeners."""
    emitter = EventEmitter()
    callback1 = MagicMock()
    callback2 = MagicMock()

    emitter.on("event1", callback1)
    emitter.on("event2", callback2)

    emitter.remove_all_listeners("event1")

    emitter.emit("event1", {"id": 1})
    emitter.emit("event2", {"id": 2})

    callback1.assert_not_called()
    callback2.assert_called_once()

    emitter.remove_all_listeners()
    callback2.reset_mock()
    emitter.emit("event2", {"id": 3})

    callback2.assert_not_called()
    assert emitter.listener_count() == 0


def test_emit_exceptions_are_caught(caplog):
    """Exceptions in event handlers are logged and don't stop other handlers."""
    emitter = EventEmitter()

    def callback_raises_exception(data):
        raise ValueError("Test exception")

    callback_after = MagicMock()

    emitter.on("test_event", callback_raises_exception)
    emitter.on("test_event", callback_after)

    with caplog.at_level(logging.ERROR, logger="deckofcards.events"):
        emitter.emit("test_event", {"id": 1})

    callback_after.assert_called_once_with({"id": 1})
    assert "Test exception" in caplog.text


def test_listener_count():
    emitter = EventEmitter()
    emitter.on(TableEventType.CARD_DRAWN, MagicMock())
    emitter.on("CARD_DRAWN", MagicMock())
    emitter.on_any(MagicMock())

    assert emitter.listener_count(TableEventType.CARD_DRAWN) == 2
    assert emitter.listener_count("CARD_TOSSED") == 0
    assert emitter.listener_count() == 3


def test_event_bus_singleton():
    """Test that EventBus returns a singleton instance."""
    bus1 = EventBus.get_instance()
    bus2 = EventBus.get_instance()

    assert bus1 is bus2
    assert isinstance(bus1, EventEmitter)
