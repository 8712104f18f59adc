"""
Dummy adapter for the card table, used for testing and scripted sessions.

This module provides a non-interactive adapter that replays a fixed list of
intents and records everything the table shows it.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from deckofcards.adapters.base import IntentRequest, PlatformAdapter
from deckofcards.table.constants import Intent


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing.

    Intents are taken from ``script`` in order; when the script runs out the
    session ends. Rendered views and events are kept for later inspection.
    """

    def __init__(
        self,
        script: Optional[Iterable[Union[IntentRequest, Tuple[Any, ...]]]] = None,
        verbose: bool = False,
    ):
        """
        Initialize the dummy adapter.

        Args:
            script: Intent requests to replay, as (intent, args) pairs
            verbose: Whether to print renders and events to stdout
        """
        self.script: List[IntentRequest] = [
            (intent if isinstance(intent, Intent) else Intent(intent), tuple(args))
            for intent, args in (script or [])
        ]
        self.verbose = verbose

        self._position = 0
        self.initialized = False
        self.shut_down = False

        # Track events and rendered views for testing
        self.events: List[Tuple[str, Dict[str, Any]]] = []
        self.rendered_states: List[Dict[str, Any]] = []

    def initialize(self) -> None:
        self.initialized = True

    def shutdown(self) -> None:
        self.shut_down = True

    def render_table_state(self, view: Dict[str, Any]) -> None:
        """
        Store the view for later inspection.

        Args:
            view: The table view
        """
        self.rendered_states.append(view)

        if self.verbose:
            hand = " ".join(entry["card"] for entry in view["hand"])
            print(f"deck: {view['deck_count']} | hand: {hand}")

    def request_intent(self) -> Optional[IntentRequest]:
        """Return the next scripted intent, or None when the script is exhausted."""
        if self._position >= len(self.script):
            return None
        request = self.script[self._position]
        self._position += 1
        return request

    def notify_event(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Store the event for later inspection.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str}")

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.

        Args:
            event_type: The type of events to retrieve

        Returns:
            A list of event data dictionaries
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    def clear(self) -> None:
        """Clear all stored events and views."""
        self.events.clear()
        self.rendered_states.clear()
