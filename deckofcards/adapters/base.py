"""
Base adapter interface for the card table.

This module defines the interface that presentation adapters implement to
show the table and forward user intents to it.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from deckofcards.table.constants import Intent

# An intent and its arguments, e.g. (Intent.DEAL, (5,))
IntentRequest = Tuple[Intent, Tuple[Any, ...]]


class PlatformAdapter(ABC):
    """
    Base interface for presentation adapters.

    The table calls ``render_table_state`` after every operation with the view
    produced by ``TableState.to_adapter_format``, and asks for the next intent
    with ``request_intent``. Only one intent is handled at a time: the adapter
    is not asked again until the previous intent has been applied and the
    result rendered.
    """

    @abstractmethod
    def render_table_state(self, view: Dict[str, Any]) -> None:
        """
        Render the current table.

        Args:
            view: Deck count, draw affordance, enabled actions and the hand
        """
        pass

    @abstractmethod
    def request_intent(self) -> Optional[IntentRequest]:
        """
        Get the next user intent.

        Returns:
            An (intent, args) pair, or None when the user is done
        """
        pass

    @abstractmethod
    def notify_event(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Notify the platform of a table event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    # The following methods have default implementations but can be overridden

    def initialize(self) -> None:
        """Called once before the first render."""
        pass

    def shutdown(self) -> None:
        """Called once after the last intent."""
        pass
