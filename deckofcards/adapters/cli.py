"""
Command-line interface adapter for the card table.

This module provides an adapter for console-based interaction: it prints the
table after every operation and reads one command per line.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from deckofcards.adapters.base import IntentRequest, PlatformAdapter
from deckofcards.events import TableEventType
from deckofcards.table.constants import Intent

HELP_TEXT = """Commands:
  d, draw          draw a card
  5, 7, deal N     deal N cards (replaces the hand)
  r, reset         start over with a full deck
  p N, pick N      pick (or swap with) the card at position N
  t, toss          discard the picked card
  w, wildcard      add a random wildcard
  g, regroup       shuffle the hand
  h, help          show this help
  q, quit          leave the table"""

_SIMPLE_COMMANDS = {
    "d": Intent.DRAW,
    "draw": Intent.DRAW,
    "r": Intent.RESET,
    "reset": Intent.RESET,
    "t": Intent.TOSS,
    "toss": Intent.TOSS,
    "w": Intent.WILDCARD,
    "wildcard": Intent.WILDCARD,
    "g": Intent.REGROUP,
    "regroup": Intent.REGROUP,
}

QUIT_COMMANDS = {"q", "quit", "exit"}


def parse_command(line: str) -> Optional[IntentRequest]:
    """
    Translate a console command into an intent request.

    Hand positions are typed 1-based and returned 0-based.

    >>> parse_command("deal 5")
    (<Intent.DEAL: 'deal'>, (5,))
    >>> parse_command("p 2")
    (<Intent.SELECT: 'select'>, (1,))

    Returns:
        The (intent, args) pair, or None if the command is not understood
    """
    words = line.strip().lower().split()
    if not words:
        return None

    command, rest = words[0], words[1:]

    if command in _SIMPLE_COMMANDS and not rest:
        return _SIMPLE_COMMANDS[command], ()

    if command.isdigit() and not rest:
        return Intent.DEAL, (int(command),)

    if command == "deal" and len(rest) == 1 and rest[0].isdigit():
        return Intent.DEAL, (int(rest[0]),)

    if command in ("p", "pick") and len(rest) == 1 and rest[0].isdigit():
        return Intent.SELECT, (int(rest[0]) - 1,)

    return None


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for the card table.

    This adapter uses the standard console for input/output, providing a
    simple text-based interface to the table.
    """

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], Any]] = None,
    ):
        """
        Initialize the CLI adapter.

        Args:
            input_func: Reads one line given a prompt (default: input)
            output_func: Writes one line (default: print)
        """
        self.input_func = input_func or input
        self.output_func = output_func or print

    def initialize(self) -> None:
        self.output_func("Welcome to the Deck of Cards. Type 'help' for commands.")

    def shutdown(self) -> None:
        self.output_func("Goodbye.")

    def render_table_state(self, view: Dict[str, Any]) -> None:
        """
        Render the current table to the console.

        Args:
            view: The table view
        """
        self.output_func("\n=== Deck of Cards ===")
        self.output_func(f"[ {view['draw_label']} ]")
        self.output_func(f"Cards Left in Deck: {view['deck_count']}")

        if view["hand"]:
            self.output_func("Hand: " + "  ".join(format_hand(view["hand"])))
        else:
            self.output_func("Hand: (empty)")

        disabled = [name for name, enabled in view["actions"].items() if not enabled]
        if disabled:
            self.output_func(f"Unavailable: {', '.join(disabled)}")

        self.output_func("=====================")

    def request_intent(self) -> Optional[IntentRequest]:
        """
        Read commands until one is understood.

        Returns:
            The intent request, or None on quit or end of input
        """
        while True:
            try:
                line = self.input_func("> ")
            except EOFError:
                return None

            if line.strip().lower() in QUIT_COMMANDS:
                return None

            if line.strip().lower() in ("h", "help", "?"):
                self.output_func(HELP_TEXT)
                continue

            request = parse_command(line)
            if request is not None:
                return request

            self.output_func(f"Unknown command: {line.strip()!r} (type 'help')")

    def notify_event(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Report rejected operations; everything else shows up in the next render.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_name = event_type.name if isinstance(event_type, Enum) else event_type
        if event_name == TableEventType.ACTION_REJECTED.name:
            reason = data.get("reason", "").replace("_", " ")
            self.output_func(f"Can't {data.get('operation', 'do that')}: {reason}")


def format_hand(hand: List[Dict[str, Any]]) -> List[str]:
    """Number the cards in a hand view, marking the selected ones with asterisks."""
    formatted = []
    for position, entry in enumerate(hand, start=1):
        card = f"*{entry['card']}*" if entry["selected"] else entry["card"]
        formatted.append(f"{position}:{card}")
    return formatted
