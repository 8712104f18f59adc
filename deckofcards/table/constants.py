"""Table-specific constants and enumerations."""

from enum import Enum

FULL_DECK_SIZE = 52

# Deal buttons offered by the table
DEFAULT_DEAL_SIZES = (5, 7)

DRAW_LABEL = "Click to Draw"
EMPTY_DECK_LABEL = "No Cards Remaining"


class PickPolicy(Enum):
    """What clicking a second card in the hand does."""

    PICK = "pick"  # move the selection to the clicked card
    SWAP = "swap"  # exchange the selected card with the clicked card


class Intent(Enum):
    """User intents forwarded by the presentation layer."""

    DRAW = "draw"
    DEAL = "deal"
    RESET = "reset"
    SELECT = "select"
    TOSS = "toss"
    WILDCARD = "wildcard"
    REGROUP = "regroup"


class RejectReason(Enum):
    """Why an operation left the table unchanged."""

    EMPTY_DECK = "empty_deck"
    INSUFFICIENT_CARDS = "insufficient_cards"
    INVALID_COUNT = "invalid_count"
    NO_SELECTION = "no_selection"
    CARD_NOT_IN_HAND = "card_not_in_hand"
    EMPTY_HAND = "empty_hand"
