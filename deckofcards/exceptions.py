"""
Exceptions raised by the deckofcards package.

Invalid table operations (drawing from an empty deck, tossing with nothing
selected, ...) are not errors: they are recorded as rejected outcomes. The
exceptions here cover programming and configuration mistakes only.
"""


class DeckOfCardsError(Exception):
    """Base class for deckofcards errors."""

    pass


class ConfigError(DeckOfCardsError, ValueError):
    """Invalid table configuration."""

    pass


class UnknownIntentError(DeckOfCardsError, ValueError):
    """An intent was dispatched that the table does not understand."""

    def __init__(self, intent):
        self.intent = intent
        super().__init__(f"Unknown intent: {intent!r}")
