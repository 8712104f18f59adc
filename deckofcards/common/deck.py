"""
This module contains the Deck class, which represents the pool of undrawn cards.

>>> import random
>>> deck = Deck(rng=random.Random(7))
>>> deck.size
52
>>> card = deck.draw_random()
>>> deck.size
51
>>> card in deck
False
"""

import random
from typing import Iterable, List, Optional

from deckofcards.common.card import RANKS, SUITS, Card


def full_deck() -> List[Card]:
    """
    Build a standard 52-card deck, one card per suit and rank.

    :return: A new list of Card instances in suit-major order.
    """
    return [Card(suit, rank) for suit in SUITS for rank in RANKS]


class Deck:
    """
    A class representing a deck of cards.

    Cards are drawn from random positions using the deck's random source, so
    the order of ``cards`` carries no meaning.
    """

    # Precompute the default deck
    _default_deck = full_deck()

    def __init__(
        self,
        cards: Optional[Iterable[Card]] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: Cards to populate the deck (optional). If not provided,
                      a default deck will be constructed.
        :param rng: Random source for draws and shuffles (optional).
        :raises ValueError: If ``cards`` holds the same card twice.
        """
        if cards is None:
            self.cards: List[Card] = self.initialize_default_deck()
        else:
            self.cards = list(cards)
            if len(set(self.cards)) != len(self.cards):
                raise ValueError("A deck cannot hold the same card twice")
        self.rng = rng or random.Random()

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        :return: A list of Card instances representing the default deck.
        """
        return self._default_deck.copy()

    def draw_random(self) -> Card:
        """
        Remove and return one card chosen uniformly at random.

        :return: The drawn card.
        :raises IndexError: If the deck is empty.
        """
        if not self.cards:
            raise IndexError("draw from an empty deck")
        return self.cards.pop(self.rng.randrange(len(self.cards)))

    def deal_random(self, num_cards: int) -> List[Card]:
        """
        Remove and return ``num_cards`` distinct cards chosen uniformly at random.

        The cards come from a full shuffle of a copy of the deck, truncated to
        ``num_cards``. The remaining cards keep their order.

        :return: The dealt cards, in dealt order.
        :raises ValueError: If the deck holds fewer than ``num_cards`` cards.
        """
        if num_cards > len(self.cards):
            raise ValueError(
                f"Cannot deal {num_cards} cards from a deck of {len(self.cards)}"
            )
        shuffled = self.cards.copy()
        self.rng.shuffle(shuffled)
        dealt = shuffled[:num_cards]
        chosen = set(dealt)
        self.cards = [card for card in self.cards if card not in chosen]
        return dealt

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        :return: The size of the deck.
        """
        return len(self.cards)

    def __contains__(self, card: Card) -> bool:
        return card in self.cards

    def __len__(self) -> int:
        return len(self.cards)
