"""
Pytest configuration for the deckofcards tests.

This module contains fixtures shared by the whole test suite.
"""

import random

import pytest

from deckofcards.common.card import Card, Rank, Suit
from deckofcards.events import EventBus


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def rng():
    """A seeded random source so draws and shuffles are reproducible."""
    return random.Random(1234)


@pytest.fixture
def ace_of_spades():
    return Card(Suit.SPADES, Rank.ACE)


@pytest.fixture
def king_of_hearts():
    return Card(Suit.HEARTS, Rank.KING)


@pytest.fixture
def seven_of_clubs():
    return Card(Suit.CLUBS, Rank.SEVEN)
