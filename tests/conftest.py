"""
Pytest configuration for tests at the root level.

This module contains fixtures for building rigged decks and games whose
deals are known in advance.
"""

import pytest

from twentyone.blackjack.game import BlackjackGame
from twentyone.common.card import Card, Rank, Suit
from twentyone.common.deck import Deck
from twentyone.common.io_interface import TestIOInterface

_RANKS = {
    "A": Rank.ACE,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    **{str(rank.value): rank for rank in Rank if 2 <= rank.value <= 10},
}
_SUITS = {"s": Suit.SPADES, "h": Suit.HEARTS, "d": Suit.DIAMONDS, "c": Suit.CLUBS}


def _parse_cards(tokens: str):
    """Turn "As 10h Kc" into a list of cards, top card first."""
    return [Card(_RANKS[token[:-1]], _SUITS[token[-1]]) for token in tokens.split()]


@pytest.fixture
def parse_cards():
    return _parse_cards


@pytest.fixture
def io():
    return TestIOInterface()


@pytest.fixture
def rigged_game(io):
    """Factory for a game whose deck holds exactly the given cards, in order."""

    def make(tokens: str) -> BlackjackGame:
        return BlackjackGame(deck=Deck(cards=_parse_cards(tokens)), io_interface=io)

    return make


@pytest.fixture
def ordered_game(io):
    """A single unshuffled deck: Ace to King of Spades, then Hearts, Diamonds, Clubs."""
    return BlackjackGame(num_decks=1, shuffle=False, io_interface=io)
