"""
twentyone: a simplified Blackjack simulator.

Build a game from one or more decks, deal hands from it, or simulate
player-vs-dealer rounds with optional staking:

>>> from twentyone import BlackjackGame
>>> game = BlackjackGame(num_decks=8)
>>> summary = game.play(number_of_hands=10, stake=5, double_up=True)
"""

from twentyone.blackjack.game import BlackjackGame
from twentyone.blackjack.outcome import DealResult, RoundOutcome, RoundResult
from twentyone.common.card import Card, Rank, Suit
from twentyone.common.deck import Deck, create_deck, shuffle_cards
from twentyone.common.exceptions import (
    BlackjackError,
    BustedError,
    DeckExhaustedError,
)

__version__ = "0.1.0"

__all__ = [
    "BlackjackGame",
    "DealResult",
    "RoundOutcome",
    "RoundResult",
    "Card",
    "Rank",
    "Suit",
    "Deck",
    "create_deck",
    "shuffle_cards",
    "BlackjackError",
    "BustedError",
    "DeckExhaustedError",
]
