"""
BlackjackHand implementation and the hand scoring rule.
"""

from typing import Iterable

from twentyone.blackjack.constants import BUST_THRESHOLD, get_blackjack_value
from twentyone.common.card import Card
from twentyone.common.hand import Hand


def score(cards: Iterable[Card]) -> int:
    """
    Total the points of a sequence of cards.

    Aces count 11, court cards 10 and everything else its numeral. Aces are
    never demoted to 1, so a hand holding an Ace can total more than 21.

    >>> from twentyone.common.card import Rank, Suit
    >>> score([Card(Rank.ACE, Suit.SPADES), Card(Rank.KING, Suit.CLUBS)])
    21
    """
    return sum(get_blackjack_value(card.rank) for card in cards)


class BlackjackHand(Hand):
    """A hand in the game of Blackjack."""

    def value(self) -> int:
        """Calculate the value of the hand."""
        return score(self._cards)

    @property
    def is_busted(self) -> bool:
        """Determine if the hand has gone over 21."""
        return self.value() > BUST_THRESHOLD
