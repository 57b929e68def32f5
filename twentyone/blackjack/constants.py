"""Blackjack-specific constants and value mappings."""

from twentyone.common.card import Rank

# Aces always count 11; there is no soft total
BLACKJACK_VALUES = {
    Rank.ACE: 11,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}

BUST_THRESHOLD = 21
DEALER_STICK_AT = 17
DEFAULT_STICK_AT = 17


def get_blackjack_value(rank: Rank) -> int:
    """Get the blackjack value for a given rank."""
    return BLACKJACK_VALUES[rank]
