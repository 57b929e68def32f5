"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards, in deck order: Spades, Hearts, Diamonds and Clubs.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards, Ace through King. The enum value is the face value, 1 to 13.

- `Card`: An immutable playing card made of a rank and a suit. The `Card`
class also provides the display form used when hands are reported.

This module is part of the `twentyone` package, a Blackjack round simulator.
"""

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def face_value(self) -> int:
        """The face value of the rank, 1 for Ace up to 13 for King."""
        return self.value

    @property
    def label(self) -> str:
        """A string representation of the rank."""
        if self in (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING):
            return self.name.capitalize()
        return str(self.value)

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True, repr=False)
class Card:
    """
    Class representing a playing card. Cards are immutable once created.

    >>> card = Card(Rank.ACE, Suit.SPADES)
    >>> print(card)
    Ace♠
    >>> print(Card(Rank.TEN, Suit.HEARTS))
    10♥
    """

    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Rank.{self.rank.name}, Suit.{self.suit.name})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: The rank label followed by the suit glyph, e.g. "Queen♦".
        """
        return f"{self.rank.label}{self.suit}"
