"""
This module contains the Deck class, which represents the draw pile of a game.

>>> deck = Deck()
>>> deck.size
52
>>> deck.draw()
Card(Rank.ACE, Suit.SPADES)
>>> deck.size
51
"""

import logging
import random
from typing import List, Optional

from twentyone.common.card import Card, Rank, Suit
from twentyone.common.exceptions import DeckExhaustedError

logger = logging.getLogger(__name__)

# Precompute one standard deck, suit-major then rank-major
_STANDARD_DECK = [Card(rank, suit) for suit in Suit for rank in Rank]


def create_deck(num_decks: int = 1) -> List[Card]:
    """
    Build `num_decks` standard 52-card decks laid end to end, unshuffled.

    :param num_decks: Number of standard decks to combine (at least 1)
    :return: A new list of Card instances
    >>> len(create_deck(2))
    104
    """
    if num_decks < 1:
        raise ValueError("Number of decks must be at least 1")
    return _STANDARD_DECK * num_decks


def shuffle_cards(cards: List[Card], rng=None) -> None:
    """
    Shuffle a list of cards in place with a Fisher-Yates pass.

    :param cards: The list to permute
    :param rng: Source of randomness exposing `randrange`; defaults to the
                `random` module. Pass a seeded `random.Random` for
                reproducible shuffles.
    """
    rng = rng if rng is not None else random
    n = len(cards)
    for i in range(n - 1):
        j = i + rng.randrange(n - i)
        cards[i], cards[j] = cards[j], cards[i]


class Deck:
    """
    A class representing the draw pile owned by a single game.

    Cards are drawn from the top (index 0). The pile only ever shrinks:
    there is no reset and no reshuffle of dealt cards back into it.
    """

    def __init__(
        self,
        num_decks: int = 1,
        shuffle: bool = False,
        rng: Optional[random.Random] = None,
        cards: Optional[List[Card]] = None,
    ):
        """
        Initialize a Deck instance.

        :param num_decks: Number of standard decks to build (ignored when `cards` is given)
        :param shuffle: Whether to shuffle the pile once it is built
        :param rng: Optional random source used for shuffling
        :param cards: A list of Card instances to use as the pile, top card first (optional).
        >>> Deck(num_decks=3).size
        156
        """
        self.rng = rng
        if cards is None:
            self.cards: List[Card] = create_deck(num_decks)
        else:
            self.cards = list(cards)
        self.initial_size = len(self.cards)
        if shuffle:
            self.shuffle()
        logger.debug("Built deck of %d cards (shuffled=%s)", self.size, shuffle)

    def shuffle(self) -> "Deck":
        """
        Shuffle the cards remaining in the deck.
        >>> deck = Deck()
        >>> original_order = deck.cards.copy()
        >>> sorted(deck.shuffle().cards, key=repr) == sorted(original_order, key=repr)
        True
        """
        shuffle_cards(self.cards, self.rng)
        return self

    def draw(self) -> Card:
        """
        Remove and return the top card of the deck.

        :raises DeckExhaustedError: If the deck is empty.
        """
        if not self.cards:
            raise DeckExhaustedError(1, 0)
        return self.cards.pop(0)

    def deal(self, num_cards: int = 1) -> List[Card]:
        """
        Draw `num_cards` cards from the top of the deck, in order.

        The deck is left untouched when it cannot supply every card.

        :return: A list of card instances.
        >>> deck = Deck()
        >>> [str(card) for card in deck.deal(3)]
        ['Ace♠', '2♠', '3♠']
        """
        if num_cards < 0:
            raise ValueError("Number of cards must be non-negative")
        if num_cards > len(self.cards):
            raise DeckExhaustedError(num_cards, len(self.cards))
        dealt = self.cards[:num_cards]
        del self.cards[:num_cards]
        return dealt

    def remove(self, card: Card) -> None:
        """
        Remove a specific card from the deck.

        :raises ValueError: If the card is not in the deck.
        """
        try:
            self.cards.remove(card)
        except ValueError as exc:
            raise ValueError(f"Card {card} not found in deck.") from exc

    @property
    def size(self) -> int:
        """
        Return the number of remaining cards in the deck.

        :return: The size of the deck.
        """
        return len(self.cards)

    @property
    def cards_drawn(self) -> int:
        """Number of cards taken from the deck since it was built."""
        return self.initial_size - len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self.cards) == 0

    def __len__(self) -> int:
        return len(self.cards)

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the deck.

        :return: A string representation of the deck.
        """
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the deck.

        :return: A string representation of the deck.
        >>> str(Deck())
        'Deck of 52 cards'
        """
        return f"Deck of {len(self.cards)} cards"
