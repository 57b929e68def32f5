"""
Exceptions raised by the twentyone game engine.

`BustedError` is an ordinary game event that the dealer recovers from
locally; `DeckExhaustedError` is a real failure that reaches the caller.
"""


class BlackjackError(Exception):
    """Base class for all game errors."""


class BustedError(BlackjackError):
    """A dealt hand scored more than 21 points."""

    def __init__(self, hand, points: int):
        super().__init__(f"busted with {points} points")
        self.hand = hand
        self.points = points


class DeckExhaustedError(BlackjackError):
    """A draw was attempted with too few cards left in the deck."""

    def __init__(self, requested: int = 1, remaining: int = 0):
        super().__init__(
            f"Cannot draw {requested} card(s), only {remaining} left in the deck"
        )
        self.requested = requested
        self.remaining = remaining
