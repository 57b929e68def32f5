from twentyone.blackjack.constants import (
    BUST_THRESHOLD,
    DEALER_STICK_AT,
    DEFAULT_STICK_AT,
)
from twentyone.blackjack.hand import BlackjackHand


class Rules:
    """
    Draw policy for one player-vs-dealer round.

    The player draws until reaching `stick_at`; the dealer always sticks at
    the house threshold, whatever the player's setting. A `stick_at` above
    21 keeps the player drawing until they bust; one of 0 or less means the
    player never draws.
    """

    def __init__(self, stick_at: int = DEFAULT_STICK_AT):
        self.stick_at = stick_at
        self.dealer_stick_at = DEALER_STICK_AT
        self.bust_threshold = BUST_THRESHOLD

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "stick_at": self.stick_at,
            "dealer_stick_at": self.dealer_stick_at,
            "bust_threshold": self.bust_threshold,
        }

    def should_player_draw(self, hand: BlackjackHand) -> bool:
        """Determine if the player takes another card."""
        return hand.value() < self.stick_at

    def should_dealer_draw(self, hand: BlackjackHand) -> bool:
        """Determine if the dealer should hit based on the house rule."""
        return hand.value() < self.dealer_stick_at

    def is_busted(self, hand: BlackjackHand) -> bool:
        return hand.value() > self.bust_threshold

    def __repr__(self) -> str:
        return f"Rules(stick_at={self.stick_at})"
