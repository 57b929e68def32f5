"""
Result types produced by dealing a hand and by playing a round.
"""

from dataclasses import dataclass
from enum import Enum

from twentyone.blackjack.hand import BlackjackHand


class RoundOutcome(Enum):
    """The terminal state of one player-vs-dealer round."""

    PLAYER_BUSTED = "player_busted"
    DEALER_BUSTED = "dealer_busted"
    PLAYER_WINS = "player_wins"
    DEALER_WINS = "dealer_wins"
    DRAW = "draw"

    @property
    def winner(self) -> str:
        """Who takes the round: "player", "dealer" or "draw"."""
        if self in (RoundOutcome.PLAYER_WINS, RoundOutcome.DEALER_BUSTED):
            return "player"
        if self in (RoundOutcome.DEALER_WINS, RoundOutcome.PLAYER_BUSTED):
            return "dealer"
        return "draw"


@dataclass
class DealResult:
    """A hand produced by `BlackjackGame.deal`."""

    hand: BlackjackHand
    points: int
    busted: bool = False


@dataclass
class RoundResult:
    """Final state of a round: its outcome and both hands."""

    outcome: RoundOutcome
    player_hand: BlackjackHand
    dealer_hand: BlackjackHand

    @property
    def player_points(self) -> int:
        return self.player_hand.value()

    @property
    def dealer_points(self) -> int:
        return self.dealer_hand.value()

    @property
    def winner(self) -> str:
        return self.outcome.winner
