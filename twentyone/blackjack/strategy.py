"""
Staking strategies for multi-round simulations.

A strategy decides how much is wagered on the next round and adjusts that
amount after each result ("win", "lose" or "push").
"""

from abc import ABC, abstractmethod


class StakeStrategy(ABC):
    """Base class for staking strategies."""

    def __init__(self, initial_bet: float = 0.0):
        self.initial_bet = initial_bet
        self.current_bet = initial_bet

    def place_bet(self) -> float:
        return self.current_bet

    @abstractmethod
    def update_bet(self, result: str) -> None:
        """Adjust the next bet after a round result."""

    def reset_bet(self):
        self.current_bet = self.initial_bet


class FlatStakeStrategy(StakeStrategy):
    """Wager the same amount every round."""

    def update_bet(self, result: str) -> None:
        pass


class MartingaleStrategy(StakeStrategy):
    """
    Double the stake after every loss and go back to the initial stake after
    a win. A push leaves the stake unchanged.
    """

    def __init__(self, initial_bet: float = 0.0):
        super().__init__(initial_bet)
        self.consecutive_losses = 0

    def update_bet(self, result: str) -> None:
        if result == "win":
            self.current_bet = self.initial_bet
            self.consecutive_losses = 0
        elif result == "lose":
            self.consecutive_losses += 1
            self.current_bet *= 2
        # In case of a push (tie), the bet remains the same

    def reset_bet(self):
        super().reset_bet()
        self.consecutive_losses = 0


def create_stake_strategy(stake: float, double_up: bool) -> StakeStrategy:
    """Pick the staking strategy for a simulation."""
    if double_up:
        return MartingaleStrategy(stake)
    return FlatStakeStrategy(stake)
