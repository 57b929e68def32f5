"""
This module contains the SimulationStats class which is responsible for
tracking the aggregate results and winnings of a multi-round simulation.
"""

from typing import List

from twentyone.blackjack.outcome import RoundResult
from twentyone.blackjack.strategy import StakeStrategy


class SimulationStats:
    """
    A class that holds the statistics of one `play` call.
    """

    def __init__(self, stake_strategy: StakeStrategy):
        """
        Initializes the SimulationStats with default values.
        """
        self.stake_strategy = stake_strategy
        self.games_played = 0
        self.player_wins = 0
        self.dealer_wins = 0
        self.draws = 0
        self.winnings = 0.0
        self.stakes: List[float] = []
        self.winnings_history: List[float] = []

    @property
    def current_stake(self) -> float:
        """The amount riding on the next round."""
        return self.stake_strategy.place_bet()

    def update(self, result: RoundResult) -> None:
        """Updates the statistics with the result of one round."""
        stake = self.stake_strategy.place_bet()
        self.games_played += 1
        self.stakes.append(stake)

        if result.winner == "player":
            self.player_wins += 1
            self.winnings += stake
            self.stake_strategy.update_bet("win")
        elif result.winner == "dealer":
            self.dealer_wins += 1
            self.winnings -= stake
            self.stake_strategy.update_bet("lose")
        else:
            self.draws += 1
            self.stake_strategy.update_bet("push")

        self.winnings_history.append(self.winnings)

    def report(self):
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "games_played": self.games_played,
            "player_wins": self.player_wins,
            "dealer_wins": self.dealer_wins,
            "draws": self.draws,
            "winnings": self.winnings,
        }
