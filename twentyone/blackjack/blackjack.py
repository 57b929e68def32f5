"""
This module is used to run the Blackjack simulator from the command line.

It can be used in two modes:
- Deal mode, where `--deal N` (repeatable) deals hands of N cards and reports
  each one or its bust.
- Play mode (the default), where player-vs-dealer rounds are simulated and
  the result is printed.

Output goes to the console unless `--log_file` is given, and `--vis` plots
the running net winnings of a multi-round simulation.

For example:
    twentyone --decks 8 --num_hands 10 --stick_at 17 --stake 5 --double_up
    twentyone --decks 1 --no_shuffle --deal 2 --deal 5
"""

import argparse
import logging
import random
import sys
from typing import List, Optional

import matplotlib.pyplot as plt

from twentyone.blackjack.constants import DEFAULT_STICK_AT
from twentyone.blackjack.game import BlackjackGame
from twentyone.blackjack.stats import SimulationStats
from twentyone.common.exceptions import DeckExhaustedError
from twentyone.common.io_interface import (
    ConsoleIOInterface,
    IOInterface,
    LoggingIOInterface,
)

logger = logging.getLogger(__name__)


class BlackjackGraph:
    """Line chart of net winnings after each round."""

    def __init__(self, stats: SimulationStats):
        self.fig, self.ax = plt.subplots()
        rounds = range(1, len(stats.winnings_history) + 1)
        (self.line,) = self.ax.plot(rounds, stats.winnings_history, "b-")
        self.ax.axhline(0, color="grey", linewidth=0.5)
        self.ax.set_title("Blackjack Performance")
        self.ax.set_xlabel("Rounds")
        self.ax.set_ylabel("Net Winnings")

    def show(self):
        plt.show()


def create_io_interface(args) -> IOInterface:
    """Create the IO interface based on the command line arguments."""
    if args.log_file:
        return LoggingIOInterface(args.log_file)
    return ConsoleIOInterface()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a Blackjack simulation.")
    parser.add_argument(
        "--decks", type=int, default=1, help="Number of 52-card decks in the game"
    )
    parser.add_argument(
        "--no_shuffle",
        action="store_true",
        default=False,
        help="Keep the deck in suit and rank order instead of shuffling it.",
    )
    parser.add_argument(
        "--seed", type=int, help="Seed for the shuffle, for reproducible games"
    )
    parser.add_argument(
        "--deal",
        type=int,
        action="append",
        metavar="N",
        help="Deal a hand of N cards. May be repeated; disables play mode.",
    )
    parser.add_argument(
        "--num_hands", type=int, default=1, help="Number of rounds to simulate"
    )
    parser.add_argument(
        "--stick_at",
        type=int,
        default=DEFAULT_STICK_AT,
        help="Score at which the player stops drawing",
    )
    parser.add_argument(
        "--stake", type=float, default=0.0, help="Amount wagered per round"
    )
    parser.add_argument(
        "--double_up",
        action="store_true",
        default=False,
        help="Double the stake after each loss and reset it after each win.",
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Write game output to the specified file instead of the console.",
    )
    parser.add_argument(
        "--vis",
        action="store_true",
        default=False,
        help="Plot net winnings per round after a multi-round simulation.",
    )
    parser.add_argument(
        "--verbose", action="store_true", default=False, help="Enable debug logging."
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to start the game.

    It parses the command-line arguments, creates the game, then either deals
    the requested hands or plays the requested rounds.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    io_interface = create_io_interface(args)
    rng = random.Random(args.seed) if args.seed is not None else None

    try:
        game = BlackjackGame(
            num_decks=args.decks,
            shuffle=not args.no_shuffle,
            rng=rng,
            io_interface=io_interface,
        )
        if args.deal:
            for num_cards in args.deal:
                game.deal(num_cards)
        else:
            io_interface.output(
                game.play(
                    number_of_hands=args.num_hands,
                    stick_at=args.stick_at,
                    stake=args.stake,
                    double_up=args.double_up,
                )
            )
    except (DeckExhaustedError, ValueError) as exc:
        logger.error("Game aborted: %s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.vis and game.last_stats is not None:
        BlackjackGraph(game.last_stats).show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
