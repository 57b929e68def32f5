"""
The BlackjackGame class: deals hands and simulates player-vs-dealer rounds
from a single deck that is drawn down for the lifetime of the game.

>>> from twentyone.common.io_interface import TestIOInterface
>>> io = TestIOInterface()
>>> game = BlackjackGame(num_decks=1, shuffle=False, io_interface=io)
>>> result = game.deal(2)
>>> io.last_message
'Ace♠ 2♠ for 13 points'
>>> game.deck.size
50
"""

import logging
import random
from typing import Optional

from twentyone.blackjack.constants import DEFAULT_STICK_AT
from twentyone.blackjack.hand import BlackjackHand
from twentyone.blackjack.outcome import DealResult, RoundOutcome, RoundResult
from twentyone.blackjack.report import (
    format_busted,
    format_dealt,
    format_round,
    format_summary,
)
from twentyone.blackjack.rules import Rules
from twentyone.blackjack.stats import SimulationStats
from twentyone.blackjack.strategy import create_stake_strategy
from twentyone.common.deck import Deck
from twentyone.common.exceptions import BustedError
from twentyone.common.io_interface import ConsoleIOInterface, IOInterface
from twentyone.events import EngineEventType, EventEmitter

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    A game of Blackjack played against one deck.

    The deck is built once, optionally shuffled, and never replenished:
    every `deal` and `play` call draws it down further until it runs out,
    at which point `DeckExhaustedError` is raised.

    Attributes:
        deck: The draw pile owned by this game
        io_interface: Where dealt-hand notices are written
        emitter: Event channel announcing dealt hands and finished rounds
        last_stats: Statistics of the most recent multi-round `play` call
    """

    def __init__(
        self,
        num_decks: int = 1,
        shuffle: bool = True,
        rng: Optional[random.Random] = None,
        io_interface: Optional[IOInterface] = None,
        emitter: Optional[EventEmitter] = None,
        deck: Optional[Deck] = None,
    ):
        """
        Args:
            num_decks: Number of standard 52-card decks in the pile
            shuffle: Whether to shuffle the pile before play
            rng: Optional random source for the shuffle
            io_interface: Output for dealt-hand notices (console by default)
            emitter: Event channel to publish on (a private one by default)
            deck: A prepared deck to use instead of building one
        """
        self.deck = deck if deck is not None else Deck(num_decks, shuffle=shuffle, rng=rng)
        self.io_interface = io_interface if io_interface is not None else ConsoleIOInterface()
        self.emitter = emitter if emitter is not None else EventEmitter()
        self.last_stats: Optional[SimulationStats] = None

        self._subscribe_to_dealt_hand()
        if shuffle and deck is None:
            self.emitter.emit(EngineEventType.DECK_SHUFFLED, {"cards": self.deck.size})

    def _subscribe_to_dealt_hand(self) -> None:
        self.emitter.on(EngineEventType.HAND_DEALT, self._on_hand_dealt)
        self.emitter.on(EngineEventType.HAND_BUSTED, self._on_hand_busted)

    def _on_hand_dealt(self, data) -> None:
        self.io_interface.output(format_dealt(data["hand"].cards, data["points"]))

    def _on_hand_busted(self, data) -> None:
        self.io_interface.output(format_busted(data["error"]))

    def deal(self, num_cards: int) -> DealResult:
        """
        Deal `num_cards` from the top of the deck into a new hand.

        A hand over 21 is reported as busted; the game carries on accepting
        further calls either way.

        The notice reaches `io_interface` through the event emitter, which
        logs and drops errors raised by its handlers. A failing output is
        therefore only visible in the "twentyone.events" log; the returned
        `DealResult` is the authoritative outcome.

        Raises:
            DeckExhaustedError: If fewer than `num_cards` cards remain.
        """
        hand = BlackjackHand(self.deck.deal(num_cards))
        points = hand.value()
        logger.debug("Dealt %s for %d points", hand, points)

        try:
            if hand.is_busted:
                raise BustedError(hand, points)
        except BustedError as error:
            self.emitter.emit(
                EngineEventType.HAND_BUSTED,
                {"hand": hand, "points": points, "error": error},
            )
            return DealResult(hand, points, busted=True)

        self.emitter.emit(EngineEventType.HAND_DEALT, {"hand": hand, "points": points})
        return DealResult(hand, points)

    def play_round(self, stick_at: int = DEFAULT_STICK_AT) -> RoundResult:
        """Play one round and return its result without formatting it."""
        return self._play_round(Rules(stick_at), 1)

    def _play_round(self, rules: Rules, round_number: int) -> RoundResult:
        self.emitter.emit(EngineEventType.ROUND_STARTED, {"round": round_number})

        player_hand = BlackjackHand()
        dealer_hand = BlackjackHand()
        for _ in range(2):
            player_hand.add_card(self.deck.draw())
        for _ in range(2):
            dealer_hand.add_card(self.deck.draw())

        outcome = None
        while outcome is None and rules.should_player_draw(player_hand):
            player_hand.add_card(self.deck.draw())
            if rules.is_busted(player_hand):
                outcome = RoundOutcome.PLAYER_BUSTED

        while outcome is None and rules.should_dealer_draw(dealer_hand):
            dealer_hand.add_card(self.deck.draw())
            if rules.is_busted(dealer_hand):
                outcome = RoundOutcome.DEALER_BUSTED

        if outcome is None:
            outcome = self._showdown(player_hand.value(), dealer_hand.value())

        result = RoundResult(outcome, player_hand, dealer_hand)
        logger.debug(
            "Round %d: %s (player %d, dealer %d, %d cards left)",
            round_number,
            outcome.name,
            result.player_points,
            result.dealer_points,
            self.deck.size,
        )
        self.emitter.emit(
            EngineEventType.ROUND_ENDED, {"round": round_number, "result": result}
        )
        return result

    @staticmethod
    def _showdown(player_points: int, dealer_points: int) -> RoundOutcome:
        if dealer_points > player_points:
            return RoundOutcome.DEALER_WINS
        if player_points > dealer_points:
            return RoundOutcome.PLAYER_WINS
        return RoundOutcome.DRAW

    def play(
        self,
        number_of_hands: int = 1,
        stick_at: int = DEFAULT_STICK_AT,
        stake: float = 0.0,
        double_up: bool = False,
    ) -> str:
        """
        Simulate player-vs-dealer rounds and describe the result.

        With one hand the round itself is described. With more, the rounds
        share the deck and the summary reports wins, draws and net winnings.

        Args:
            number_of_hands: Rounds to play (at least 1)
            stick_at: Score at which the player stops drawing
            stake: Amount wagered per round
            double_up: Double the stake after each loss, reset it after a win

        Raises:
            DeckExhaustedError: If the deck runs out mid-simulation.
        """
        if number_of_hands < 1:
            raise ValueError("Number of hands must be at least 1")
        rules = Rules(stick_at)

        if number_of_hands == 1:
            return format_round(self._play_round(rules, 1))

        stats = SimulationStats(create_stake_strategy(stake, double_up))
        for round_number in range(1, number_of_hands + 1):
            stats.update(self._play_round(rules, round_number))

        self.last_stats = stats
        summary = format_summary(stats)
        logger.info(summary)
        self.emitter.emit(
            EngineEventType.SIMULATION_RESULT, {"stats": stats, "summary": summary}
        )
        return summary

    def __repr__(self) -> str:
        return f"BlackjackGame({self.deck})"
