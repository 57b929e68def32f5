"""
Human-readable strings for dealt hands, single rounds and simulation summaries.
"""

from typing import Iterable

from twentyone.blackjack.outcome import RoundOutcome, RoundResult
from twentyone.blackjack.stats import SimulationStats
from twentyone.common.card import Card


def card_string(cards: Iterable[Card]) -> str:
    """Join card tokens with spaces, e.g. "Ace♠ 10♥ King♣"."""
    return " ".join(str(card) for card in cards)


def format_dealt(cards: Iterable[Card], points: int) -> str:
    return f"{card_string(cards)} for {points} points"


def format_busted(error: Exception) -> str:
    """Name of the error capitalized, e.g. BustedError -> "Busted"."""
    name = type(error).__name__
    if name.endswith("Error"):
        name = name[: -len("Error")]
    return name.capitalize()


def format_round(result: RoundResult) -> str:
    """Describe a single round."""
    player = card_string(result.player_hand.cards)
    dealer = card_string(result.dealer_hand.cards)
    player_points = result.player_points
    dealer_points = result.dealer_points

    match result.outcome:
        case RoundOutcome.PLAYER_BUSTED:
            return "PLAYER BUSTED, DEALER WINS!!!"
        case RoundOutcome.DEALER_BUSTED:
            return "DEALER BUSTED, PLAYER WINS!!!"
        case RoundOutcome.DEALER_WINS:
            return (
                f"DEALER WINS!!! {dealer} for {dealer_points} points beats "
                f"{player} for {player_points} points."
            )
        case RoundOutcome.PLAYER_WINS:
            return (
                f"PLAYER WINS!!! {player} for {player_points} beats "
                f"{dealer} for {dealer_points}"
            )
        case _:
            return (
                f"DRAW! {player} for {player_points} ties {dealer} for {dealer_points}"
            )


def format_summary(stats: SimulationStats) -> str:
    """Describe a multi-round simulation; draws never break the tie."""
    net_winnings = f"{stats.winnings:.2f}"
    if stats.player_wins > stats.dealer_wins:
        return (
            f"Player wins {stats.player_wins} to {stats.dealer_wins}! "
            f"{stats.draws} drawn rounds. Net winnings: {net_winnings}."
        )
    if stats.player_wins < stats.dealer_wins:
        return (
            f"Dealer wins {stats.dealer_wins} to {stats.player_wins}! "
            f"{stats.draws} drawn rounds. Net winnings: {net_winnings}."
        )
    return (
        f"Draw...{stats.player_wins} wins each. "
        f"{stats.draws} drawn rounds.  Net winnings: {net_winnings}."
    )
