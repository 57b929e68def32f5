import logging
from unittest.mock import MagicMock

import pytest

from twentyone.blackjack.game import BlackjackGame
from twentyone.common.exceptions import BustedError, DeckExhaustedError
from twentyone.events import EngineEventType


def test_new_game_builds_full_deck(io):
    for num_decks in (1, 3, 8):
        game = BlackjackGame(num_decks=num_decks, io_interface=io)
        assert game.deck.size == 52 * num_decks


def test_unshuffled_game_keeps_deck_order(ordered_game):
    assert [str(card) for card in ordered_game.deck.cards[:3]] == ["Ace♠", "2♠", "3♠"]


def test_deal_five_from_ordered_deck_busts(ordered_game, io):
    result = ordered_game.deal(5)

    assert [str(card) for card in result.hand.cards] == [
        "Ace♠",
        "2♠",
        "3♠",
        "4♠",
        "5♠",
    ]
    assert result.points == 25
    assert result.busted
    assert io.sent_messages == ["Busted"]
    assert ordered_game.deck.size == 47


def test_deal_two_reports_points(ordered_game, io):
    result = ordered_game.deal(2)

    assert not result.busted
    assert result.points == 13
    assert io.sent_messages == ["Ace♠ 2♠ for 13 points"]
    assert ordered_game.deck.size == 50


def test_game_keeps_dealing_after_bust(rigged_game, io):
    game = rigged_game("Ks Qs 5h 10c 9d")
    assert game.deal(3).busted
    result = game.deal(2)
    assert not result.busted
    assert io.sent_messages == ["Busted", "10♣ 9♦ for 19 points"]
    assert game.deck.is_empty()


def test_example_session_on_fresh_deck(ordered_game, io):
    for num_cards in range(1, 6):
        ordered_game.deal(num_cards)

    assert io.sent_messages == [
        "Ace♠ for 11 points",
        "2♠ 3♠ for 5 points",
        "4♠ 5♠ 6♠ for 15 points",
        "Busted",
        "Busted",
    ]
    assert ordered_game.deck.size == 52 - 15


def test_deal_exactly_21_is_not_bust(rigged_game, io):
    result = rigged_game("As Kh").deal(2)
    assert not result.busted
    assert io.sent_messages == ["Ace♠ King♥ for 21 points"]


def test_deal_zero_cards(ordered_game, io):
    result = ordered_game.deal(0)
    assert result.points == 0
    assert io.sent_messages == [" for 0 points"]
    assert ordered_game.deck.size == 52


def test_deal_emits_events(ordered_game):
    dealt = MagicMock()
    busted = MagicMock()
    ordered_game.emitter.on(EngineEventType.HAND_DEALT, dealt)
    ordered_game.emitter.on(EngineEventType.HAND_BUSTED, busted)

    ordered_game.deal(2)
    ordered_game.deal(5)

    dealt.assert_called_once()
    assert dealt.call_args.args[0]["points"] == 13
    busted.assert_called_once()
    payload = busted.call_args.args[0]
    assert isinstance(payload["error"], BustedError)
    assert payload["points"] == 3 + 4 + 5 + 6 + 7


def test_deal_from_exhausted_deck(ordered_game, io):
    ordered_game.deal(50)
    with pytest.raises(DeckExhaustedError):
        ordered_game.deal(3)
    # Nothing was drawn by the failed call
    assert ordered_game.deck.size == 2
    assert io.sent_messages == ["Busted"]


def test_deal_negative(ordered_game):
    with pytest.raises(ValueError):
        ordered_game.deal(-1)


def test_failing_output_is_logged_not_raised(rigged_game, io, caplog):
    game = rigged_game("Ks Qs 5h")
    io.output = MagicMock(side_effect=OSError("disk full"))

    with caplog.at_level(logging.ERROR, logger="twentyone.events"):
        result = game.deal(3)

    assert result.busted
    assert result.points == 25
    io.output.assert_called_once_with("Busted")
    assert "disk full" in caplog.text
    assert game.deck.is_empty()


def test_deal_logs_at_debug(ordered_game, caplog):
    with caplog.at_level(logging.DEBUG, logger="twentyone.blackjack.game"):
        ordered_game.deal(2)
    assert "Dealt Ace♠ 2♠ for 13 points" in caplog.text
