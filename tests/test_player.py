import io
import random

import pytest

from deadmansdraw.cards import Cannon, Chest, Kraken, Mermaid
from deadmansdraw.player import NAMES, Player, random_name


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def player(out):
    return Player("Sam", out)


def test_play_single_card_does_not_bust(player, out):
    assert player.play(Cannon(None, 3)) is False
    text = out.getvalue()
    assert "Sam Draws a Cannon(3)" in text
    assert "temp" in text


def test_play_none_counts_as_bust(player, out):
    assert player.play(None) is True
    assert "Error: Attempted to play a null card." in out.getvalue()


def test_duplicate_suit_busts_and_clears_play_area(player, out):
    assert player.play(Cannon(None, 3)) is False
    assert player.play(Cannon(None, 5)) is True
    assert "BUST!" in out.getvalue()
    assert player.format_play_area() == ""
    player.bank_cards()
    assert player.score == 0


def test_has_busted_false_for_distinct_suits(player):
    player.play(Cannon(None, 3))
    player.play(Chest(None, 4))
    player.play(Kraken(None, 2))
    assert player.has_busted() is False


def test_bank_cards_adds_values_to_score(player):
    cards = [Cannon(None, 3), Chest(None, 4), Mermaid(None, 9)]
    for card in cards:
        player.play(card)
    player.bank_cards()
    assert player.score == sum(card.value for card in cards)
    assert player.format_play_area() == ""


def test_bank_accumulates_over_turns(player):
    player.play(Cannon(None, 3))
    player.bank_cards()
    player.play(Cannon(None, 5))
    player.bank_cards()
    assert player.score == 8
    assert player.has_busted() is False


def test_format_bank_groups_by_suit_highest_first(player):
    player.play(Chest(None, 2))
    player.play(Cannon(None, 3))
    player.bank_cards()
    player.play(Cannon(None, 5))
    player.bank_cards()
    lines = player.format_bank().splitlines()
    assert lines[0] == "Sam's Bank:"
    assert lines[1] == "Cannon(5) Cannon(3)"
    assert lines[2] == "Chest(2)"
    assert lines[-1] == f"| Score: {player.score}"


def test_format_play_area_orders_suits(player):
    player.play(Kraken(None, 4))
    player.play(Cannon(None, 6))
    assert player.format_play_area().splitlines() == ["Cannon(6)", "Kraken(4)"]


def test_print_bank_writes_formatted_bank(player, out):
    player.play(Chest(None, 7))
    player.bank_cards()
    out.truncate(0)
    out.seek(0)
    player.print_bank()
    assert out.getvalue() == player.format_bank() + "\n"


def test_random_name_comes_from_names():
    rng = random.Random(42)
    names = {random_name(rng) for _ in range(50)}
    assert names <= set(NAMES)


def test_default_name_is_from_names():
    assert Player(output=io.StringIO()).name in NAMES


def test_names_list():
    assert NAMES[0] == "Sam"
    assert NAMES[-1] == "Marge"
    assert len(NAMES) == 10
    rng = random.Random(0)
    drawn = {random_name(rng) for _ in range(1000)}
    assert drawn == set(NAMES)