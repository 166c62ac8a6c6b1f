"""Tests for player identity and the automated and console players."""

import pytest

from whist.deck import Card, Rank, Suit
from whist.players import AutomatedPlayer, HumanPlayer

H, S, D, C = Suit.HEARTS, Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS
TRUMP = Card(Rank.ACE, H)


class _Console:
    """Scripted stand-in for input()/print()."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.lines = []

    def input(self, prompt=""):
        self.prompts.append(prompt)
        return self.answers.pop(0)

    def print(self, *args):
        self.lines.append(" ".join(str(a) for a in args))

    def text(self):
        return "\n".join(self.lines)


def _human(answers):
    console = _Console(answers)
    return HumanPlayer("Tester", input_fn=console.input, print_fn=console.print), console


def test_identity_is_by_name_only():
    ai = AutomatedPlayer("Sam")
    human = HumanPlayer("Sam", input_fn=lambda p: "", print_fn=lambda *a: None)
    assert ai == human
    assert hash(ai) == hash(human)
    assert AutomatedPlayer("Sam") != AutomatedPlayer("Kim")
    assert {ai: 1}[human] == 1
    assert str(ai) == "Sam"


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        AutomatedPlayer("")


def test_automated_bid_counts_trumps():
    player = AutomatedPlayer("Tester")
    hand = [Card(Rank.FOUR, H), Card(Rank.JACK, H), Card(Rank.TWO, C)]
    assert player.compute_bid(TRUMP, 3, hand) == 2
    assert player.compute_bid(TRUMP, 1, [Card(Rank.TWO, C)]) == 0


def test_automated_play_returns_remaining_hand():
    player = AutomatedPlayer("Tester")
    expected = Card(Rank.QUEEN, C)
    other = Card(Rank.TWO, S)
    played, remaining = player.choose_card(TRUMP, Card(Rank.THREE, C), [expected, other])
    assert played == expected
    assert remaining == [other]


def test_automated_play_does_not_mutate_input():
    player = AutomatedPlayer("Tester")
    hand = [Card(Rank.FOUR, H), Card(Rank.JACK, H)]
    player.choose_card(TRUMP, None, hand)
    assert len(hand) == 2


def test_human_bid_reprompts_until_valid():
    player, console = _human(["lots", "9", "-1", "2"])
    bid = player.compute_bid(TRUMP, 3, [Card(Rank.FOUR, H)])
    assert bid == 2
    assert len(console.prompts) == 4
    text = console.text()
    assert "not a number" in text
    assert "Please bid between 0 and 3" in text
    assert "Trump this hand is: Ace of Hearts" in text


def test_human_play_reprompts_on_bad_index():
    hand = [Card(Rank.FOUR, H), Card(Rank.JACK, S)]
    player, console = _human(["x", "5", "1"])
    played, remaining = player.choose_card(TRUMP, None, hand)
    assert played == Card(Rank.JACK, S)
    assert remaining == [Card(Rank.FOUR, H)]
    assert "You are the lead player" in console.text()
    assert console.text().count("Tried selecting a card you don't have.") == 2


def test_human_play_enforces_follow_suit():
    hand = [Card(Rank.FOUR, H), Card(Rank.JACK, C)]
    player, console = _human(["0", "1"])
    played, remaining = player.choose_card(TRUMP, Card(Rank.THREE, C), hand)
    assert played == Card(Rank.JACK, C)
    assert remaining == [Card(Rank.FOUR, H)]
    assert "You must follow suit" in console.text()


def test_human_may_play_anything_when_void():
    hand = [Card(Rank.FOUR, H), Card(Rank.JACK, S)]
    player, _ = _human(["0"])
    played, _remaining = player.choose_card(TRUMP, Card(Rank.THREE, C), hand)
    assert played == Card(Rank.FOUR, H)


def test_human_render_hand_lists_indices():
    player, console = _human([])
    player.render_hand([Card(Rank.FOUR, H), Card(Rank.JACK, S)])
    text = console.text()
    assert "Index Card" in text
    assert "Four of Hearts" in text
    assert "Jack of Spades" in text
