"""Tests for the hand phases and match orchestration."""
import random

import pytest

from whist.deck import Card, Deck, Rank, Suit
from whist.game import (
    HandDealing,
    MatchConfig,
    SHORT_TRICKS_PER_HAND,
    play_hand,
    run_match,
)
from whist.play import has_suit
from whist.players import AutomatedPlayer

H, S, D, C = Suit.HEARTS, Suit.SPADES, Suit.DIAMONDS, Suit.CLUBS


def stacked_deck(top_first):
    """Deck that deals ``top_first`` in the given order (trump first, then round by round)."""
    return Deck(list(reversed(top_first)))


class RecordingPlayer(AutomatedPlayer):
    """Automated player that remembers what it saw and played."""

    def __init__(self, name):
        super().__init__(name)
        self.turns = []

    def choose_card(self, trump, led, hand):
        card, remaining = super().choose_card(trump, led, hand)
        self.turns.append((led, list(hand), card))
        return card, remaining


def test_two_player_one_trick_scenario():
    p1, p2 = AutomatedPlayer("Player 1"), AutomatedPlayer("Player 2")
    deck = stacked_deck([
        Card(Rank.FIVE, H),   # trump
        Card(Rank.QUEEN, H),  # Player 1
        Card(Rank.TWO, C),    # Player 2
    ])
    bidding = HandDealing([p1, p2], 1, p1, deck=deck).deal()
    assert bidding.trump == Card(Rank.FIVE, H)
    assert bidding.hands == {p1: [Card(Rank.QUEEN, H)], p2: [Card(Rank.TWO, C)]}

    playing = bidding.collect_bids()
    assert playing.bids == {p1: 1, p2: 0}

    tricks = []
    scoring = playing.play_tricks(on_trick=lambda i, t: tricks.append(t))
    assert tricks[0].plays == [(p1, Card(Rank.QUEEN, H)), (p2, Card(Rank.TWO, C))]
    assert tricks[0].winner == p1
    assert scoring.tricks_won == {p1: 1}

    finished = scoring.score()
    assert finished.scores == {p1: 11, p2: 10}
    assert finished.tricks_won == {p1: 1, p2: 0}


def test_winner_leads_next_trick_and_scores():
    a, b, c, d = (AutomatedPlayer(n) for n in "ABCD")
    deck = stacked_deck([
        Card(Rank.TWO, S),                          # trump: spades, nobody holds one
        Card(Rank.NINE, D), Card(Rank.ACE, D), Card(Rank.TWO, D), Card(Rank.THREE, D),
        Card(Rank.THREE, H), Card(Rank.FOUR, H), Card(Rank.FIVE, H), Card(Rank.SIX, H),
    ])
    tricks = []
    finished = play_hand([a, b, c, d], 2, a, deck=deck, on_trick=lambda i, t: tricks.append(t))

    assert [p for p, _ in tricks[0].plays] == [a, b, c, d]
    assert tricks[0].winner == b
    assert [p for p, _ in tricks[1].plays] == [b, c, d, a]
    assert tricks[1].winner == d
    assert finished.bids == {a: 0, b: 0, c: 0, d: 0}
    assert finished.scores == {a: 10, b: -11, c: 10, d: -11}


def test_bid_and_lead_order_start_at_dealer():
    a, b, c, d = (AutomatedPlayer(n) for n in "ABCD")
    bidding = HandDealing([a, b, c, d], 3, c, rng=random.Random(7)).deal()
    assert bidding.bid_order == [c, d, a, b]
    playing = bidding.collect_bids()
    assert list(playing.bids) == [c, d, a, b]
    assert playing.lead_order == [c, d, a, b]


def test_hand_phases_are_single_use():
    a, b = AutomatedPlayer("A"), AutomatedPlayer("B")
    dealing = HandDealing([a, b], 2, a, rng=random.Random(3))
    bidding = dealing.deal()
    with pytest.raises(RuntimeError):
        dealing.deal()
    playing = bidding.collect_bids()
    with pytest.raises(RuntimeError):
        bidding.collect_bids()
    scoring = playing.play_tricks()
    with pytest.raises(RuntimeError):
        playing.play_tricks()
    scoring.score()
    with pytest.raises(RuntimeError):
        scoring.score()


def test_hand_rejects_overfull_deal():
    players = [AutomatedPlayer(n) for n in "ABCD"]
    with pytest.raises(ValueError):
        HandDealing(players, 13, players[0])


def test_conservation_and_follow_suit_over_many_hands():
    rng = random.Random(2024)
    for num_tricks in (1, 4, 7, 12):
        players = [RecordingPlayer(n) for n in "ABCD"]
        bidding = HandDealing(players, num_tricks, players[num_tricks % 4], rng=rng).deal()
        assert sum(len(h) for h in bidding.hands.values()) == num_tricks * 4
        hands = bidding.hands
        scoring = bidding.collect_bids().play_tricks()
        assert all(len(h) == 0 for h in hands.values())
        assert sum(scoring.tricks_won.values()) == num_tricks
        for player in players:
            assert len(player.turns) == num_tricks
            for led, hand, card in player.turns:
                if led is not None and has_suit(hand, led.suit):
                    assert card.suit == led.suit


def test_display_scores_prints_table():
    a, b = AutomatedPlayer("Alpha"), AutomatedPlayer("Beta")
    finished = play_hand([a, b], 1, a, rng=random.Random(5))
    lines = []
    finished.display_scores(print_fn=lines.append)
    assert "Alpha" in lines[0] and "Beta" in lines[0]


def test_match_totals_are_sum_of_hands():
    players = [AutomatedPlayer(n) for n in ("A", "B", "C")]
    result = run_match(players, MatchConfig(tricks_per_hand=SHORT_TRICKS_PER_HAND, seed=11))
    assert len(result.per_hand) == len(SHORT_TRICKS_PER_HAND)
    for p in players:
        assert result.totals[p] == sum(h[p] for h in result.per_hand)
    assert list(result.totals) == players


def test_match_is_reproducible_with_seed():
    config = MatchConfig(tricks_per_hand=(1, 2, 3), seed=99)
    first = run_match([AutomatedPlayer(n) for n in "AB"], config)
    second = run_match([AutomatedPlayer(n) for n in "AB"], config)
    assert first.per_hand == second.per_hand


def test_match_callback_and_capacity_check():
    players = [AutomatedPlayer(n) for n in "ABCDEFG"]
    with pytest.raises(ValueError):
        run_match(players, MatchConfig(tricks_per_hand=(1, 8)))

    seen = []
    players = [AutomatedPlayer(n) for n in "AB"]
    run_match(
        players,
        MatchConfig(tricks_per_hand=(1, 2), seed=1),
        on_hand_finished=lambda i, finished, totals: seen.append((i, totals)),
    )
    assert [i for i, _ in seen] == [0, 1]


def test_bids_reported_before_any_trick():
    p1, p2 = AutomatedPlayer("Player 1"), AutomatedPlayer("Player 2")
    deck = stacked_deck([Card(Rank.FIVE, H), Card(Rank.QUEEN, H), Card(Rank.TWO, C)])
    events = []
    play_hand(
        [p1, p2], 1, p1, deck=deck,
        on_bids=lambda bids: events.append(("bids", bids)),
        on_trick=lambda i, t: events.append(("trick", t.winner)),
    )
    assert events == [("bids", {p1: 1, p2: 0}), ("trick", p1)]


def test_match_reports_bids_once_per_hand():
    seen = []
    players = [AutomatedPlayer(n) for n in "ABC"]
    run_match(players, MatchConfig(tricks_per_hand=(1, 2, 3), seed=8), on_bids=seen.append)
    assert len(seen) == 3
    assert all(set(bids) == set(players) for bids in seen)
    # Hand i is dealt by players[i], who bids first.
    assert [next(iter(bids)) for bids in seen] == players
