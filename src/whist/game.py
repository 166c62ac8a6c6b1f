"""
Single hand and match orchestration: deal → bid → play tricks → score.

A hand moves through one object per phase:
HandDealing -> HandBidding -> HandPlaying -> HandScoring -> HandFinished.
Each transition returns the next phase and may only be called once, so phases
cannot run out of order or twice. A match is a sequence of hands with the
deal passing one seat each hand and scores accumulating.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Sequence

from .bidding import run_bidding
from .deal import (
    check_capacity,
    check_unique_names,
    deal_hand,
    dealer_for_hand,
    first_to_bid,
    first_to_play,
    rotate_to,
)
from .deck import Card, Deck
from .display import format_scores
from .players import Player
from .scoring import add_to_totals, score_hand
from .trick import Phase, TrickFinished, run_trick

log = logging.getLogger(__name__)

AI_PLAYER_NAMES = (
    "Mickey Mouse",
    "Minnie Mouse",
    "Donald Duck",
    "Daffy Duck",
    "Goofy Dog",
    "Pluto Dog",
)
MAX_OPPONENTS = len(AI_PLAYER_NAMES)

TRICKS_PER_HAND = (1, 2, 3, 4, 5, 6, 7, 6, 5, 4, 3, 2, 1)
SHORT_TRICKS_PER_HAND = (1, 3, 5, 7, 1)


class HandDealing(Phase):
    """Start of a hand: seated players, trick count and dealer are known; no cards yet."""

    def __init__(
        self,
        players: Sequence[Player],
        num_tricks: int,
        dealer: Player,
        deck: Deck | None = None,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        check_unique_names(players)
        check_capacity(num_tricks, len(players))
        self.players = list(players)
        self.num_tricks = num_tricks
        self.dealer = dealer
        self._deck = deck
        self._rng = rng

    def deal(self) -> "HandBidding":
        self._consume()
        deal = deal_hand(self.players, self.num_tricks, self.dealer, deck=self._deck, rng=self._rng)
        log.info(
            "Dealer %s deals %d card(s) each; trump is %s",
            deal.dealer, self.num_tricks, deal.trump,
        )
        for player, hand in deal.hands.items():
            log.debug("%s holds %s", player, hand)
        return HandBidding(
            players=self.players,
            num_tricks=self.num_tricks,
            dealer=deal.dealer,
            trump=deal.trump,
            hands=deal.hands,
            bid_order=first_to_bid(self.players, deal.dealer),
        )


class HandBidding(Phase):
    """Cards and trump are dealt; bids are gathered in ``bid_order``."""

    def __init__(
        self,
        players: list[Player],
        num_tricks: int,
        dealer: Player,
        trump: Card,
        hands: dict[Player, list[Card]],
        bid_order: list[Player],
    ) -> None:
        super().__init__()
        self.players = players
        self.num_tricks = num_tricks
        self.dealer = dealer
        self.trump = trump
        self.hands = hands
        self.bid_order = bid_order

    def collect_bids(
        self,
        on_bids: Callable[[dict[Player, int]], None] | None = None,
    ) -> "HandPlaying":
        self._consume()
        bids = run_bidding(self.bid_order, self.trump, self.num_tricks, self.hands)
        if on_bids is not None:
            on_bids(dict(bids))
        return HandPlaying(
            players=self.players,
            num_tricks=self.num_tricks,
            trump=self.trump,
            hands=self.hands,
            bids=bids,
            lead_order=first_to_play(self.players, self.dealer),
        )


class HandPlaying(Phase):
    """Bids are fixed; ``num_tricks`` tricks are played, each winner leading the next."""

    def __init__(
        self,
        players: list[Player],
        num_tricks: int,
        trump: Card,
        hands: dict[Player, list[Card]],
        bids: dict[Player, int],
        lead_order: list[Player],
    ) -> None:
        super().__init__()
        self.players = players
        self.num_tricks = num_tricks
        self.trump = trump
        self.hands = hands
        self.bids = bids
        self.lead_order = lead_order

    def play_tricks(
        self,
        on_trick: Callable[[int, TrickFinished], None] | None = None,
    ) -> "HandScoring":
        self._consume()
        tricks_won: dict[Player, int] = {}
        order = list(self.lead_order)
        for i in range(self.num_tricks):
            finished = run_trick(self.trump, order, self.hands)
            winner = finished.winner
            tricks_won[winner] = tricks_won.get(winner, 0) + 1
            log.info("Trick %d won by %s", i + 1, winner)
            if on_trick is not None:
                on_trick(i, finished)
            order = rotate_to(self.players, winner)

        leftover = {p: len(h) for p, h in self.hands.items() if h}
        if leftover:
            raise RuntimeError(f"Cards left in hand after the last trick: {leftover}")
        return HandScoring(players=self.players, bids=self.bids, tricks_won=tricks_won)


class HandScoring(Phase):
    """All tricks played; bids and trick counts are compared."""

    def __init__(
        self,
        players: list[Player],
        bids: dict[Player, int],
        tricks_won: dict[Player, int],
    ) -> None:
        super().__init__()
        self.players = players
        self.bids = bids
        self.tricks_won = tricks_won

    def score(self) -> "HandFinished":
        self._consume()
        scores = score_hand(self.players, self.bids, self.tricks_won)
        log.info("Hand scores: %s", {str(p): s for p, s in scores.items()})
        return HandFinished(
            scores=scores,
            bids=dict(self.bids),
            tricks_won={p: self.tricks_won.get(p, 0) for p in self.players},
        )


class HandFinished:
    """Terminal phase: read-only score table, seating order."""

    __slots__ = ("_scores", "bids", "tricks_won")

    def __init__(
        self,
        scores: dict[Player, int],
        bids: dict[Player, int],
        tricks_won: dict[Player, int],
    ):
        self._scores = scores
        self.bids = bids
        self.tricks_won = tricks_won

    @property
    def scores(self) -> dict[Player, int]:
        return dict(self._scores)

    def display_scores(self, print_fn: Callable[..., None] = print) -> None:
        print_fn(format_scores(self._scores))


def play_hand(
    players: Sequence[Player],
    num_tricks: int,
    dealer: Player,
    deck: Deck | None = None,
    rng: random.Random | None = None,
    on_trick: Callable[[int, TrickFinished], None] | None = None,
    on_bids: Callable[[dict[Player, int]], None] | None = None,
) -> HandFinished:
    """Deal, bid, play and score one hand."""
    return (
        HandDealing(players, num_tricks, dealer, deck=deck, rng=rng)
        .deal()
        .collect_bids(on_bids=on_bids)
        .play_tricks(on_trick=on_trick)
        .score()
    )


@dataclass
class MatchConfig:
    """Trick count of each hand in the match, in order, and the RNG seed."""

    tricks_per_hand: tuple[int, ...] = TRICKS_PER_HAND
    seed: int | None = None


@dataclass
class MatchResult:
    totals: dict[Player, int]
    per_hand: list[dict[Player, int]] = field(default_factory=list)


def run_match(
    players: Sequence[Player],
    config: MatchConfig | None = None,
    rng: random.Random | None = None,
    on_hand_finished: Callable[[int, HandFinished, dict[Player, int]], None] | None = None,
    on_trick: Callable[[int, TrickFinished], None] | None = None,
    on_bids: Callable[[dict[Player, int]], None] | None = None,
) -> MatchResult:
    """
    Play every hand in ``config.tricks_per_hand``. The dealer of hand i is players[i % n].
    Capacity is checked for all hands before the first card is dealt.
    Returns totals (seating order) and the per-hand scores.
    """
    if config is None:
        config = MatchConfig()
    if rng is None:
        rng = random.Random(config.seed)
    check_unique_names(players)
    for num_tricks in config.tricks_per_hand:
        check_capacity(num_tricks, len(players))

    totals: dict[Player, int] = {p: 0 for p in players}
    per_hand: list[dict[Player, int]] = []
    for index, num_tricks in enumerate(config.tricks_per_hand):
        dealer = dealer_for_hand(players, index)
        finished = play_hand(
            players, num_tricks, dealer, rng=rng, on_trick=on_trick, on_bids=on_bids,
        )
        per_hand.append(finished.scores)
        add_to_totals(totals, finished.scores)
        if on_hand_finished is not None:
            on_hand_finished(index, finished, dict(totals))
    return MatchResult(totals=totals, per_hand=per_hand)
