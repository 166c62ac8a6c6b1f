"""
Score calculation for one hand.
Exact bid: 10 + bid. Missed bid (over or under): -(10 + |bid - tricks won|).
"""
from __future__ import annotations

from typing import Hashable, Mapping, Sequence, TypeVar

P = TypeVar("P", bound=Hashable)

EXACT_BID_BONUS = 10
MISSED_BID_PENALTY = 10


def sandbag(bid: int, tricks_won: int) -> int:
    """Distance between bid and tricks actually won."""
    return abs(bid - tricks_won)


def hand_score(bid: int, tricks_won: int) -> int:
    """
    Points for one player on one hand.

    >>> hand_score(3, 3)
    13
    >>> hand_score(2, 0)
    -12
    >>> hand_score(0, 2)
    -12
    """
    miss = sandbag(bid, tricks_won)
    if miss == 0:
        return EXACT_BID_BONUS + bid
    return -(MISSED_BID_PENALTY + miss)


def score_hand(
    players: Sequence[P],
    bids: Mapping[P, int],
    tricks_won: Mapping[P, int],
) -> dict[P, int]:
    """
    Per-player scores in ``players`` order. A player with no bid is a KeyError;
    a player absent from ``tricks_won`` won no tricks.
    """
    return {p: hand_score(bids[p], tricks_won.get(p, 0)) for p in players}


def add_to_totals(totals: dict[P, int], scores: Mapping[P, int]) -> dict[P, int]:
    """Accumulate one hand's scores into running totals (mutates and returns ``totals``)."""
    for player, points in scores.items():
        totals[player] = totals.get(player, 0) + points
    return totals
