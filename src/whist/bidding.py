"""
Bidding: each player, starting with the dealer, states how many tricks they expect to win.
Every player speaks exactly once; a bid is an integer in [0, num_tricks].
"""
from __future__ import annotations

import logging
from typing import Mapping, Sequence

from .deck import Card
from .players import Player

log = logging.getLogger(__name__)


def validate_bid(player: Player, bid: int, num_tricks: int) -> int:
    if isinstance(bid, bool) or not isinstance(bid, int):
        raise ValueError(f"{player} returned a non-integer bid: {bid!r}")
    if not 0 <= bid <= num_tricks:
        raise ValueError(f"{player} bid {bid}; bids must be between 0 and {num_tricks}")
    return bid


def run_bidding(
    order: Sequence[Player],
    trump: Card,
    num_tricks: int,
    hands: Mapping[Player, list[Card]],
) -> dict[Player, int]:
    """
    Ask every player in ``order`` for a bid. Returns {player: bid} in bidding order.
    A player missing from ``hands`` is a KeyError.
    """
    bids: dict[Player, int] = {}
    for player in order:
        hand = hands[player]
        bid = validate_bid(player, player.compute_bid(trump, num_tricks, list(hand)), num_tricks)
        bids[player] = bid
        log.info("%s bid %d", player, bid)
    return bids
