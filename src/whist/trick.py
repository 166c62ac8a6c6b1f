"""
One trick, as a chain of phase objects: TrickPlaying -> TrickScoring -> TrickFinished.

Each transition consumes its phase: calling it a second time raises RuntimeError,
so a trick cannot be replayed or rescored.
"""
from __future__ import annotations

import logging
from typing import Sequence

from .deck import Card
from .play import follows_suit, trick_winner
from .players import Player

log = logging.getLogger(__name__)


class Phase:
    """Single-use phase: ``_consume`` may be called once."""

    def __init__(self) -> None:
        self._consumed = False

    def _consume(self) -> None:
        if self._consumed:
            raise RuntimeError(f"{type(self).__name__} already advanced")
        self._consumed = True


class TrickPlaying(Phase):
    """
    Players in ``order`` each play one card; the first player leads.

    ``hands`` is shared with the caller and updated in place as each player plays.
    """

    def __init__(
        self,
        trump: Card,
        order: Sequence[Player],
        hands: dict[Player, list[Card]],
    ) -> None:
        super().__init__()
        if not order:
            raise ValueError("A trick needs at least one player")
        self.trump = trump
        self.order = list(order)
        self.hands = hands

    def play(self) -> "TrickScoring":
        self._consume()
        plays: list[tuple[Player, Card]] = []
        led: Card | None = None
        for player in self.order:
            hand = self.hands[player]
            if not hand:
                raise ValueError(f"{player} has no cards left to play")
            card, remaining = player.choose_card(self.trump, led, list(hand))
            if card not in hand:
                raise ValueError(f"{player} played {card}, which is not in their hand")
            if not follows_suit(card, led, hand):
                raise ValueError(f"{player} played {card} but must follow {led.suit}")
            expected = list(hand)
            expected.remove(card)
            if sorted(remaining) != sorted(expected):
                raise ValueError(f"{player} returned {remaining} after playing {card}; expected {expected}")
            self.hands[player] = list(remaining)
            plays.append((player, card))
            log.debug("%s played the %s", player, card)
            if led is None:
                led = card
        return TrickScoring(self.trump, plays)


class TrickScoring(Phase):
    """All cards are down; decide who takes the trick."""

    def __init__(self, trump: Card, plays: list[tuple[Player, Card]]) -> None:
        super().__init__()
        self.trump = trump
        self.plays = plays

    def determine_winner(self) -> "TrickFinished":
        self._consume()
        winner = trick_winner(self.trump, self.plays)
        return TrickFinished(winner=winner, plays=list(self.plays))


class TrickFinished:
    """Terminal phase: read-only winner and the cards played, in play order."""

    __slots__ = ("winner", "plays")

    def __init__(self, winner: Player, plays: list[tuple[Player, Card]]):
        self.winner = winner
        self.plays = plays

    def card_of(self, player: Player) -> Card:
        for p, card in self.plays:
            if p == player:
                return card
        raise KeyError(player)


def run_trick(trump: Card, order: Sequence[Player], hands: dict[Player, list[Card]]) -> TrickFinished:
    """Play and score one trick."""
    return TrickPlaying(trump, order, hands).play().determine_winner()
