"""
Distribution (deal) for 2..N players from a single 52-card deck.
Trump card is drawn first, then one card per player per round, in seating order.
Bid and lead order start at the dealer and go around the table.
"""
from __future__ import annotations

import random
from typing import NamedTuple, Sequence, TypeVar

from .deck import DECK_SIZE, Card, Deck
from .players import Player

T = TypeVar("T")

MIN_PLAYERS = 2


class Deal(NamedTuple):
    """Result of a deal. Hands are lists (mutated during play)."""
    hands: dict[Player, list[Card]]
    trump: Card
    dealer: Player


def cards_needed(num_tricks: int, num_players: int) -> int:
    """Trump card plus one card per player per trick."""
    return num_tricks * num_players + 1


def check_capacity(num_tricks: int, num_players: int, deck_size: int = DECK_SIZE) -> None:
    """Raise ValueError when a hand of ``num_tricks`` cannot be dealt to ``num_players``."""
    if num_players < MIN_PLAYERS:
        raise ValueError(f"Need at least {MIN_PLAYERS} players, got {num_players}")
    if num_tricks < 1:
        raise ValueError(f"A hand needs at least one trick, got {num_tricks}")
    needed = cards_needed(num_tricks, num_players)
    if needed > deck_size:
        raise ValueError(
            f"{num_tricks} tricks for {num_players} players needs {needed} cards; deck holds {deck_size}"
        )


def check_unique_names(players: Sequence[Player]) -> None:
    names = [p.name for p in players]
    if len(set(names)) != len(names):
        raise ValueError(f"Player names must be unique: {names}")


def rotate_to(order: Sequence[T], pivot: T) -> list[T]:
    """
    Rotate ``order`` so ``pivot`` sits at index 0, keeping relative order.
    [A, B, C, D] pivoted on C gives [C, D, A, B].
    """
    order = list(order)
    start = order.index(pivot)
    return order[start:] + order[:start]


def first_to_bid(players: Sequence[Player], dealer: Player) -> list[Player]:
    """The dealer bids first; the rest follow in seating order."""
    return rotate_to(players, dealer)


def first_to_play(players: Sequence[Player], dealer: Player) -> list[Player]:
    """The dealer leads the first trick."""
    return rotate_to(players, dealer)


def dealer_for_hand(players: Sequence[Player], hand_index: int) -> Player:
    """Deal passes one seat to the left each hand."""
    return players[hand_index % len(players)]


def deal_hand(
    players: Sequence[Player],
    num_tricks: int,
    dealer: Player,
    deck: Deck | None = None,
    rng: random.Random | None = None,
) -> Deal:
    """
    Deal one hand. A fresh shuffled deck is used unless ``deck`` is given
    (an injected deck is dealt as-is, top card first).
    """
    check_unique_names(players)
    check_capacity(num_tricks, len(players))
    if dealer not in players:
        raise ValueError(f"Dealer {dealer} is not seated at this table")
    if deck is None:
        deck = Deck.shuffled(rng)
    if deck.remaining() < cards_needed(num_tricks, len(players)):
        raise ValueError(
            f"Deck has {deck.remaining()} cards; {cards_needed(num_tricks, len(players))} needed"
        )

    trump = deck.deal_one()
    hands: dict[Player, list[Card]] = {p: [] for p in players}
    for _ in range(num_tricks):
        for player in players:
            hands[player].append(deck.deal_one())

    return Deal(hands=hands, trump=trump, dealer=dealer)
