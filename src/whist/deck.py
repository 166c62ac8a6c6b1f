"""
Standard 52-card French deck: 4 suits × 13 ranks.
Ranks run Two (lowest) .. Ace (highest); suits carry no trick precedence of their own.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Hearts, Spades, Diamonds, Clubs. Order is only used for display and tie-free sorting."""
    HEARTS = 0
    SPADES = 1
    DIAMONDS = 2
    CLUBS = 3

    def __str__(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return "♥♠♦♣"[self]


class Rank(IntEnum):
    """Two..Ace, Ace high. The int value is the numerical rank used for comparisons."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.name.capitalize()

    @property
    def short(self) -> str:
        return {14: "A", 13: "K", 12: "Q", 11: "J"}.get(self.value) or str(self.value)


@dataclass(frozen=True, order=True)
class Card:
    """A single playing card. Ordered by rank first, then suit."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        assert isinstance(self.rank, Rank) and isinstance(self.suit, Suit)

    def short(self) -> str:
        return f"{self.rank.short}{self.suit.symbol}"

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"

    def __repr__(self) -> str:
        return self.short()


DECK_SIZE = 52


def make_deck_52() -> list[Card]:
    """Build a full 52-card deck, suit by suit, Two..Ace within each suit."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    Ordered stack of cards. ``deal_one`` removes from the top (end of the list).

    A fresh deck holds one card per (rank, suit) pair; ``shuffle`` randomizes
    order in place with the supplied ``random.Random``.
    """

    def __init__(self, cards: list[Card] | None = None) -> None:
        self._cards = list(cards) if cards is not None else make_deck_52()
        if len(set(self._cards)) != len(self._cards):
            raise ValueError("Deck contains duplicate cards")

    @classmethod
    def shuffled(cls, rng: random.Random | None = None) -> "Deck":
        deck = cls()
        deck.shuffle(rng)
        return deck

    def shuffle(self, rng: random.Random | None = None) -> None:
        if rng is None:
            rng = random.Random()
        rng.shuffle(self._cards)

    def deal_one(self) -> Card:
        if not self._cards:
            raise IndexError("Cannot deal from an empty deck")
        return self._cards.pop()

    def remaining(self) -> int:
        return len(self._cards)
