"""
Trick-taking: legal moves, trick winner, and the rule-based card choice.
Must follow the led suit when able; otherwise any card. Trump beats led suit beats the rest.
"""
from __future__ import annotations

from typing import Hashable, Sequence, TypeVar

from .deck import Card, Suit

P = TypeVar("P", bound=Hashable)

TRUMP_WEIGHT = 3
LED_WEIGHT = 2
OTHER_WEIGHT = 1


def suit_weight(suit: Suit, trump_suit: Suit, led_suit: Suit) -> int:
    """Priority of a suit within one trick: trump 3, led 2 (when not trump), others 1."""
    if suit == trump_suit:
        return TRUMP_WEIGHT
    if suit == led_suit:
        return LED_WEIGHT
    return OTHER_WEIGHT


def trick_winner(trump: Card, plays: Sequence[tuple[P, Card]]) -> P:
    """
    Player who wins the trick. ``plays`` is (player, card) in play order; the first entry led.
    Sorting key is (suit weight, rank); with a single deck no two plays can tie.
    """
    if not plays:
        raise ValueError("Cannot score an empty trick")
    led_suit = plays[0][1].suit
    ranked = [
        (suit_weight(card.suit, trump.suit, led_suit), int(card.rank), index, player)
        for index, (player, card) in enumerate(plays)
    ]
    # Equal (weight, rank) falls back to play order; unreachable with one deck.
    ranked.sort(key=lambda t: (-t[0], -t[1], t[2]))
    return ranked[0][3]


def cards_in_suit(hand: Sequence[Card], suit: Suit) -> list[Card]:
    return [c for c in hand if c.suit == suit]


def has_suit(hand: Sequence[Card], suit: Suit) -> bool:
    return any(c.suit == suit for c in hand)


def legal_plays(hand: Sequence[Card], led: Card | None) -> list[Card]:
    """Cards that may be played: all of them when leading, else the led suit if held."""
    if led is None:
        return list(hand)
    same = cards_in_suit(hand, led.suit)
    return same if same else list(hand)


def follows_suit(card: Card, led: Card | None, hand: Sequence[Card]) -> bool:
    """True if playing ``card`` from ``hand`` respects the follow-suit rule."""
    return card in legal_plays(hand, led)


def count_trumps(hand: Sequence[Card], trump: Card) -> int:
    return sum(1 for c in hand if c.suit == trump.suit)


def _highest(cards: Sequence[Card]) -> Card:
    return max(cards)


def _lowest(cards: Sequence[Card]) -> Card:
    return min(cards)


def choose_rule_based(trump: Card, led: Card | None, hand: Sequence[Card]) -> Card:
    """
    Deterministic card choice for automated players.

    Leading: highest trump, else highest card.
    Following: lowest of the led suit, else lowest trump, else highest card (slough).
    """
    if not hand:
        raise ValueError("Cannot choose a card from an empty hand")
    trumps = cards_in_suit(hand, trump.suit)
    if led is None:
        if trumps:
            return _highest(trumps)
        return _highest(hand)
    same = cards_in_suit(hand, led.suit)
    if same:
        return _lowest(same)
    if trumps:
        return _lowest(trumps)
    return _highest(hand)
