"""
Players: the shared contract plus the two built-in variants.

A ``Player`` is identified by its name only: two players with the same name
compare equal and hash the same, whatever their strategy. This lets the hand
engine key bids, tricks and hands by player.

- ``AutomatedPlayer`` bids one per trump held and plays by fixed rules
  (see ``whist.play.choose_rule_based``).
- ``HumanPlayer`` asks on the console and re-prompts until the answer is legal.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from .deck import Card
from .display import format_hand
from .play import choose_rule_based, count_trumps, has_suit


class Player(ABC):
    """Base player: name-based identity, abstract bid/play decisions."""

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Player name must not be empty")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @abstractmethod
    def compute_bid(self, trump: Card, tricks_this_hand: int, hand: Sequence[Card]) -> int:
        """Return a bid in ``[0, tricks_this_hand]``."""

    @abstractmethod
    def choose_card(
        self,
        trump: Card,
        led: Card | None,
        hand: list[Card],
    ) -> tuple[Card, list[Card]]:
        """
        Pick a card from ``hand``; return it together with the remaining hand.

        When ``led`` is given and the hand holds that suit, the card must be of the led suit.
        """

    def render_hand(self, hand: Sequence[Card]) -> None:
        """Presentation hook; automated players show nothing by default."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


def _without(hand: list[Card], card: Card) -> list[Card]:
    remaining = list(hand)
    remaining.remove(card)
    return remaining


class AutomatedPlayer(Player):
    """Rule-based opponent. Pure given (trump, led, hand); never blocks."""

    def compute_bid(self, trump: Card, tricks_this_hand: int, hand: Sequence[Card]) -> int:
        return count_trumps(hand, trump)

    def choose_card(
        self,
        trump: Card,
        led: Card | None,
        hand: list[Card],
    ) -> tuple[Card, list[Card]]:
        card = choose_rule_based(trump, led, hand)
        return card, _without(hand, card)


class HumanPlayer(Player):
    """
    Console player.

    ``input_fn`` and ``print_fn`` default to the builtins; tests inject fakes.
    Invalid answers (non-numbers, out-of-range bids or indices, revoking) are
    reported and asked again; they never reach the engine.
    """

    def __init__(
        self,
        name: str,
        input_fn: Callable[[str], str] | None = None,
        print_fn: Callable[..., None] | None = None,
    ) -> None:
        super().__init__(name)
        self._input = input_fn or input
        self._print = print_fn or print

    def render_hand(self, hand: Sequence[Card]) -> None:
        self._print(format_hand(hand))

    def _ask_int(self, prompt: str) -> int | None:
        raw = self._input(prompt).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def compute_bid(self, trump: Card, tricks_this_hand: int, hand: Sequence[Card]) -> int:
        self._print()
        self._print(f"Trump this hand is: {trump}")
        self._print()
        self.render_hand(hand)
        self._print()
        while True:
            bid = self._ask_int("What do you bid? ")
            if bid is None:
                self._print("The value you provided is not a number.")
            elif bid < 0 or bid > tricks_this_hand:
                self._print("Your bid must be between 0 and the number of tricks in the hand.")
                self._print(f"Please bid between 0 and {tricks_this_hand}")
            else:
                return bid

    def choose_card(
        self,
        trump: Card,
        led: Card | None,
        hand: list[Card],
    ) -> tuple[Card, list[Card]]:
        if not hand:
            raise ValueError(f"{self.name} has no cards to play")
        self._print()
        self._print("Here is your hand")
        self.render_hand(hand)
        self._print()
        self._print(f"Trump is: {trump}")
        if led is not None:
            self._print(f"Led card is: {led}")
        else:
            self._print("You are the lead player")
        self._print()
        while True:
            index = self._ask_int("What card would you like to play? ")
            if index is None or not 0 <= index < len(hand):
                self._print("Tried selecting a card you don't have.")
                self._print("Here is your hand.")
                self.render_hand(hand)
                continue
            card = hand[index]
            if led is not None and card.suit != led.suit and has_suit(hand, led.suit):
                self._print("You must follow suit")
                continue
            return card, _without(hand, card)
