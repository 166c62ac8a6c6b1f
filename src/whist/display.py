"""Fixed-width text tables for hands and scores."""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .deck import Card

MAX_DISPLAY_WIDTH = 35


def format_hand(hand: Sequence[Card]) -> str:
    """Indexed listing of a hand; the index is what a human types to play the card."""
    lines = ["Index Card", "-" * 20]
    for index, card in enumerate(hand):
        lines.append(f"{index:^5}{str(card):^{MAX_DISPLAY_WIDTH - 5}}")
    return "\n".join(lines)


def format_scores(scores: Mapping[object, int], title: str | None = None) -> str:
    """Two-column table of player name and score, in mapping order."""
    lines: list[str] = []
    if title:
        lines.append(f"{title:^{MAX_DISPLAY_WIDTH}}")
    lines.append("     Player         Score")
    lines.append("-" * 26)
    for player, points in scores.items():
        lines.append(f"{str(player):<20} {points:^5}")
    return "\n".join(lines)


def format_cumulative(players: Iterable[object], totals: Mapping[object, int]) -> str:
    """Running totals for every seated player; players with no total yet show 0."""
    return format_scores({p: totals.get(p, 0) for p in players})


def format_plays(plays: Sequence[tuple[object, Card]]) -> str:
    return "\n".join(f"{player} played the {card}" for player, card in plays)
