"""
Batch play between automated players, for checking rule changes and seat bias.

Every match builds its own players, deck and tallies, so matches share no state.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List

import numpy as np

from .game import AI_PLAYER_NAMES, MatchConfig, run_match
from .players import AutomatedPlayer


@dataclass
class SimulationSummary:
    """Per-seat statistics over all simulated matches (seat 0 deals the first hand)."""

    names: List[str]
    totals: np.ndarray  # shape (num_matches, num_players)

    @property
    def num_matches(self) -> int:
        return int(self.totals.shape[0])

    @property
    def mean(self) -> np.ndarray:
        return self.totals.mean(axis=0)

    @property
    def std(self) -> np.ndarray:
        return self.totals.std(axis=0)

    @property
    def min(self) -> np.ndarray:
        return self.totals.min(axis=0)

    @property
    def max(self) -> np.ndarray:
        return self.totals.max(axis=0)

    def win_counts(self) -> np.ndarray:
        """Matches in which each seat had the (possibly shared) top total."""
        best = self.totals.max(axis=1, keepdims=True)
        return (self.totals == best).sum(axis=0)

    def format_table(self) -> str:
        lines = [f"{'Seat':<20} {'Mean':>8} {'Std':>8} {'Min':>6} {'Max':>6} {'Wins':>6}"]
        lines.append("-" * len(lines[0]))
        wins = self.win_counts()
        for i, name in enumerate(self.names):
            lines.append(
                f"{name:<20} {self.mean[i]:>8.2f} {self.std[i]:>8.2f} "
                f"{int(self.min[i]):>6} {int(self.max[i]):>6} {int(wins[i]):>6}"
            )
        return "\n".join(lines)


def make_automated_table(num_players: int) -> list[AutomatedPlayer]:
    if not 2 <= num_players <= len(AI_PLAYER_NAMES):
        raise ValueError(f"num_players must be between 2 and {len(AI_PLAYER_NAMES)}, got {num_players}")
    return [AutomatedPlayer(name) for name in AI_PLAYER_NAMES[:num_players]]


def simulate_matches(
    num_players: int,
    num_matches: int,
    config: MatchConfig | None = None,
    rng: random.Random | None = None,
) -> SimulationSummary:
    """Play ``num_matches`` all-automated matches and collect each seat's match total."""
    if num_matches < 1:
        raise ValueError(f"num_matches must be positive, got {num_matches}")
    if config is None:
        config = MatchConfig()
    if rng is None:
        rng = random.Random(config.seed)

    totals = np.zeros((num_matches, num_players), dtype=np.int64)
    names: list[str] = []
    for m in range(num_matches):
        players = make_automated_table(num_players)
        names = [p.name for p in players]
        result = run_match(players, config=config, rng=rng)
        totals[m] = [result.totals[p] for p in players]
    return SimulationSummary(names=names, totals=totals)
