"""
Command-line interface for playing and simulating Contract Whist.

Usage examples (after installing in editable mode):

    python -m whist.cli play --opponents 3 --name Alice
    python -m whist.cli simulate --players 4 --matches 200 --seed 1
"""
from __future__ import annotations

import argparse
import logging
import random
from typing import Optional

from .display import MAX_DISPLAY_WIDTH, format_cumulative, format_plays, format_scores
from .game import (
    AI_PLAYER_NAMES,
    MAX_OPPONENTS,
    SHORT_TRICKS_PER_HAND,
    TRICKS_PER_HAND,
    HandFinished,
    MatchConfig,
    run_match,
)
from .players import AutomatedPlayer, HumanPlayer, Player
from .simulate import simulate_matches
from .trick import TrickFinished


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--short",
        action="store_true",
        help="Play the short schedule of hands (1, 3, 5, 7, 1 tricks).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for shuffling.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for engine events.",
    )


def _config_from_args(args: argparse.Namespace) -> MatchConfig:
    tricks = SHORT_TRICKS_PER_HAND if args.short else TRICKS_PER_HAND
    return MatchConfig(tricks_per_hand=tuple(tricks), seed=args.seed)


def _ask_opponents() -> int:
    while True:
        print("How many computer opponents would you like to play with?")
        print(f"Choose a number between 1 and {MAX_OPPONENTS}.")
        raw = input().strip()
        try:
            num = int(raw)
        except ValueError:
            print("The value you provided is not a number!")
            continue
        if 1 <= num <= MAX_OPPONENTS:
            return num
        print(f"{num} is not between 1 and {MAX_OPPONENTS}")


def _ask_name() -> str:
    while True:
        print("What is your name?")
        name = input().strip()
        if name:
            return name
        print("Please provide a name!")


def _add_play_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "play",
        help="Play a match against automated opponents on the console.",
    )
    parser.add_argument(
        "--opponents",
        type=int,
        default=None,
        help=f"Number of computer opponents (1..{MAX_OPPONENTS}); asked if omitted.",
    )
    parser.add_argument(
        "--name",
        type=str,
        default=None,
        help="Your player name; asked if omitted.",
    )
    _add_common_arguments(parser)
    parser.set_defaults(func=_cmd_play)


def _cmd_play(args: argparse.Namespace) -> None:
    print()
    print(f"{'Welcome to Contract Whist!':^{MAX_DISPLAY_WIDTH}}")
    print()

    try:
        num_opponents = args.opponents if args.opponents is not None else _ask_opponents()
        name = args.name if args.name else _ask_name()
    except (EOFError, KeyboardInterrupt):
        print()
        print("Game abandoned.")
        raise SystemExit(1)

    if not 1 <= num_opponents <= MAX_OPPONENTS:
        raise SystemExit(f"--opponents must be between 1 and {MAX_OPPONENTS}")
    if name in AI_PLAYER_NAMES[:num_opponents]:
        raise SystemExit(f"The name {name!r} is taken by a computer opponent")

    players: list[Player] = [HumanPlayer(name)]
    players.extend(AutomatedPlayer(n) for n in AI_PLAYER_NAMES[:num_opponents])

    def on_bids(bids: dict) -> None:
        print()
        for player, bid in bids.items():
            print(f"{player} bid {bid}")

    def on_trick(index: int, trick: TrickFinished) -> None:
        print()
        print(format_plays(trick.plays))
        print(f"{trick.winner} is the winner!")

    def on_hand_finished(index: int, finished: HandFinished, totals: dict) -> None:
        print()
        for player in players:
            print(f"{player} bid {finished.bids[player]} and won {finished.tricks_won[player]}")
        print()
        print(f"Points for Hand {index + 1}")
        print()
        finished.display_scores()
        print()
        print(f"Points through Hand {index + 1}")
        print(format_cumulative(players, totals))

    try:
        result = run_match(
            players,
            config=_config_from_args(args),
            on_hand_finished=on_hand_finished,
            on_trick=on_trick,
            on_bids=on_bids,
        )
    except (EOFError, KeyboardInterrupt):
        print()
        print("Game abandoned.")
        raise SystemExit(1)

    print()
    print(format_scores(result.totals, title="Final Scores"))


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "simulate",
        help="Play many matches between automated players and report per-seat statistics.",
    )
    parser.add_argument(
        "--players",
        type=int,
        default=4,
        help=f"Number of automated players (2..{len(AI_PLAYER_NAMES)}).",
    )
    parser.add_argument(
        "--matches",
        type=int,
        default=100,
        help="Number of matches to play.",
    )
    _add_common_arguments(parser)
    parser.set_defaults(func=_cmd_simulate)


def _cmd_simulate(args: argparse.Namespace) -> None:
    if not 2 <= args.players <= len(AI_PLAYER_NAMES):
        raise SystemExit(f"--players must be between 2 and {len(AI_PLAYER_NAMES)}")
    if args.matches < 1:
        raise SystemExit("--matches must be at least 1")
    config = _config_from_args(args)
    summary = simulate_matches(
        num_players=args.players,
        num_matches=args.matches,
        config=config,
        rng=random.Random(args.seed),
    )
    print(f"{summary.num_matches} matches, {args.players} players, hands {list(config.tricks_per_hand)}")
    print(summary.format_table())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="whist", description="Contract Whist on the console.")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_play_parser(subparsers)
    _add_simulate_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
