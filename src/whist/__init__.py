"""Contract Whist rules engine (deal, bid, tricks, exact-bid scoring)."""

__version__ = "0.1.0"

from .deck import Card, Deck, Rank, Suit, make_deck_52
from .deal import Deal, deal_hand, rotate_to, first_to_bid, first_to_play, check_capacity
from .bidding import run_bidding
from .play import legal_plays, trick_winner, choose_rule_based
from .players import Player, AutomatedPlayer, HumanPlayer
from .scoring import hand_score, score_hand
from .trick import TrickPlaying, TrickScoring, TrickFinished, run_trick
from .game import (
    HandDealing,
    HandBidding,
    HandPlaying,
    HandScoring,
    HandFinished,
    MatchConfig,
    MatchResult,
    play_hand,
    run_match,
)
