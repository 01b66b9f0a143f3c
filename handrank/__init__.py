"""Camel Cards hand ranking primitives shared by the scoring runner and scripts."""

from .cards import Card, RANKS, WILDCARD, Real, Wildcard, parse_hand, random_hands
from .evaluator import categorize, compare_hands, hand_strength
from .models import Category, Player, RankedPlayer
from .parser import MalformedLineError, parse_line, parse_lines
from .ranking import rank, score_players, total_score

__all__ = [
    "Card",
    "RANKS",
    "WILDCARD",
    "Real",
    "Wildcard",
    "parse_hand",
    "random_hands",
    "categorize",
    "compare_hands",
    "hand_strength",
    "Category",
    "Player",
    "RankedPlayer",
    "MalformedLineError",
    "parse_line",
    "parse_lines",
    "rank",
    "score_players",
    "total_score",
]
