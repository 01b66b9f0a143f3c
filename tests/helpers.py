from __future__ import annotations

from typing import Iterable, List, Tuple

from handrank.cards import Card, parse_hand
from handrank.models import Player
from handrank.parser import parse_lines

SAMPLE_LINES = [
    "32T3K 765",
    "T55J5 684",
    "KK677 28",
    "KTJJT 220",
    "QQQJA 483",
]


def hand(label: str) -> Tuple[Card, ...]:
    return parse_hand(label)


def make_players(records: Iterable[Tuple[str, int]]) -> List[Player]:
    """Build players from (hand label, stake) pairs."""
    return [Player(raw_hand=label, hand=parse_hand(label), stake=stake) for label, stake in records]


def sample_players() -> List[Player]:
    return parse_lines(SAMPLE_LINES)
