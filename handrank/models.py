from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from .cards import Card


class Category(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Player:
    raw_hand: str
    hand: Tuple[Card, ...]
    stake: int


@dataclass(frozen=True)
class RankedPlayer:
    # rank 1 is the weakest hand of the pass, N the strongest.
    player: Player
    rank: int

    @property
    def raw_hand(self) -> str:
        return self.player.raw_hand

    @property
    def stake(self) -> int:
        return self.player.stake

    @property
    def score(self) -> int:
        return self.rank * self.player.stake

