from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

RANKS = "AKQJT98765432"
RANK_ORDER = RANKS[::-1]
RANK_VALUE = {rank: idx for idx, rank in enumerate(RANK_ORDER, start=2)}

HAND_SIZE = 5
WILDCARD_RANK = "J"


@dataclass(frozen=True)
class Card:
    rank: str

    def __post_init__(self) -> None:
        if self.rank not in RANK_VALUE:
            raise ValueError(f"Invalid rank: {self.rank!r}")

    @property
    def value(self) -> int:
        return RANK_VALUE[self.rank]


@dataclass(frozen=True)
class Real:
    """A card standing for its own rank."""

    rank: int

    @property
    def order_key(self) -> Tuple[int, int]:
        return (1, self.rank)


@dataclass(frozen=True)
class Wildcard:
    """A joker: weaker than any real card, joins the best group when grouped."""

    @property
    def order_key(self) -> Tuple[int, int]:
        return (0, 0)


WILDCARD = Wildcard()

CardValue = Union[Real, Wildcard]


def card_value(card: Card, wildcard: bool = False) -> CardValue:
    if wildcard and card.rank == WILDCARD_RANK:
        return WILDCARD
    return Real(card.value)


def parse_hand(label: str) -> Tuple[Card, ...]:
    if len(label) != HAND_SIZE:
        raise ValueError(f"Invalid hand length: {label!r}")
    return tuple(Card(rank) for rank in label)


def hand_label(hand: Tuple[Card, ...]) -> str:
    return "".join(card.rank for card in hand)


def random_hand(rng: Optional[random.Random] = None, seed: Optional[int] = None) -> Tuple[Card, ...]:
    # Symbols are drawn with replacement; a hand may hold five of one rank.
    if rng is None:
        rng = random.Random(seed)
    return tuple(Card(rng.choice(RANKS)) for _ in range(HAND_SIZE))


def random_hands(count: int, seed: Optional[int] = None) -> List[Tuple[Card, ...]]:
    if count < 0:
        raise ValueError("Hand count must be non-negative")
    rng = random.Random(seed)
    return [random_hand(rng) for _ in range(count)]
