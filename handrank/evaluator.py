from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from .cards import WILDCARD, Card, CardValue, card_value
from .models import Category

Group = Tuple[CardValue, int]
Strength = Tuple[Category, Tuple[Tuple[int, int], ...]]


def card_values(hand: Sequence[Card], wildcard: bool = False) -> List[CardValue]:
    return [card_value(card, wildcard) for card in hand]


def group_values(values: Sequence[CardValue]) -> List[Group]:
    """Return (value, count) groups, largest count first, then highest value.

    A wildcard only counts as a group of its own when the hand holds nothing else.
    """
    counts: Dict[CardValue, int] = {}
    for value in values:
        counts.setdefault(value, 0)
        counts[value] += 1
    if len(counts) > 1:
        counts.pop(WILDCARD, None)
    return sorted(counts.items(), key=lambda x: (x[1], x[0].order_key), reverse=True)


def resolve_wildcards(values: Sequence[CardValue], groups: Sequence[Group]) -> List[CardValue]:
    best = groups[0][0]
    return [best if value == WILDCARD else value for value in values]


def hand_groups(hand: Sequence[Card], wildcard: bool = False) -> List[Group]:
    values = card_values(hand, wildcard)
    groups = group_values(values)
    if WILDCARD in values:
        # Second pass: jokers join the strongest real group, then everything is regrouped.
        groups = group_values(resolve_wildcards(values, groups))
    return groups


def categorize(hand: Sequence[Card], wildcard: bool = False) -> Category:
    groups = hand_groups(hand, wildcard)
    distinct = len(groups)
    top_count = groups[0][1]

    if distinct == 1:
        return Category.FIVE_OF_A_KIND
    if distinct == 2:
        return Category.FOUR_OF_A_KIND if top_count == 4 else Category.FULL_HOUSE
    if distinct == 3:
        return Category.THREE_OF_A_KIND if top_count == 3 else Category.TWO_PAIR
    if distinct == 4:
        return Category.ONE_PAIR
    return Category.HIGH_CARD


def hand_strength(hand: Sequence[Card], wildcard: bool = False) -> Strength:
    """Return a sort key for a hand. Higher is better.

    Ties within a category are broken card by card in dealt order, not sorted order.
    """
    tiebreak = tuple(value.order_key for value in card_values(hand, wildcard))
    return (categorize(hand, wildcard), tiebreak)


def compare_hands(hand_a: Sequence[Card], hand_b: Sequence[Card], wildcard: bool = False) -> int:
    """Negative when hand_a is weaker, positive when stronger, zero for identical hands."""
    strength_a = hand_strength(hand_a, wildcard)
    strength_b = hand_strength(hand_b, wildcard)
    return (strength_a > strength_b) - (strength_a < strength_b)
