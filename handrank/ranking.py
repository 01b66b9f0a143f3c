from __future__ import annotations

from typing import Iterable, List, Sequence

from .evaluator import hand_strength
from .models import Player, RankedPlayer


def rank(players: Sequence[Player], wildcard: bool = False) -> List[RankedPlayer]:
    """Order players weakest to strongest and assign dense ranks 1..N.

    The sort is stable, so identical hands keep their input order.
    """
    ordered = sorted(players, key=lambda player: hand_strength(player.hand, wildcard))
    return [RankedPlayer(player=player, rank=idx) for idx, player in enumerate(ordered, start=1)]


def total_score(ranked_players: Iterable[RankedPlayer]) -> int:
    return sum(ranked.score for ranked in ranked_players)


def score_players(players: Sequence[Player], wildcard: bool = False) -> int:
    return total_score(rank(players, wildcard))
