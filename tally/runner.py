from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

from handrank.evaluator import categorize
from handrank.models import Player, RankedPlayer
from handrank.parser import MalformedLineError, parse_lines
from handrank.ranking import rank, total_score

LOGGER = logging.getLogger("tally")

# The runner owns every file concern; handrank only ever sees parsed players.


@dataclass
class ScoringConfig:
    input_path: Path
    output_path: Optional[Path] = None
    strongest_first: bool = False


@dataclass(frozen=True)
class ScoreReport:
    standard: int
    wildcard: int


def load_players(path: Path) -> List[Player]:
    try:
        with open(path, encoding="utf-8") as fh:
            players = parse_lines(fh)
    except UnicodeDecodeError as exc:
        raise MalformedLineError(f"not valid UTF-8 text: {exc}") from exc
    LOGGER.info("Loaded %d players from %s", len(players), path)
    return players


def write_ranked_hands(ranked: Sequence[RankedPlayer], path: Path, strongest_first: bool = False) -> None:
    ordered = sorted(ranked, key=lambda entry: entry.rank, reverse=strongest_first)
    with open(path, "w", encoding="utf-8") as fh:
        for entry in ordered:
            fh.write(f"{entry.raw_hand}\n")
    LOGGER.info("Wrote %d ranked hands to %s", len(ordered), path)


def score_pass(players: Sequence[Player], wildcard: bool) -> List[RankedPlayer]:
    ranked = rank(players, wildcard=wildcard)
    mode = "wildcard" if wildcard else "standard"
    if LOGGER.isEnabledFor(logging.DEBUG):
        for entry in ranked:
            LOGGER.debug(
                "%s rank=%d hand=%s category=%s stake=%d",
                mode,
                entry.rank,
                entry.raw_hand,
                categorize(entry.player.hand, wildcard).label,
                entry.stake,
            )
    histogram = Counter(categorize(player.hand, wildcard).label for player in players)
    LOGGER.info("%s pass: %d players, categories=%s", mode, len(ranked), dict(histogram))
    return ranked


def run(config: ScoringConfig) -> ScoreReport:
    players = load_players(config.input_path)

    standard = total_score(score_pass(players, wildcard=False))
    wildcard_ranked = score_pass(players, wildcard=True)
    wildcard = total_score(wildcard_ranked)

    if config.output_path is not None:
        write_ranked_hands(wildcard_ranked, config.output_path, strongest_first=config.strongest_first)

    return ScoreReport(standard=standard, wildcard=wildcard)
