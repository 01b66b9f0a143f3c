#!/usr/bin/env python3
"""Rank batches of random hands and sanity-check the results.

Each round deals a fresh table of players with random hands and stakes, ranks
them with and without wildcards, and verifies that ranks are dense and that
ranking twice gives the same answer.

Example:
    python scripts/hand_sim.py --players 1000 --rounds 20 --seed 7
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections import Counter
from typing import Dict, List

from handrank.cards import hand_label, random_hand
from handrank.evaluator import categorize
from handrank.models import Player
from handrank.ranking import rank, total_score

LOGGER = logging.getLogger("hand_sim")


def deal_players(count: int, rng: random.Random, max_stake: int) -> List[Player]:
    players = []
    for _ in range(count):
        hand = random_hand(rng)
        players.append(Player(raw_hand=hand_label(hand), hand=hand, stake=rng.randint(0, max_stake)))
    return players


def check_round(players: List[Player], wildcard: bool) -> int:
    """Rank one table, returning its total score. Raises AssertionError on a bad ranking."""
    ranked = rank(players, wildcard=wildcard)
    ranks = sorted(entry.rank for entry in ranked)
    if ranks != list(range(1, len(players) + 1)):
        raise AssertionError(f"Ranks are not dense: {ranks[:10]}...")
    again = rank(players, wildcard=wildcard)
    if [(e.raw_hand, e.rank) for e in again] != [(e.raw_hand, e.rank) for e in ranked]:
        raise AssertionError("Ranking the same table twice gave different ranks")
    return total_score(ranked)


def run_simulation(args: argparse.Namespace) -> Dict[str, Counter]:
    histograms: Dict[str, Counter] = {"standard": Counter(), "wildcard": Counter()}
    rng = random.Random(args.seed)

    for round_idx in range(args.rounds):
        players = deal_players(args.players, rng, args.max_stake)
        standard = check_round(players, wildcard=False)
        wildcard = check_round(players, wildcard=True)
        for player in players:
            histograms["standard"][categorize(player.hand).label] += 1
            histograms["wildcard"][categorize(player.hand, wildcard=True).label] += 1
        LOGGER.info("Round %d: standard=%d wildcard=%d", round_idx + 1, standard, wildcard)

    for mode, histogram in histograms.items():
        LOGGER.info("%s categories: %s", mode, dict(histogram.most_common()))
    return histograms


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank random hands and verify rank density")
    parser.add_argument("--players", type=int, default=1_000)
    parser.add_argument("--rounds", type=int, default=10)
    parser.add_argument("--max-stake", type=int, default=1_000)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    try:
        run_simulation(args)
    except AssertionError as exc:
        LOGGER.error("Simulation found an invalid ranking: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
