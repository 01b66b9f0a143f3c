"""Scoring runner: loads hands from disk and reports both scoring passes."""

from .runner import ScoreReport, ScoringConfig, load_players, run, write_ranked_hands

__all__ = ["ScoreReport", "ScoringConfig", "load_players", "run", "write_ranked_hands"]
