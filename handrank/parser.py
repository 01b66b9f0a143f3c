from __future__ import annotations

from typing import Iterable, List

from .cards import parse_hand
from .models import Player


class MalformedLineError(ValueError):
    """Raised when an input line is not `<hand> <stake>`."""


def parse_line(line: str) -> Player:
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedLineError(f"Expected hand and stake, got {len(tokens)} token(s): {line!r}")

    raw_hand, raw_stake = tokens
    try:
        hand = parse_hand(raw_hand)
    except ValueError as exc:
        raise MalformedLineError(str(exc)) from exc

    if not (raw_stake.isascii() and raw_stake.isdigit()):
        raise MalformedLineError(f"Invalid stake: {raw_stake!r}")
    try:
        stake = int(raw_stake)
    except ValueError as exc:
        # int() caps the digit count of decimal strings.
        raise MalformedLineError(f"Invalid stake: {raw_stake[:20]}... ({len(raw_stake)} digits)") from exc

    return Player(raw_hand=raw_hand, hand=hand, stake=stake)


def parse_lines(lines: Iterable[str]) -> List[Player]:
    players: List[Player] = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            players.append(parse_line(line))
        except MalformedLineError as exc:
            raise MalformedLineError(f"line {lineno}: {exc}") from exc
    return players
