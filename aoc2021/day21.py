"""Dirac dice: a deterministic and a quantum game on a circular track."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from functools import cache
from itertools import cycle, product
from pathlib import Path

_TRACK = 10
_ROLL_TOTALS = Counter(sum(roll) for roll in product((1, 2, 3), repeat=3))
_START = re.compile(r"(\d+)\s*$")


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def _check_start(position: int) -> None:
    if not 1 <= position <= _TRACK:
        raise ValueError(f"starting position out of range: {position}")


def parse_starts(text: str) -> list[int]:
    """Parse ``Player N starting position: P`` lines into positions 1..10."""
    starts = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _START.search(line)
        if match is None:
            raise ValueError(f"malformed starting position: {line!r}")
        position = int(match[1])
        _check_start(position)
        starts.append(position)
    if not starts:
        raise ValueError("no players given")
    return starts


def deterministic_game(starts, target: int = 1000) -> tuple[int, list[int]]:
    """Play with a die rolling 1, 2, 3, ... until a score reaches target.

    Returns the number of rolls and the final scores.
    """
    positions = []
    for start in starts:
        _check_start(start)
        positions.append(start - 1)
    if not positions:
        raise ValueError("no players given")
    scores = [0] * len(positions)
    die = 1
    rolls = 0
    for player in cycle(range(len(positions))):
        positions[player] = (positions[player] + 3 * die + 3) % _TRACK
        scores[player] += positions[player] + 1
        die += 3
        rolls += 3
        if scores[player] >= target:
            return rolls, scores
    raise AssertionError("unreachable")


def dirac_wins(start_a: int, start_b: int, target: int = 21) -> tuple[int, int]:
    """Count the universes in which each player wins with the three-sided die."""
    _check_start(start_a)
    _check_start(start_b)
    if target < 1:
        raise ValueError("target must be at least 1")

    @cache
    def play(position: int, score: int, other: int, other_score: int):
        # The other player has just moved; the first pair is about to move.
        if other_score >= target:
            return 0, 1
        mine = theirs = 0
        for total, weight in _ROLL_TOTALS.items():
            moved = (position + total) % _TRACK
            their_wins, my_wins = play(other, other_score, moved, score + moved + 1)
            mine += weight * my_wins
            theirs += weight * their_wins
        return mine, theirs

    return play(start_a - 1, 0, start_b - 1, 0)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day21", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    starts = parse_starts(_read_text(args.input))
    rolls, scores = deterministic_game(starts)
    print(rolls * min(scores))
    if len(starts) == 2:
        print(max(dirac_wins(*starts)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())