"""Lanternfish: count a population of spawning fish."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from pathlib import Path

_CYCLE = 9
_RESET = 6


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_timers(text: str) -> list[int]:
    """Parse a comma-separated list of fish timers."""
    timers = [int(token) for token in text.strip().split(",") if token.strip()]
    for timer in timers:
        if not 0 <= timer < _CYCLE:
            raise ValueError(f"timer out of range: {timer}")
    return timers


def simulate(timers, days: int) -> int:
    """Return the number of fish after the given number of days."""
    counts = deque([0] * _CYCLE)
    for timer in timers:
        if not 0 <= timer < _CYCLE:
            raise ValueError(f"timer out of range: {timer}")
        counts[timer] += 1
    for _ in range(days):
        counts.rotate(-1)
        counts[_RESET] += counts[-1]
    return sum(counts)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day06", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    timers = parse_timers(_read_text(args.input))
    print(simulate(timers, 80))
    print(simulate(timers, 256))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())