"""Treachery of whales: align crab submarines with the least fuel."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_positions(text: str) -> list[int]:
    """Parse a comma-separated list of horizontal positions."""
    return [int(token) for token in text.strip().split(",") if token.strip()]


def linear_fuel(positions) -> int:
    """Fuel to align on the median when each step costs one unit."""
    ordered = sorted(positions)
    if not ordered:
        raise ValueError("no positions given")
    median = ordered[len(ordered) // 2]
    return sum(abs(median - position) for position in ordered)


def triangular_fuel(positions, target: int) -> int:
    """Fuel to move everyone to target when the n-th step costs n units."""
    return sum(n * (n + 1) // 2 for n in (abs(target - p) for p in positions))


def cheapest_triangular(positions, limit: int = 2000) -> tuple[int, int]:
    """Return (cost, target) of the cheapest target in range(limit)."""
    positions = list(positions)
    if not positions:
        raise ValueError("no positions given")
    if limit < 1:
        raise ValueError("limit must be at least 1")
    return min((triangular_fuel(positions, t), t) for t in range(limit))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day07", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    positions = parse_positions(_read_text(args.input))
    print(linear_fuel(positions))
    cost, target = cheapest_triangular(positions)
    print(f"Cost: {cost}, Pos: {target}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())