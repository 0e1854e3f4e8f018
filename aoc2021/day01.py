"""Sonar sweep: count how often sliding-window depth sums increase."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_depths(text: str) -> list[int]:
    """Parse whitespace-separated depth measurements."""
    return [int(token) for token in text.split()]


def count_window_increases(depths, window: int = 3) -> int:
    """Count windows whose sum is larger than the sum of the window before."""
    if window < 1:
        raise ValueError("window must be at least 1")
    depths = list(depths)
    if len(depths) < window:
        raise ValueError(f"need at least {window} measurements")
    # Consecutive windows share all but one value, so compare the ends only.
    return sum(1 for old, new in zip(depths, depths[window:]) if new > old)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day01", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    parser.add_argument("--window", type=int, default=3, help="window size")
    args = parser.parse_args(argv)
    depths = parse_depths(_read_text(args.input))
    print(count_window_increases(depths, args.window))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())