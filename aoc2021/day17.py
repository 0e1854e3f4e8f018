"""Trick shot: find probe launch velocities that land in a target area."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path

_TARGET = re.compile(r"target area:\s*x=(-?\d+)\.\.(-?\d+),\s*y=(-?\d+)\.\.(-?\d+)")


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


@dataclass(frozen=True)
class TargetArea:
    """A rectangle ahead of and below the launch point."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    def __post_init__(self) -> None:
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError("target bounds are reversed")
        if self.x_min <= 0:
            raise ValueError("target must lie ahead of the launch point")
        if self.y_max >= 0:
            raise ValueError("target must lie below the launch point")

    def contains(self, x: int, y: int) -> bool:
        return self.x_min <= x <= self.x_max and self.y_min <= y <= self.y_max


def parse_target(text: str) -> TargetArea:
    """Parse ``target area: x=A..B, y=C..D``."""
    match = _TARGET.search(text)
    if match is None:
        raise ValueError(f"malformed target description: {text.strip()!r}")
    x1, x2, y1, y2 = (int(group) for group in match.groups())
    return TargetArea(min(x1, x2), max(x1, x2), min(y1, y2), max(y1, y2))


def simulate(velocity_x: int, velocity_y: int, target: TargetArea) -> int | None:
    """Highest point reached before landing in the target, or None on a miss."""
    x = y = peak = 0
    while x <= target.x_max and y >= target.y_min:
        if target.contains(x, y):
            return peak
        x += velocity_x
        y += velocity_y
        peak = max(peak, y)
        velocity_x = max(velocity_x - 1, 0)
        velocity_y -= 1
    return None


def search(target: TargetArea) -> tuple[int, int]:
    """Return (highest peak, number of velocities that hit the target)."""
    bound = abs(target.y_min)
    peaks = [
        peak
        for vx in range(1, target.x_max + 1)
        for vy in range(target.y_min, bound + 1)
        if (peak := simulate(vx, vy, target)) is not None
    ]
    return max(peaks), len(peaks)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day17", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    highest, count = search(parse_target(_read_text(args.input)))
    print(highest)
    print(count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())