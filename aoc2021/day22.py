"""Reactor reboot: count cubes left on after a series of cuboid steps."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass
from pathlib import Path

_NUMBER = re.compile(r"-?\d+")
_INIT_LIMIT = 50


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


@dataclass(frozen=True)
class RebootStep:
    """Turn every cube in an inclusive cuboid on or off."""

    on: bool
    x: tuple[int, int]
    y: tuple[int, int]
    z: tuple[int, int]

    def __post_init__(self) -> None:
        for low, high in self.cuboid:
            if low > high:
                raise ValueError("cuboid bounds are reversed")

    @property
    def cuboid(self) -> tuple[tuple[int, int], ...]:
        return (self.x, self.y, self.z)

    def within(self, limit: int) -> bool:
        """True when every bound lies in -limit..limit."""
        return all(-limit <= v <= limit for bounds in self.cuboid for v in bounds)


def parse_steps(text: str) -> list[RebootStep]:
    """Parse lines such as ``on x=10..12,y=10..12,z=10..12``."""
    steps = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        action, _, rest = line.partition(" ")
        if action not in ("on", "off"):
            raise ValueError(f"unknown action in {line!r}")
        numbers = [int(n) for n in _NUMBER.findall(rest)]
        if len(numbers) != 6:
            raise ValueError(f"expected six bounds in {line!r}")
        x0, x1, y0, y1, z0, z1 = numbers
        steps.append(RebootStep(action == "on", (x0, x1), (y0, y1), (z0, z1)))
    return steps


def _intersect(a, b):
    bounds = tuple((max(lo1, lo2), min(hi1, hi2)) for (lo1, hi1), (lo2, hi2) in zip(a, b))
    if any(low > high for low, high in bounds):
        return None
    return bounds


def _volume(cuboid) -> int:
    return math.prod(high - low + 1 for low, high in cuboid)


def count_on(steps) -> int:
    """Number of cubes on after all steps, starting with every cube off."""
    weights: dict = {}
    for step in steps:
        cuboid = step.cuboid
        changes: dict = {}
        for other, weight in weights.items():
            overlap = _intersect(cuboid, other)
            if overlap is not None:
                changes[overlap] = changes.get(overlap, 0) - weight
        if step.on:
            changes[cuboid] = changes.get(cuboid, 0) + 1
        for key, delta in changes.items():
            weights[key] = weights.get(key, 0) + delta
        weights = {key: weight for key, weight in weights.items() if weight}
    return sum(_volume(cuboid) * weight for cuboid, weight in weights.items())


def count_initialization(steps) -> int:
    """Cubes on after the steps that lie wholly within -50..50."""
    return count_on(step for step in steps if step.within(_INIT_LIMIT))


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day22", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    steps = parse_steps(_read_text(args.input))
    print(count_initialization(steps))
    print(count_on(steps))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())