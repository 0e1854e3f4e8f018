"""Transparent origami: fold a sheet of dots."""

from __future__ import annotations

import argparse
import re
import sys
from functools import reduce
from pathlib import Path

_FOLD = re.compile(r"fold along ([xy])=(\d+)")


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_manual(text: str) -> tuple[set[tuple[int, int]], list[tuple[str, int]]]:
    """Parse dot coordinates, a blank line, then ``fold along`` instructions."""
    lines = iter(text.splitlines())
    points: set[tuple[int, int]] = set()
    for line in lines:
        line = line.strip()
        if not line:
            break
        x, sep, y = line.partition(",")
        if not sep:
            raise ValueError(f"malformed dot: {line!r}")
        points.add((int(x), int(y)))
    folds = []
    for line in lines:
        line = line.strip()
        if not line:
            continue
        match = _FOLD.fullmatch(line)
        if match is None:
            raise ValueError(f"malformed fold: {line!r}")
        folds.append((match[1], int(match[2])))
    return points, folds


def fold(points, axis: str, offset: int) -> set[tuple[int, int]]:
    """Fold the sheet along x=offset or y=offset, mirroring points beyond it."""
    if axis == "x":
        return {(2 * offset - x if x > offset else x, y) for x, y in points}
    if axis == "y":
        return {(x, 2 * offset - y if y > offset else y) for x, y in points}
    raise ValueError(f"unknown fold axis: {axis!r}")


def fold_all(points, folds) -> set[tuple[int, int]]:
    """Apply every fold in order."""
    return reduce(lambda acc, f: fold(acc, *f), folds, set(points))


def render(points) -> str:
    """Draw the dots as ``#`` on a blank background."""
    points = set(points)
    if not points:
        return ""
    if any(x < 0 or y < 0 for x, y in points):
        raise ValueError("cannot render negative coordinates")
    max_x = max(x for x, _ in points)
    max_y = max(y for _, y in points)
    return "\n".join(
        "".join("#" if (x, y) in points else " " for x in range(max_x + 1))
        for y in range(max_y + 1)
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day13", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    points, folds = parse_manual(_read_text(args.input))
    if folds:
        print(len(fold(points, *folds[0])))
    print(render(fold_all(points, folds)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())