"""Hydrothermal venture: count points where vent lines overlap."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterator
from pathlib import Path

_SEGMENT = re.compile(r"(-?\d+),(-?\d+)\s*->\s*(-?\d+),(-?\d+)")


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_segments(text: str) -> list[tuple[int, int, int, int]]:
    """Parse ``x1,y1 -> x2,y2`` lines into (x1, y1, x2, y2) tuples."""
    segments = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _SEGMENT.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"malformed segment: {line!r}")
        x1, y1, x2, y2 = (int(group) for group in match.groups())
        segments.append((x1, y1, x2, y2))
    return segments


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _points(segment, diagonals: bool) -> Iterator[tuple[int, int]]:
    x1, y1, x2, y2 = segment
    dx, dy = x2 - x1, y2 - y1
    if dx and dy and not diagonals:
        return
    # Walking stops as soon as either moving coordinate passes its end.
    steps = min((abs(d) for d in (dx, dy) if d), default=0)
    sx, sy = _sign(dx), _sign(dy)
    for k in range(steps + 1):
        yield x1 + k * sx, y1 + k * sy


def coverage(segments, diagonals: bool = False) -> Counter:
    """Count how many segments cover each point."""
    counts: Counter = Counter()
    for segment in segments:
        counts.update(_points(segment, diagonals))
    return counts


def count_overlaps(segments, diagonals: bool = False) -> int:
    """Number of points covered by at least two segments."""
    return sum(1 for count in coverage(segments, diagonals).values() if count > 1)


def render_pgm(segments, size: int = 1000) -> str:
    """Render the coverage, diagonals included, as a plain PGM image."""
    counts = coverage(segments, True)
    for x, y in counts:
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"point {(x, y)} lies outside a {size}x{size} image")
    lines = ["P2", f"{size} {size}", str(max(counts.values(), default=0))]
    for y in range(size):
        lines.append("".join(f"{counts[(x, y)]} " for x in range(size)))
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day05", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    parser.add_argument("--pgm", action="store_true", help="print a PGM image")
    parser.add_argument("--size", type=int, default=1000, help="image size")
    args = parser.parse_args(argv)
    segments = parse_segments(_read_text(args.input))
    if args.pgm:
        sys.stdout.write(render_pgm(segments, args.size))
    else:
        print(count_overlaps(segments, False))
        print(count_overlaps(segments, True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())