"""Beacon scanner: assemble overlapping scanner reports into one map."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Mapping
from itertools import combinations
from pathlib import Path

# Each entry is (axis, sign) for the new x, y and z coordinates.
ORIENTATIONS = (
    (0, 1, 1, 1, 2, 1), (0, 1, 1, -1, 2, -1), (0, 1, 2, 1, 1, -1),
    (0, 1, 2, -1, 1, 1), (0, -1, 1, 1, 2, -1), (0, -1, 1, -1, 2, 1),
    (0, -1, 2, 1, 1, 1), (0, -1, 2, -1, 1, -1), (1, 1, 0, 1, 2, -1),
    (1, 1, 0, -1, 2, 1), (1, 1, 2, 1, 0, 1), (1, 1, 2, -1, 0, -1),
    (1, -1, 0, 1, 2, 1), (1, -1, 0, -1, 2, -1), (1, -1, 2, 1, 0, -1),
    (1, -1, 2, -1, 0, 1), (2, 1, 0, 1, 1, 1), (2, 1, 0, -1, 1, -1),
    (2, 1, 1, 1, 0, -1), (2, 1, 1, -1, 0, 1), (2, -1, 0, 1, 1, -1),
    (2, -1, 0, -1, 1, 1), (2, -1, 1, 1, 0, 1), (2, -1, 1, -1, 0, -1),
)
MIN_OVERLAP = 12


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_scanners(text: str) -> list[list[tuple[int, int, int]]]:
    """Parse scanner reports separated by blank lines or ``--- scanner`` headers.

    Coordinates may be separated by commas or whitespace.
    """
    scanners: list[list[tuple[int, int, int]]] = []
    current: list[tuple[int, int, int]] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("---"):
            if current:
                scanners.append(current)
                current = []
            continue
        parts = line.replace(",", " ").split()
        if len(parts) != 3:
            raise ValueError(f"malformed beacon: {line!r}")
        x, y, z = (int(part) for part in parts)
        current.append((x, y, z))
    if current:
        scanners.append(current)
    if not scanners:
        raise ValueError("no scanner reports")
    return scanners


def orient(orientation, point) -> tuple[int, int, int]:
    """Rotate a point by one of the orientations."""
    ax, sx, ay, sy, az, sz = orientation
    return (point[ax] * sx, point[ay] * sy, point[az] * sz)


def _match(aligned: set, beacons):
    """Find an orientation and translation placing beacons onto aligned ones."""
    for orientation in ORIENTATIONS:
        rotated = [orient(orientation, p) for p in beacons]
        shifts = Counter(
            (a[0] - b[0], a[1] - b[1], a[2] - b[2]) for a in aligned for b in rotated
        )
        if not shifts:
            return None
        shift, count = shifts.most_common(1)[0]
        if count >= MIN_OVERLAP:
            placed = {
                (p[0] + shift[0], p[1] + shift[1], p[2] + shift[2]) for p in rotated
            }
            return placed, shift
    return None


def align_scanners(scanners):
    """Align every scanner to the first one.

    Returns the set of all beacons in the first scanner's frame and a mapping
    from scanner index to that scanner's position.
    """
    scanners = [list(scanner) for scanner in scanners]
    if not scanners:
        raise ValueError("no scanners given")
    beacons = set(scanners[0])
    positions: dict[int, tuple[int, int, int]] = {0: (0, 0, 0)}
    pending = set(range(1, len(scanners)))
    while pending:
        progress = False
        for index in sorted(pending):
            found = _match(beacons, scanners[index])
            if found is None:
                continue
            placed, shift = found
            beacons |= placed
            positions[index] = shift
            pending.discard(index)
            progress = True
        if not progress:
            raise ValueError(f"scanners {sorted(pending)} overlap no aligned scanner")
    return beacons, positions


def largest_distance(positions) -> int:
    """Largest Manhattan distance between any two positions."""
    points = list(positions.values() if isinstance(positions, Mapping) else positions)
    if not points:
        raise ValueError("no positions given")
    return max(
        (sum(abs(a - b) for a, b in zip(p, q)) for p, q in combinations(points, 2)),
        default=0,
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day19", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    beacons, positions = align_scanners(parse_scanners(_read_text(args.input)))
    print(len(beacons))
    print(largest_distance(positions))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())