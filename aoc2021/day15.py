"""Chiton: find the path of lowest total risk through a cave."""

from __future__ import annotations

import argparse
import heapq
import sys
from pathlib import Path

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def _check(grid) -> None:
    if not grid or not grid[0]:
        raise ValueError("empty risk map")
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("rows differ in length")


def parse_risk(text: str) -> list[list[int]]:
    """Parse rows of digits into a grid of risk levels."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not all(row.isdigit() for row in rows):
        raise ValueError("risk map holds a non-digit")
    grid = [[int(ch) for ch in row] for row in rows]
    _check(grid)
    return grid


def _wrap(value: int, shift: int) -> int:
    return value if shift == 0 else (value + shift - 1) % 9 + 1


def tile(grid, times: int = 5) -> list[list[int]]:
    """Repeat the map times by times, adding one per tile and wrapping 9 to 1."""
    _check(grid)
    if times < 1:
        raise ValueError("times must be at least 1")
    return [
        [_wrap(value, tile_row + tile_col) for tile_col in range(times) for value in row]
        for tile_row in range(times)
        for row in grid
    ]


def greedy_path_risk(grid) -> int:
    """Lowest risk of a path that only moves right or down."""
    _check(grid)
    previous: list[int] = []
    for r, row in enumerate(grid):
        current: list[int] = []
        for c, value in enumerate(row):
            if r == 0 and c == 0:
                best = 0
            elif r == 0:
                best = current[c - 1]
            elif c == 0:
                best = previous[c]
            else:
                best = min(current[c - 1], previous[c])
            current.append(value + best)
        previous = current
    return previous[-1] - grid[0][0]


def lowest_total_risk(grid) -> int:
    """Lowest risk of any path from top left to bottom right."""
    _check(grid)
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)
    best = {(0, 0): 0}
    heap = [(0, 0, 0)]
    done: set[tuple[int, int]] = set()
    while heap:
        risk, r, c = heapq.heappop(heap)
        if (r, c) in done:
            continue
        if (r, c) == target:
            return risk
        done.add((r, c))
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and (nr, nc) not in done:
                candidate = risk + grid[nr][nc]
                if candidate < best.get((nr, nc), candidate + 1):
                    best[(nr, nc)] = candidate
                    heapq.heappush(heap, (candidate, nr, nc))
    raise ValueError("bottom right corner is unreachable")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day15", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    grid = parse_risk(_read_text(args.input))
    print(greedy_path_risk(grid))
    print(lowest_total_risk(tile(grid)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())