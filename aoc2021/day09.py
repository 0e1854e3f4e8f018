"""Smoke basin: low points and basins of a height map."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator
from pathlib import Path

_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))
_RIDGE = 9


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_heightmap(text: str) -> list[list[int]]:
    """Parse rows of digits into a grid of heights."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty height map")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("rows differ in length")
    if not all(row.isdigit() for row in rows):
        raise ValueError("height map holds a non-digit")
    return [[int(ch) for ch in row] for row in rows]


def _neighbours(grid, row: int, col: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[0]):
            yield r, c


def low_points(grid) -> list[tuple[int, int]]:
    """Cells lower than every neighbour, in row-major order."""
    return [
        (r, c)
        for r, row in enumerate(grid)
        for c, height in enumerate(row)
        if all(height < grid[nr][nc] for nr, nc in _neighbours(grid, r, c))
    ]


def risk_level(grid) -> int:
    """Sum of one plus the height of every low point."""
    return sum(grid[r][c] + 1 for r, c in low_points(grid))


def basins(grid) -> list[set[tuple[int, int]]]:
    """Flood the area around each low point, stopping at height 9.

    Cells already claimed by an earlier basin are not claimed again.
    """
    visited: set[tuple[int, int]] = set()
    result = []
    for start in low_points(grid):
        basin: set[tuple[int, int]] = set()
        stack = [start]
        while stack:
            cell = stack.pop()
            r, c = cell
            if cell in visited or grid[r][c] == _RIDGE:
                continue
            visited.add(cell)
            basin.add(cell)
            stack.extend(_neighbours(grid, r, c))
        result.append(basin)
    return result


def largest_basins_product(grid) -> int:
    """Product of the sizes of the three largest basins."""
    sizes = sorted((len(b) for b in basins(grid)), reverse=True)
    if len(sizes) < 3:
        raise ValueError("fewer than three basins")
    return math.prod(sizes[:3])


def basin_map_pgm(grid) -> str:
    """Plain PGM image labelling each cell by its basin's rank in size."""
    ordered = sorted(basins(grid), key=len)
    labels = {cell: label for label, basin in enumerate(ordered) for cell in basin}
    rows, cols = len(grid), len(grid[0])
    lines = ["P2", f"{rows} {cols}", str(len(ordered) - 1)]
    for r in range(rows):
        lines.append("".join(f"{labels.get((r, c), 0)} " for c in range(cols)))
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day09", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    parser.add_argument("--pgm", action="store_true", help="print a PGM basin map")
    args = parser.parse_args(argv)
    grid = parse_heightmap(_read_text(args.input))
    if args.pgm:
        sys.stdout.write(basin_map_pgm(grid))
    else:
        print(risk_level(grid))
        print(largest_basins_product(grid))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())