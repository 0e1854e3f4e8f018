"""Sea cucumber: move two herds until they stop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_EAST = ">"
_SOUTH = "v"
_EMPTY = "."
_CELLS = frozenset({_EAST, _SOUTH, _EMPTY})


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def _validate(floor) -> list[list[str]]:
    grid = [list(row) for row in floor]
    if not grid or not grid[0]:
        raise ValueError("empty sea floor")
    width = len(grid[0])
    for row in grid:
        if len(row) != width:
            raise ValueError("rows differ in length")
        if not set(row) <= _CELLS:
            raise ValueError("sea floor may hold only '>', 'v' and '.'")
    return grid


def parse_floor(text: str) -> list[list[str]]:
    """Parse the sea floor into rows of cells."""
    return _validate(line.strip() for line in text.splitlines() if line.strip())


def _move(grid, herd: str, dr: int, dc: int) -> tuple[list[list[str]], bool]:
    rows, cols = len(grid), len(grid[0])
    result = [row[:] for row in grid]
    moved = False
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != herd:
                continue
            tr, tc = (r + dr) % rows, (c + dc) % cols
            if grid[tr][tc] == _EMPTY:
                result[r][c] = _EMPTY
                result[tr][tc] = herd
                moved = True
    return result, moved


def step(floor) -> tuple[list[list[str]], bool]:
    """Move the east herd, then the south herd; report whether any moved."""
    grid = _validate(floor)
    grid, east_moved = _move(grid, _EAST, 0, 1)
    grid, south_moved = _move(grid, _SOUTH, 1, 0)
    return grid, east_moved or south_moved


def steps_until_still(floor) -> int:
    """Number of the first step on which no sea cucumber moves."""
    grid = _validate(floor)
    rounds = 0
    while True:
        grid, moved = step(grid)
        rounds += 1
        if not moved:
            return rounds


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day25", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    print(steps_until_still(parse_floor(_read_text(args.input))))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())