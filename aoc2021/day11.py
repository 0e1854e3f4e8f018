"""Dumbo octopus: simulate flashing energy levels."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path

_NEIGHBOURS = ((0, 1), (1, 0), (0, -1), (-1, 0), (1, 1), (-1, 1), (1, -1), (-1, -1))
_THRESHOLD = 9


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


@dataclass
class OctopusGrid:
    """Energy levels of a rectangular grid of octopuses."""

    energies: list[list[int]]

    def __post_init__(self) -> None:
        if not self.energies or not self.energies[0]:
            raise ValueError("empty octopus grid")
        width = len(self.energies[0])
        for row in self.energies:
            if len(row) != width:
                raise ValueError("rows differ in length")
            if any(not 0 <= value <= _THRESHOLD for value in row):
                raise ValueError("energy level out of range")

    @property
    def size(self) -> int:
        return len(self.energies) * len(self.energies[0])

    def copy(self) -> OctopusGrid:
        return OctopusGrid([row[:] for row in self.energies])

    def step(self) -> int:
        """Advance one step and return how many octopuses flashed."""
        grid = self.energies
        rows, cols = len(grid), len(grid[0])
        ready = []
        for r, row in enumerate(grid):
            for c in range(cols):
                row[c] += 1
                if row[c] > _THRESHOLD:
                    ready.append((r, c))
        flashes = 0
        while ready:
            r, c = ready.pop()
            # Zero marks an octopus that has already flashed this step.
            if grid[r][c] == 0:
                continue
            grid[r][c] = 0
            flashes += 1
            for dr, dc in _NEIGHBOURS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols and grid[nr][nc] != 0:
                    grid[nr][nc] += 1
                    if grid[nr][nc] > _THRESHOLD:
                        ready.append((nr, nc))
        return flashes

    def render(self) -> str:
        """Rows of digits, one line per row."""
        return "\n".join("".join(map(str, row)) for row in self.energies)

    def _frame(self, generation: int) -> str:
        lines = [
            "".join(
                f"\x1b[1m{value}\x1b[m " if value == 0 else f"{value} " for value in row
            )
            for row in self.energies
        ]
        return "\x1b[2J\x1b[H" + "\n".join(lines) + f"\nGeneration: {generation}\n"


def parse_grid(text: str) -> OctopusGrid:
    """Parse rows of digits into an octopus grid."""
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    if not all(row.isdigit() for row in rows):
        raise ValueError("grid holds a non-digit")
    return OctopusGrid([[int(ch) for ch in row] for row in rows])


def total_flashes(grid: OctopusGrid, steps: int = 100) -> int:
    """Flashes over the given number of steps; the grid itself is untouched."""
    work = grid.copy()
    return sum(work.step() for _ in range(steps))


def first_synchronised_step(grid: OctopusGrid) -> int:
    """First step in which every octopus flashes at once."""
    work = grid.copy()
    generation = 0
    while True:
        generation += 1
        if work.step() == work.size:
            return generation


def _animate(grid: OctopusGrid, delay: float) -> int:
    work = grid.copy()
    generation = 0
    while True:
        generation += 1
        flashes = work.step()
        sys.stdout.write(work._frame(generation))
        sys.stdout.flush()
        time.sleep(delay)
        if flashes == work.size:
            return generation


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day11", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    parser.add_argument("--animate", action="store_true", help="draw each step")
    args = parser.parse_args(argv)
    grid = parse_grid(_read_text(args.input))
    print(total_flashes(grid, 100))
    if args.animate:
        print(_animate(grid, 0.075))
    else:
        print(first_synchronised_step(grid))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())