"""Amphipod: sort amphipods into their side rooms with the least energy."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections import Counter
from dataclasses import dataclass
from itertools import count
from pathlib import Path

ROOMS = {"A": 3, "B": 5, "C": 7, "D": 9}
ENERGY = {"A": 1, "B": 10, "C": 100, "D": 1000}
# Hallway columns an amphipod may stop on; the cells in front of rooms are excluded.
HALLWAY = (1, 2, 4, 6, 8, 10, 11)
_ROOM_COLUMNS = tuple(ROOMS.values())
_UNFOLDED = ("  #D#C#B#A#", "  #D#B#A#C#")


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


@dataclass(frozen=True, order=True)
class Amphipod:
    """An amphipod of a kind at a column; slot 0 is the hallway, 1.. a room from the top."""

    kind: str
    column: int
    slot: int = 0

    def __post_init__(self) -> None:
        if self.kind not in ROOMS:
            raise ValueError(f"unknown amphipod kind: {self.kind!r}")
        if self.slot < 0:
            raise ValueError("slot must not be negative")
        if self.slot == 0 and self.column not in HALLWAY:
            raise ValueError(f"amphipods cannot stop at hallway column {self.column}")
        if self.slot > 0 and self.column not in _ROOM_COLUMNS:
            raise ValueError(f"no room at column {self.column}")

    @property
    def in_hallway(self) -> bool:
        return self.slot == 0

    @property
    def home(self) -> int:
        return ROOMS[self.kind]


def _check(amphipods, depth: int) -> frozenset:
    if depth < 1:
        raise ValueError("rooms must be at least one deep")
    state = frozenset(amphipods)
    positions = {(a.column, a.slot) for a in state}
    if len(positions) != len(state):
        raise ValueError("two amphipods share a position")
    if any(a.slot > depth for a in state):
        raise ValueError("amphipod lies deeper than the rooms")
    kinds = Counter(a.kind for a in state)
    if any(kinds[kind] != depth for kind in ROOMS):
        raise ValueError(f"each kind must appear exactly {depth} times")
    return state


def parse_burrow(text: str) -> tuple[frozenset, int]:
    """Parse a burrow diagram into its amphipods and the depth of the rooms."""
    lines = [line.rstrip() for line in text.splitlines() if line.strip()]
    if len(lines) < 3 or set(lines[0].strip()) != {"#"}:
        raise ValueError("malformed burrow diagram")
    hall = lines[1]
    amphipods = []
    for column in range(1, 12):
        ch = hall[column] if column < len(hall) else "#"
        if ch in ROOMS:
            amphipods.append(Amphipod(ch, column))
        elif ch != ".":
            raise ValueError(f"unexpected hallway cell {ch!r}")
    depth = 0
    for line in lines[2:]:
        cells = [line[c] if c < len(line) else "#" for c in _ROOM_COLUMNS]
        if all(ch == "#" for ch in cells):
            break
        depth += 1
        for column, ch in zip(_ROOM_COLUMNS, cells):
            if ch in ROOMS:
                amphipods.append(Amphipod(ch, column, depth))
            elif ch != ".":
                raise ValueError(f"unexpected room cell {ch!r}")
    if depth == 0:
        raise ValueError("burrow has no rooms")
    return _check(amphipods, depth), depth


def is_organised(amphipods) -> bool:
    """True when every amphipod is inside its own room."""
    return all(not a.in_hallway and a.column == a.home for a in amphipods)


def next_states(amphipods, depth: int) -> list[tuple[int, frozenset]]:
    """Every state one move away, with the energy that move costs."""
    state = _check(amphipods, depth)
    occupied = {(a.column, a.slot): a for a in state}
    hallway = [a.column for a in state if a.in_hallway]

    def clear(start: int, end: int, mover: Amphipod) -> bool:
        low, high = sorted((start, end))
        return not any(
            low <= column <= high
            for column in hallway
            if not (mover.in_hallway and column == mover.column)
        )

    moves = []
    for amph in sorted(state):
        rest = state - {amph}
        if amph.in_hallway:
            room = amph.home
            residents = [occupied.get((room, s)) for s in range(1, depth + 1)]
            if any(r is not None and r.kind != amph.kind for r in residents):
                continue
            free = [s for s, r in enumerate(residents, 1) if r is None]
            if not free or free != list(range(1, len(free) + 1)):
                continue
            if not clear(amph.column, room, amph):
                continue
            slot = free[-1]
            cost = ENERGY[amph.kind] * (slot + abs(amph.column - room))
            moves.append((cost, rest | {Amphipod(amph.kind, room, slot)}))
            continue
        if any((amph.column, s) in occupied for s in range(1, amph.slot)):
            continue
        if amph.column == amph.home and all(
            (below := occupied.get((amph.column, s))) is not None
            and below.kind == amph.kind
            for s in range(amph.slot, depth + 1)
        ):
            continue
        for column in HALLWAY:
            if clear(amph.column, column, amph):
                cost = ENERGY[amph.kind] * (amph.slot + abs(column - amph.column))
                moves.append((cost, rest | {Amphipod(amph.kind, column)}))
    return moves


def least_energy(amphipods, depth: int) -> int:
    """Least total energy needed to organise the amphipods."""
    start = _check(amphipods, depth)
    best = {start: 0}
    tie = count()
    heap = [(0, next(tie), start)]
    done: set = set()
    while heap:
        energy, _, state = heapq.heappop(heap)
        if state in done:
            continue
        if is_organised(state):
            return energy
        done.add(state)
        for cost, following in next_states(state, depth):
            if following in done:
                continue
            total = energy + cost
            if total < best.get(following, total + 1):
                best[following] = total
                heapq.heappush(heap, (total, next(tie), following))
    raise ValueError("the amphipods cannot be organised")


def render(amphipods, depth: int) -> str:
    """Draw the burrow diagram."""
    state = _check(amphipods, depth)
    grid = [
        list("#############"),
        list("#...........#"),
        list("###.#.#.#.###"),
        *(list("  #.#.#.#.#") for _ in range(depth - 1)),
        list("  #########"),
    ]
    for amph in state:
        grid[1 + amph.slot][amph.column] = amph.kind
    return "\n".join("".join(row).rstrip() for row in grid)


def _unfold(text: str) -> str:
    lines = [line for line in text.splitlines() if line.strip()]
    lines[3:3] = _UNFOLDED
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day23", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    parser.add_argument("--unfold", action="store_true", help="insert the two hidden rows")
    parser.add_argument("--show", action="store_true", help="draw the starting burrow")
    args = parser.parse_args(argv)
    text = _read_text(args.input)
    if args.unfold:
        text = _unfold(text)
    amphipods, depth = parse_burrow(text)
    if args.show:
        print(render(amphipods, depth))
    print(least_energy(amphipods, depth))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())