"""Dive: follow submarine steering commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_DIRECTIONS = frozenset({"forward", "up", "down"})


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_commands(text: str) -> list[tuple[str, int]]:
    """Parse lines such as ``forward 5`` into (direction, amount) pairs."""
    commands = []
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"malformed command: {line!r}")
        direction, amount = parts
        if direction not in _DIRECTIONS:
            raise ValueError(f"unknown direction: {direction!r}")
        commands.append((direction, int(amount)))
    return commands


def final_position(commands) -> tuple[int, int]:
    """Return (horizontal, depth) when up and down change depth directly."""
    horizontal = depth = 0
    for direction, amount in commands:
        if direction == "forward":
            horizontal += amount
        elif direction == "up":
            depth -= amount
        elif direction == "down":
            depth += amount
    return horizontal, depth


def final_position_with_aim(commands) -> tuple[int, int]:
    """Return (horizontal, depth) when up and down change the aim."""
    horizontal = depth = aim = 0
    for direction, amount in commands:
        if direction == "forward":
            horizontal += amount
            depth += aim * amount
        elif direction == "up":
            aim -= amount
        elif direction == "down":
            aim += amount
    return horizontal, depth


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day02", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    commands = parse_commands(_read_text(args.input))
    horizontal, depth = final_position(commands)
    print(horizontal * depth)
    horizontal, depth = final_position_with_aim(commands)
    print(horizontal * depth)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())