"""Passage pathing: count routes through a cave system."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_START = "start"
_END = "end"


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_caves(text: str) -> dict[str, set[str]]:
    """Parse ``a-b`` lines into an undirected adjacency mapping."""
    graph: dict[str, set[str]] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        left, sep, right = line.partition("-")
        if not sep or not left or not right:
            raise ValueError(f"malformed connection: {line!r}")
        graph.setdefault(left, set()).add(right)
        graph.setdefault(right, set()).add(left)
    return graph


def is_small(name: str) -> bool:
    """A cave is small when its name is all lower-case letters."""
    return all("a" <= ch <= "z" for ch in name)


def count_paths(graph, allow_twice: bool = False) -> int:
    """Count paths from start to end visiting small caves at most once.

    With allow_twice, a single small cave other than start may be visited
    twice on each path.
    """
    if _START not in graph:
        raise ValueError("cave system has no start")

    def walk(cave: str, seen: frozenset, spare: bool) -> int:
        if cave == _END:
            return 1
        total = 0
        for nxt in graph.get(cave, ()):
            if nxt == _START:
                continue
            if nxt in seen:
                if spare:
                    total += walk(nxt, seen, False)
                continue
            total += walk(nxt, seen | {nxt} if is_small(nxt) else seen, spare)
        return total

    return walk(_START, frozenset({_START}), allow_twice)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day12", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    graph = parse_caves(_read_text(args.input))
    print(count_paths(graph))
    print(count_paths(graph, allow_twice=True))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())