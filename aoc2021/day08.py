"""Seven segment search: decode scrambled digit displays."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def _normalise(pattern: str) -> str:
    return "".join(sorted(pattern))


def parse_entries(text: str) -> list[tuple[tuple[str, ...], tuple[str, ...]]]:
    """Parse ``ten patterns | four outputs`` lines, sorting each pattern."""
    entries = []
    for line in text.splitlines():
        if not line.strip():
            continue
        left, bar, right = line.partition("|")
        patterns, outputs = left.split(), right.split()
        if not bar or len(patterns) != 10 or len(outputs) != 4:
            raise ValueError(f"malformed entry: {line!r}")
        entries.append(
            (
                tuple(_normalise(p) for p in patterns),
                tuple(_normalise(o) for o in outputs),
            )
        )
    return entries


def count_unique_digits(entries) -> int:
    """Count output digits that are a 1, 4, 7 or 8."""
    return sum(
        1 for _, outputs in entries for output in outputs if len(output) in _UNIQUE_LENGTHS
    )


def decode_entry(patterns, outputs) -> int:
    """Deduce the wiring from the patterns and return the output value."""
    segments = [frozenset(p) for p in patterns]
    known: dict[int, frozenset] = {}
    for pattern in segments:
        if len(pattern) in _UNIQUE_LENGTHS:
            known[_UNIQUE_LENGTHS[len(pattern)]] = pattern
    missing = {1, 4, 7, 8} - known.keys()
    if missing:
        raise ValueError(f"patterns lack digits {sorted(missing)}")

    for pattern in segments:
        if len(pattern) == 6:
            if known[1] <= pattern:
                known[9 if known[4] <= pattern else 0] = pattern
            else:
                known[6] = pattern
    six = known.get(6, frozenset())
    for pattern in segments:
        if len(pattern) == 5:
            if known[7] <= pattern:
                known[3] = pattern
            elif six and pattern <= six:
                known[5] = pattern
            else:
                known[2] = pattern

    mapping = {pattern: digit for digit, pattern in known.items()}
    value = 0
    for output in outputs:
        digit = mapping.get(frozenset(output))
        if digit is None:
            raise ValueError(f"unknown output pattern: {output!r}")
        value = value * 10 + digit
    return value


def sum_outputs(entries) -> int:
    """Sum the decoded output values of all entries."""
    return sum(decode_entry(patterns, outputs) for patterns, outputs in entries)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day08", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    entries = parse_entries(_read_text(args.input))
    print(count_unique_digits(entries))
    print(sum_outputs(entries))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())