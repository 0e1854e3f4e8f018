"""Extended polymerization: grow a polymer by pair insertion."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from itertools import pairwise
from pathlib import Path


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_polymer(text: str) -> tuple[str, dict[str, str]]:
    """Parse the template and the ``AB -> C`` insertion rules."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("missing polymer template")
    template, *rule_lines = lines
    rules = {}
    for line in rule_lines:
        pair, sep, insert = line.partition(" -> ")
        if not sep or len(pair) != 2 or len(insert) != 1:
            raise ValueError(f"malformed rule: {line!r}")
        rules[pair] = insert
    return template, rules


def expand(template: str, rules) -> str:
    """Apply one step of pair insertion."""
    parts = [template[:1]]
    for a, b in pairwise(template):
        parts.append(rules.get(a + b, ""))
        parts.append(b)
    return "".join(parts)


def element_counts(template: str, rules, steps: int) -> Counter:
    """Count each element after the given number of steps."""
    counts = Counter(template)
    pairs = Counter(a + b for a, b in pairwise(template))
    for _ in range(steps):
        grown: Counter = Counter()
        for pair, n in pairs.items():
            insert = rules.get(pair)
            if insert is None:
                grown[pair] += n
                continue
            counts[insert] += n
            grown[pair[0] + insert] += n
            grown[insert + pair[1]] += n
        pairs = grown
    return counts


def spread(template: str, rules, steps: int) -> int:
    """Most common element count minus least common element count."""
    counts = element_counts(template, rules, steps)
    if not counts:
        raise ValueError("empty polymer template")
    return max(counts.values()) - min(counts.values())


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day14", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    template, rules = parse_polymer(_read_text(args.input))
    print(spread(template, rules, 10))
    print(spread(template, rules, 40))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())