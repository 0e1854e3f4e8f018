"""Snailfish: add and reduce nested pair numbers."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from functools import reduce as fold
from pathlib import Path

_EXPLODE_DEPTH = 4
_SPLIT_AT = 10


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


@dataclass(eq=False)
class SnailNumber:
    """Either a regular number (value set) or a pair of snailfish numbers."""

    value: int | None = None
    left: SnailNumber | None = None
    right: SnailNumber | None = None

    @classmethod
    def from_value(cls, data) -> SnailNumber:
        """Build from an int or a nested two-element list."""
        if isinstance(data, bool):
            raise ValueError("booleans are not snailfish numbers")
        if isinstance(data, int):
            if data < 0:
                raise ValueError("regular numbers must not be negative")
            return cls(value=data)
        if isinstance(data, list) and len(data) == 2:
            return cls(left=cls.from_value(data[0]), right=cls.from_value(data[1]))
        raise ValueError(f"not a snailfish number: {data!r}")

    @property
    def is_regular(self) -> bool:
        return self.value is not None

    def to_list(self):
        if self.is_regular:
            return self.value
        return [self.left.to_list(), self.right.to_list()]

    def __str__(self) -> str:
        return json.dumps(self.to_list(), separators=(",", ":"))

    def __eq__(self, other) -> bool:
        if not isinstance(other, SnailNumber):
            return NotImplemented
        return self.to_list() == other.to_list()

    def copy(self) -> SnailNumber:
        """An independent deep copy."""
        if self.is_regular:
            return SnailNumber(value=self.value)
        return SnailNumber(left=self.left.copy(), right=self.right.copy())

    def magnitude(self) -> int:
        """Three times the left magnitude plus twice the right, recursively."""
        if self.is_regular:
            return self.value
        return 3 * self.left.magnitude() + 2 * self.right.magnitude()

    def _nodes(self, depth: int = 0) -> Iterator[tuple[SnailNumber, int]]:
        yield self, depth
        if not self.is_regular:
            yield from self.left._nodes(depth + 1)
            yield from self.right._nodes(depth + 1)

    def _leaves(self) -> list[SnailNumber]:
        return [node for node, _ in self._nodes() if node.is_regular]

    def _explode(self) -> bool:
        for node, depth in self._nodes():
            if (
                depth >= _EXPLODE_DEPTH
                and not node.is_regular
                and node.left.is_regular
                and node.right.is_regular
            ):
                leaves = self._leaves()
                index = next(k for k, leaf in enumerate(leaves) if leaf is node.left)
                if index > 0:
                    leaves[index - 1].value += node.left.value
                if index + 2 < len(leaves):
                    leaves[index + 2].value += node.right.value
                node.value, node.left, node.right = 0, None, None
                return True
        return False

    def _split(self) -> bool:
        for leaf in self._leaves():
            if leaf.value >= _SPLIT_AT:
                half = leaf.value // 2
                leaf.left = SnailNumber(value=half)
                leaf.right = SnailNumber(value=leaf.value - half)
                leaf.value = None
                return True
        return False

    def reduce(self) -> SnailNumber:
        """Explode and split in place until neither applies; returns self."""
        while self._explode() or self._split():
            pass
        return self


def parse_number(text: str) -> SnailNumber:
    """Parse a snailfish number such as ``[[1,2],3]``."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError(f"malformed snailfish number: {text!r}") from error
    return SnailNumber.from_value(data)


def add(left: SnailNumber, right: SnailNumber) -> SnailNumber:
    """Reduced sum of two numbers; the operands are left untouched."""
    return SnailNumber(left=left.copy(), right=right.copy()).reduce()


def sum_numbers(numbers) -> SnailNumber:
    """Add a list of numbers from left to right."""
    numbers = list(numbers)
    if not numbers:
        raise ValueError("no numbers to add")
    return fold(add, numbers[1:], numbers[0].copy())


def largest_pair_magnitude(numbers) -> int:
    """Largest magnitude of numbers[i] + numbers[j] over all i <= j."""
    numbers = list(numbers)
    if not numbers:
        raise ValueError("no numbers given")
    return max(
        add(first, second).magnitude()
        for i, first in enumerate(numbers)
        for second in numbers[i:]
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day18", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    lines = [line.strip() for line in _read_text(args.input).splitlines() if line.strip()]
    numbers = [parse_number(line) for line in lines]
    print(sum_numbers(numbers).magnitude())
    print(largest_pair_magnitude(numbers))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())