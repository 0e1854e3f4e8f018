"""Arithmetic logic unit: find model numbers the MONAD program accepts."""

from __future__ import annotations

import argparse
from itertools import compress

_BASE = 26
# Per block: the offset added when a digit is pushed, or None for a pop block.
A_STEPS = (8, 8, 12, None, 2, 8, None, 9, None, 3, None, None, None, None)
# Per block: the offset subtracted when a digit is popped, or None for a push.
B_STEPS = (None, None, None, 8, None, None, 11, None, 3, None, 3, 1, 10, 16)
INPUT_COUNT = sum(a is not None for a in A_STEPS)


def _check_digit(digit: int) -> None:
    if not 1 <= digit <= 9:
        raise ValueError(f"digit out of range: {digit}")


def simulate(inputs) -> str | None:
    """Run the program with the free digits; return the model number or None.

    The digits of the pop blocks are forced; the number is rejected when a
    forced digit falls outside 1..9 or the final state is not zero.
    """
    inputs = tuple(inputs)
    if len(inputs) != INPUT_COUNT:
        raise ValueError(f"expected {INPUT_COUNT} input digits")
    for digit in inputs:
        _check_digit(digit)
    feed = iter(inputs)
    z = 0
    digits = []
    for push, pop in zip(A_STEPS, B_STEPS):
        if push is None:
            digit = z % _BASE - pop
            if not 1 <= digit <= 9:
                return None
            z //= _BASE
        else:
            digit = next(feed)
            z = z * _BASE + push + digit
        digits.append(digit)
    return "".join(map(str, digits)) if z == 0 else None


def solve(largest: bool = True) -> str:
    """The largest (or smallest) accepted fourteen-digit model number."""
    order = range(9, 0, -1) if largest else range(1, 10)

    def search(block: int, z: int, digits: tuple[int, ...]):
        if block == len(A_STEPS):
            return digits if z == 0 else None
        push, pop = A_STEPS[block], B_STEPS[block]
        if push is None:
            digit = z % _BASE - pop
            if not 1 <= digit <= 9:
                return None
            return search(block + 1, z // _BASE, digits + (digit,))
        for digit in order:
            found = search(block + 1, z * _BASE + push + digit, digits + (digit,))
            if found is not None:
                return found
        return None

    found = search(0, 0, ())
    if found is None:
        raise ValueError("no model number is accepted")
    return "".join(map(str, found))


def free_digits(model: str) -> list[int]:
    """The digits of a model number that the program reads as input."""
    pushes = (a is not None for a in A_STEPS)
    return [int(ch) for ch in compress(model, pushes)]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day24", description=__doc__)
    parser.parse_args(argv)
    print(solve(largest=True))
    print(solve(largest=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())