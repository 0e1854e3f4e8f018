"""Trench map: enhance an infinite image with a lookup algorithm."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

_WINDOW = tuple((dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1))
_ALGORITHM_SIZE = 512
_LIT = "#"
_DARK = "."


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def _check_algorithm(algorithm: str) -> None:
    if len(algorithm) != _ALGORITHM_SIZE:
        raise ValueError(f"algorithm must have {_ALGORITHM_SIZE} entries")
    if not set(algorithm) <= {_LIT, _DARK}:
        raise ValueError("algorithm may hold only '#' and '.'")


@dataclass(frozen=True)
class Image:
    """Lit pixels inside a window; every pixel outside shares the background."""

    lit: frozenset
    rows: range
    cols: range
    background: bool = False

    def _pixel(self, r: int, c: int) -> bool:
        if r in self.rows and c in self.cols:
            return (r, c) in self.lit
        return self.background

    def _index(self, r: int, c: int) -> int:
        index = 0
        for dr, dc in _WINDOW:
            index = index * 2 + self._pixel(r + dr, c + dc)
        return index

    def enhance(self, algorithm: str) -> Image:
        """Apply the algorithm once, growing the window by one on every side."""
        _check_algorithm(algorithm)
        rows = range(self.rows.start - 1, self.rows.stop + 1)
        cols = range(self.cols.start - 1, self.cols.stop + 1)
        lit = frozenset(
            (r, c) for r in rows for c in cols if algorithm[self._index(r, c)] == _LIT
        )
        background = algorithm[_ALGORITHM_SIZE - 1 if self.background else 0] == _LIT
        return Image(lit, rows, cols, background)

    def lit_count(self) -> int:
        """Number of lit pixels; infinite when the background is lit."""
        if self.background:
            raise ValueError("infinitely many pixels are lit")
        return len(self.lit)

    def render(self) -> str:
        """Draw the window with '#' for lit and '.' for dark pixels."""
        return "\n".join(
            "".join(_LIT if (r, c) in self.lit else _DARK for c in self.cols)
            for r in self.rows
        )


def parse_input(text: str) -> tuple[str, Image]:
    """Parse the algorithm line, a blank line, then the input image."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty input")
    algorithm = lines[0].strip()
    _check_algorithm(algorithm)
    rows = [line.strip() for line in lines[1:] if line.strip()]
    if not rows:
        raise ValueError("missing input image")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("image rows differ in length")
    if not all(set(row) <= {_LIT, _DARK} for row in rows):
        raise ValueError("image may hold only '#' and '.'")
    lit = frozenset(
        (r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == _LIT
    )
    return algorithm, Image(lit, range(len(rows)), range(len(rows[0])))


def enhance_times(image: Image, algorithm: str, times: int) -> Image:
    """Apply the algorithm the given number of times."""
    if times < 0:
        raise ValueError("times must not be negative")
    for _ in range(times):
        image = image.enhance(algorithm)
    return image


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day20", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    parser.add_argument("--render", action="store_true", help="draw the final image")
    args = parser.parse_args(argv)
    algorithm, image = parse_input(_read_text(args.input))
    twice = enhance_times(image, algorithm, 2)
    fifty = enhance_times(twice, algorithm, 48)
    if args.render:
        print(fifty.render())
    print(twice.lit_count())
    print(fifty.lit_count())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())