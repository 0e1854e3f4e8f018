"""Syntax scoring: find corrupted and incomplete bracket lines."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path

_PAIRS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


@dataclass(frozen=True)
class LineReport:
    """Result of checking one line of brackets.

    A corrupted line names the first illegal closer and the closer that was
    expected instead; any other line carries the closers that complete it.
    """

    line: str
    illegal: str | None = None
    expected: str | None = None
    closers: str = ""

    @property
    def corrupted(self) -> bool:
        return self.illegal is not None


def analyse_line(line: str) -> LineReport:
    """Check a line, stopping at the first illegal closing character."""
    stack: list[str] = []
    for ch in line:
        if ch.isspace():
            continue
        if ch in _PAIRS:
            stack.append(ch)
        elif ch in _ERROR_POINTS:
            if not stack:
                raise ValueError(f"closing {ch!r} with nothing open in {line!r}")
            expected = _PAIRS[stack[-1]]
            if ch != expected:
                return LineReport(line, illegal=ch, expected=expected)
            stack.pop()
        else:
            raise ValueError(f"unexpected character {ch!r} in {line!r}")
    return LineReport(line, closers="".join(_PAIRS[o] for o in reversed(stack)))


def syntax_error_score(lines) -> int:
    """Sum the points of the first illegal character of each corrupted line."""
    reports = (analyse_line(line) for line in lines)
    return sum(_ERROR_POINTS[r.illegal] for r in reports if r.corrupted)


def completion_score(closers: str) -> int:
    """Score a completion string: times five, plus the closer's points."""
    score = 0
    for ch in closers:
        if ch not in _COMPLETION_POINTS:
            raise ValueError(f"not a closing character: {ch!r}")
        score = score * 5 + _COMPLETION_POINTS[ch]
    return score


def middle_completion_score(lines) -> int:
    """Median completion score of all lines that are not corrupted."""
    scores = sorted(
        completion_score(report.closers)
        for report in map(analyse_line, lines)
        if not report.corrupted
    )
    if not scores:
        raise ValueError("every line is corrupted")
    return scores[len(scores) // 2]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day10", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    lines = [line for line in _read_text(args.input).splitlines() if line.strip()]
    print(syntax_error_score(lines))
    print(middle_completion_score(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())