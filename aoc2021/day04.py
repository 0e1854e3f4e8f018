"""Giant squid bingo: score the first and the last winning boards."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from pathlib import Path

_SIZE = 5


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def parse_bingo(text: str) -> tuple[list[int], list[list[list[int]]]]:
    """Parse the drawn numbers and the 5x5 boards."""
    first, _, rest = text.strip().partition("\n")
    if not first.strip():
        raise ValueError("missing line of drawn numbers")
    numbers = [int(token) for token in first.split(",")]
    values = [int(token) for token in rest.split()]
    cells = _SIZE * _SIZE
    if len(values) % cells:
        raise ValueError("board data is not a whole number of 5x5 boards")
    boards = [
        [values[start + row * _SIZE : start + (row + 1) * _SIZE] for row in range(_SIZE)]
        for start in range(0, len(values), cells)
    ]
    return numbers, boards


def _has_line(board, drawn: set[int]) -> bool:
    lines = [*board, *zip(*board)]
    return any(all(value in drawn for value in line) for line in lines)


def _winning_scores(numbers, boards) -> Iterator[int]:
    """Yield the score of each board at the moment it wins, in order."""
    drawn: set[int] = set()
    pending = list(boards)
    for number in numbers:
        drawn.add(number)
        still_pending = []
        for board in pending:
            if _has_line(board, drawn):
                unmarked = sum(v for row in board for v in row if v not in drawn)
                yield unmarked * number
            else:
                still_pending.append(board)
        pending = still_pending


def first_winner_score(numbers, boards) -> int:
    """Score of the first board to complete a row or column."""
    for score in _winning_scores(numbers, boards):
        return score
    raise ValueError("no board wins")


def last_winner_score(numbers, boards) -> int:
    """Score of the board that is last to win, once every board has won."""
    boards = list(boards)
    scores = list(_winning_scores(numbers, boards))
    if not boards or len(scores) < len(boards):
        raise ValueError("not every board wins")
    return scores[-1]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day04", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    numbers, boards = parse_bingo(_read_text(args.input))
    print(first_winner_score(numbers, boards))
    print(last_winner_score(numbers, boards))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())