"""Binary diagnostic: power consumption and life support rating."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def _validate(report) -> list[str]:
    report = list(report)
    if not report:
        raise ValueError("empty diagnostic report")
    width = len(report[0])
    for entry in report:
        if len(entry) != width:
            raise ValueError("report entries differ in width")
        if not set(entry) <= {"0", "1"}:
            raise ValueError(f"not a binary number: {entry!r}")
    return report


def power_consumption(report) -> int:
    """Return gamma rate times epsilon rate."""
    report = _validate(report)
    half = len(report) // 2
    ones = [column.count("1") for column in zip(*report)]
    gamma = "".join("1" if count > half else "0" for count in ones)
    epsilon = "".join("1" if count <= half else "0" for count in ones)
    return int(gamma, 2) * int(epsilon, 2)


def _rating(report: list[str], keep_common: bool) -> int:
    candidates = report
    for position in range(len(report[0])):
        if len(candidates) <= 1:
            break
        ones = sum(entry[position] == "1" for entry in candidates)
        ones_win = ones >= len(candidates) - ones
        if keep_common:
            keep = "1" if ones_win else "0"
        else:
            keep = "0" if ones_win else "1"
        candidates = [entry for entry in candidates if entry[position] == keep]
    if not candidates:
        raise ValueError("bit criteria removed every entry")
    return int(candidates[0], 2)


def life_support_rating(report) -> int:
    """Return oxygen generator rating times CO2 scrubber rating."""
    report = _validate(report)
    return _rating(report, True) * _rating(report, False)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="day03", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="puzzle input file")
    args = parser.parse_args(argv)
    report = _read_text(args.input).split()
    print(power_consumption(report))
    print(life_support_rating(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())