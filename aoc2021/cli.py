"""Run the solution for one puzzle day."""

from __future__ import annotations

import argparse

from aoc2021 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day21,
    day22,
    day23,
    day24,
    day25,
)

DAYS = {
    1: day01.main,
    2: day02.main,
    3: day03.main,
    4: day04.main,
    5: day05.main,
    6: day06.main,
    7: day07.main,
    8: day08.main,
    9: day09.main,
    10: day10.main,
    11: day11.main,
    12: day12.main,
    13: day13.main,
    14: day14.main,
    15: day15.main,
    16: day16.main,
    17: day17.main,
    18: day18.main,
    19: day19.main,
    20: day20.main,
    21: day21.main,
    22: day22.main,
    23: day23.main,
    24: day24.main,
    25: day25.main,
}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="aoc2021", description=__doc__)
    parser.add_argument("day", type=int, choices=sorted(DAYS), help="puzzle day")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="arguments for the day")
    args = parser.parse_args(argv)
    return DAYS[args.day](args.args)


if __name__ == "__main__":
    raise SystemExit(main())