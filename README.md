# aoc2021

Solutions to the 2021 Advent of Code puzzles, usable both as a library and
from the command line. Each day lives in its own module, `aoc2021.day01`
through `aoc2021.day25`, with functions that parse the puzzle input and
compute the answers. Only the standard library is used.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs an `aoc2021` command. It takes the day number and
passes everything after it to that day's solution:

```
aoc2021 --help
aoc2021 1 input.txt
aoc2021 1 --window 1 input.txt
```

Each day reads its puzzle input from the named file, or from standard input
when no file (or `-`) is given, and prints its answers one per line. Every
day module can also be run on its own, for example
`python -m aoc2021.day06 input.txt`.

Some days take extra options:

| Day | Option | Effect |
| --- | --- | --- |
| 1 | `--window N` | size of the sliding window (default 3) |
| 5 | `--pgm`, `--size N` | print a plain PGM image of the vent coverage instead of the counts |
| 9 | `--pgm` | print a plain PGM image of the basins instead of the answers |
| 11 | `--animate` | draw every step in the terminal while looking for the synchronised flash |
| 16 | `--tree` | print the packet expression tree before the answers |
| 20 | `--render` | draw the image after fifty enhancements |
| 23 | `--unfold`, `--show` | insert the two hidden rows; draw the starting burrow |

A few days print something other than two plain numbers: day 7 prints the
linear fuel cost and then `Cost: C, Pos: P` for the triangular cost; day 13
prints the number of dots after the first fold and then the folded sheet;
day 21 prints its second answer only when there are exactly two players;
day 25 prints a single number.

## Library use

Every module offers a parser that turns the raw puzzle text into Python
values, and functions that work on those values:

```python
from aoc2021.day01 import parse_depths, count_window_increases

depths = parse_depths(open("input.txt").read())
print(count_window_increases(depths, 3))
```

```python
from aoc2021.day06 import parse_timers, simulate

timers = parse_timers("3,4,3,1,2")
print(simulate(timers, 80))
print(simulate(timers, 256))
```

```python
from aoc2021.day16 import decode

packet = decode("C200B40A82")
print(packet.version_sum(), packet.evaluate())
```

Some of the larger days are built around a class:

- `aoc2021.day10.LineReport`, returned by `analyse_line`, tells whether a
  line is corrupted and which closers complete it.
- `aoc2021.day11.OctopusGrid` advances one step at a time with `step()`.
- `aoc2021.day16.Packet` offers `version_sum()`, `evaluate()` and `render()`.
- `aoc2021.day17.TargetArea` is parsed by `parse_target` and searched by
  `search`.
- `aoc2021.day18.SnailNumber` supports `copy()`, `magnitude()` and
  `reduce()`; `add`, `sum_numbers` and `largest_pair_magnitude` work on it.
- `aoc2021.day20.Image` is enhanced with `enhance(algorithm)`.
- `aoc2021.day22.RebootStep` describes one cuboid step for `count_on`.
- `aoc2021.day23.Amphipod` describes one amphipod for `least_energy`.

Some days also render pictures of their results: the folded transparent
paper of day 13 (`aoc2021.day13.render`), PGM images of the vents of day 5
(`aoc2021.day05.render_pgm`) and of the basins of day 9
(`aoc2021.day09.basin_map_pgm`), and the burrow of day 23
(`aoc2021.day23.render`).

## Limits

Day 24 does not read or run an ALU program. The constants of one particular
MONAD program are built into `aoc2021.day24` (`A_STEPS`, `B_STEPS`), and the
command takes no input file; it prints the largest and the smallest model
number that those constants accept.