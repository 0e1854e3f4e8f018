import pytest

from aoc2021 import day01, day02, day24
from aoc2021.cli import main

DEPTHS = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"
COMMANDS = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"


def test_runs_day_one(tmp_path, capsys):
    path = tmp_path / "depths.txt"
    path.write_text(DEPTHS)
    assert main(["1", str(path)]) == 0
    expected = day01.count_window_increases(day01.parse_depths(DEPTHS))
    assert capsys.readouterr().out.strip() == str(expected)


def test_passes_options_through(tmp_path, capsys):
    path = tmp_path / "depths.txt"
    path.write_text(DEPTHS)
    assert main(["1", str(path), "--window", "1"]) == 0
    expected = day01.count_window_increases(day01.parse_depths(DEPTHS), 1)
    assert capsys.readouterr().out.strip() == str(expected)


def test_runs_day_two(tmp_path, capsys):
    path = tmp_path / "commands.txt"
    path.write_text(COMMANDS)
    assert main(["2", str(path)]) == 0
    commands = day02.parse_commands(COMMANDS)
    h1, d1 = day02.final_position(commands)
    h2, d2 = day02.final_position_with_aim(commands)
    assert capsys.readouterr().out.split() == [str(h1 * d1), str(h2 * d2)]


def test_runs_day_without_input(capsys):
    assert main(["24"]) == 0
    assert capsys.readouterr().out.split() == [day24.solve(True), day24.solve(False)]


@pytest.mark.parametrize("argv", [["26"], ["0"], ["x"], []])
def test_rejects_bad_day(argv):
    with pytest.raises(SystemExit) as info:
        main(argv)
    assert info.value.code == 2