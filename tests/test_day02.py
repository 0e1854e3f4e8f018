import pytest

from aoc2021.day02 import (
    final_position,
    final_position_with_aim,
    main,
    parse_commands,
)

EXAMPLE = "forward 5\ndown 5\nforward 8\nup 3\ndown 8\nforward 2\n"


def test_example_without_aim():
    assert final_position(parse_commands(EXAMPLE)) == (15, 10)


def test_example_with_aim():
    assert final_position_with_aim(parse_commands(EXAMPLE)) == (15, 60)


def test_parse_commands():
    assert parse_commands("forward 5\nup 2\n\ndown 7") == [
        ("forward", 5),
        ("up", 2),
        ("down", 7),
    ]


def test_horizontal_is_sum_of_forward_moves():
    commands = parse_commands(EXAMPLE)
    forward = sum(amount for direction, amount in commands if direction == "forward")
    assert final_position(commands)[0] == forward
    assert final_position_with_aim(commands)[0] == forward


def test_only_forward_stays_at_surface():
    commands = [("forward", 3), ("forward", 4)]
    assert final_position(commands)[1] == 0
    assert final_position_with_aim(commands)[1] == 0


def test_unknown_direction_rejected():
    with pytest.raises(ValueError):
        parse_commands("sideways 3")


def test_missing_amount_rejected():
    with pytest.raises(ValueError):
        parse_commands("forward")


def test_main_prints_both_products(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    commands = parse_commands(EXAMPLE)
    x1, y1 = final_position(commands)
    x2, y2 = final_position_with_aim(commands)
    assert capsys.readouterr().out == f"{x1 * y1}\n{x2 * y2}\n"