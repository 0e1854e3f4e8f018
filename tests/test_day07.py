import pytest

from aoc2021.day07 import (
    cheapest_triangular,
    linear_fuel,
    main,
    parse_positions,
    triangular_fuel,
)

EXAMPLE = "16,1,2,0,4,2,7,1,2,14"


def test_example_linear():
    assert linear_fuel(parse_positions(EXAMPLE)) == 37


def test_example_triangular():
    assert cheapest_triangular(parse_positions(EXAMPLE)) == (168, 5)


def test_parse_positions():
    assert parse_positions("3,1,4\n") == [3, 1, 4]


def test_aligned_crabs_cost_nothing():
    positions = [3, 3, 3]
    assert linear_fuel(positions) == 0
    assert triangular_fuel(positions, 3) == 0


def test_one_step_costs_one_each():
    positions = [3, 3, 3]
    assert triangular_fuel(positions, 4) == len(positions)


def test_cheapest_is_minimum_over_range():
    positions = parse_positions(EXAMPLE)
    cost, target = cheapest_triangular(positions, 20)
    assert cost == triangular_fuel(positions, target)
    assert all(cost <= triangular_fuel(positions, t) for t in range(20))


def test_empty_positions_rejected():
    with pytest.raises(ValueError):
        linear_fuel([])
    with pytest.raises(ValueError):
        cheapest_triangular([])


def test_main_output(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    positions = parse_positions(EXAMPLE)
    cost, target = cheapest_triangular(positions)
    expected = f"{linear_fuel(positions)}\nCost: {cost}, Pos: {target}\n"
    assert capsys.readouterr().out == expected