import pytest

from aoc2021.day03 import life_support_rating, main, power_consumption

EXAMPLE = [
    "00100",
    "11110",
    "10110",
    "10111",
    "10101",
    "01111",
    "00111",
    "11100",
    "10000",
    "11001",
    "00010",
    "01010",
]


def test_example_power_consumption():
    assert power_consumption(EXAMPLE) == 198


def test_example_life_support():
    assert life_support_rating(EXAMPLE) == 230


def test_gamma_and_epsilon_are_complements():
    assert power_consumption(["1010"] * 3) == int("1010", 2) * int("0101", 2)


def test_single_entry_life_support_is_square():
    assert life_support_rating(["1011"]) == int("1011", 2) ** 2


def test_identical_entries_leave_no_co2_candidate():
    with pytest.raises(ValueError):
        life_support_rating(["1010", "1010"])


def test_empty_report_rejected():
    with pytest.raises(ValueError):
        power_consumption([])


def test_mixed_widths_rejected():
    with pytest.raises(ValueError):
        power_consumption(["101", "1010"])


def test_non_binary_rejected():
    with pytest.raises(ValueError):
        life_support_rating(["1021"])


def test_main_prints_both(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE))
    assert main([str(path)]) == 0
    expected = f"{power_consumption(EXAMPLE)}\n{life_support_rating(EXAMPLE)}\n"
    assert capsys.readouterr().out == expected