import pytest

from aoc2021.day17 import TargetArea, main, parse_target, search, simulate

EXAMPLE = "target area: x=20..30, y=-10..-5\n"


@pytest.fixture
def target():
    return parse_target(EXAMPLE)


def test_parse_target(target):
    assert target == TargetArea(20, 30, -10, -5)


def test_parse_target_normalises_reversed_ranges():
    assert parse_target("target area: x=30..20, y=-5..-10") == TargetArea(20, 30, -10, -5)


def test_parse_target_rejects_garbage():
    with pytest.raises(ValueError):
        parse_target("no target here")


@pytest.mark.parametrize("bounds", [(0, 5, -10, -5), (5, 10, -5, 2), (10, 5, -10, -5)])
def test_target_area_validation(bounds):
    with pytest.raises(ValueError):
        TargetArea(*bounds)


def test_simulate_hit_reports_peak(target):
    assert simulate(7, 2, target) == 3


def test_simulate_miss_returns_none(target):
    assert simulate(17, -4, target) is None


def test_direct_shot_hits_with_peak_at_start(target):
    assert simulate(target.x_max, target.y_min, target) == 0


def test_search_example(target):
    assert search(target) == (45, 112)


def test_search_highest_is_reachable(target):
    highest, _ = search(target)
    peaks = [simulate(vx, vy, target) for vx in range(1, 31) for vy in range(-10, 11)]
    assert highest in peaks


def test_main_prints_highest_and_count(tmp_path, capsys, target):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    highest, count = search(target)
    assert capsys.readouterr().out.split() == [str(highest), str(count)]