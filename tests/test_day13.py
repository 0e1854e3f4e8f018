import pytest

from aoc2021.day13 import fold, fold_all, parse_manual, render

EXAMPLE = """6,10
0,14
9,10
0,3
10,4
4,11
6,0
6,12
4,1
0,13
10,12
3,4
3,0
8,4
1,10
2,14
8,10
9,0

fold along y=7
fold along x=5
"""


def test_parse_manual():
    points, folds = parse_manual(EXAMPLE)
    assert folds == [("y", 7), ("x", 5)]
    assert (6, 10) in points
    assert (9, 0) in points


def test_first_fold_count():
    points, folds = parse_manual(EXAMPLE)
    assert len(fold(points, *folds[0])) == 17


def test_full_fold_renders_square():
    points, folds = parse_manual(EXAMPLE)
    assert render(fold_all(points, folds)) == "#####\n#   #\n#   #\n#   #\n#####"


def test_fold_keeps_points_on_near_side():
    points, _ = parse_manual(EXAMPLE)
    folded = fold(points, "y", 7)
    assert all(y <= 7 for _, y in folded)
    assert {p for p in points if p[1] < 7} <= folded


def test_fold_never_adds_points_and_is_idempotent():
    points, _ = parse_manual(EXAMPLE)
    once = fold(points, "x", 5)
    assert len(once) <= len(points)
    assert fold(once, "x", 5) == once


def test_no_folds_returns_same_points():
    points, _ = parse_manual(EXAMPLE)
    assert fold_all(points, []) == points


def test_render_single_and_empty():
    assert render({(0, 0)}) == "#"
    assert render(set()) == ""


def test_unknown_axis_raises():
    with pytest.raises(ValueError):
        fold({(1, 1)}, "z", 3)


def test_malformed_fold_raises():
    with pytest.raises(ValueError):
        parse_manual("1,2\n\nfold along z=3")


def test_malformed_dot_raises():
    with pytest.raises(ValueError):
        parse_manual("12\n\nfold along x=3")