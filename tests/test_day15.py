import pytest

from aoc2021.day15 import greedy_path_risk, lowest_total_risk, parse_risk, tile

EXAMPLE = """1163751742
1381373672
2136511328
3694931569
7463417111
1319128137
1359912421
3125421639
1293138521
2311944581"""


@pytest.fixture
def grid():
    return parse_risk(EXAMPLE)


def test_example_lowest_risk(grid):
    assert lowest_total_risk(grid) == 40


def test_example_tiled_lowest_risk(grid):
    assert lowest_total_risk(tile(grid)) == 315


def test_tile_wraps_nine_to_one():
    assert tile([[9]], 2) == [[9, 1], [1, 2]]


def test_tile_shape_and_origin(grid):
    tiled = tile(grid)
    assert len(tiled) == len(grid) * 5
    assert all(len(row) == len(grid[0]) * 5 for row in tiled)
    assert [row[: len(grid[0])] for row in tiled[: len(grid)]] == grid


def test_tile_once_is_identity(grid):
    assert tile(grid, 1) == grid


def test_tile_is_symmetric_across_tiles(grid):
    tiled = tile(grid, 3)
    n = len(grid)
    for r in range(n):
        for c in range(n):
            assert tiled[r][c + n] == tiled[r + n][c]


def test_greedy_is_never_better(grid):
    assert greedy_path_risk(grid) >= lowest_total_risk(grid)
    tiled = tile(grid)
    assert greedy_path_risk(tiled) >= lowest_total_risk(tiled)


def test_single_row_has_one_route():
    row_grid = [[1, 2, 3]]
    assert greedy_path_risk(row_grid) == lowest_total_risk(row_grid)


def test_ragged_map_raises():
    with pytest.raises(ValueError):
        parse_risk("12\n3")


def test_tile_zero_times_raises(grid):
    with pytest.raises(ValueError):
        tile(grid, 0)


def test_empty_map_raises():
    with pytest.raises(ValueError):
        lowest_total_risk([])