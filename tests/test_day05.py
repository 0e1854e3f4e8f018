import pytest

from aoc2021.day05 import (
    count_overlaps,
    coverage,
    main,
    parse_segments,
    render_pgm,
)

EXAMPLE = """\
0,9 -> 5,9
8,0 -> 0,8
9,4 -> 3,4
2,2 -> 2,1
7,0 -> 7,4
6,4 -> 2,0
0,9 -> 2,9
3,4 -> 1,4
0,0 -> 8,8
5,5 -> 8,2
"""


def test_example_without_diagonals():
    assert count_overlaps(parse_segments(EXAMPLE), False) == 5


def test_example_with_diagonals():
    assert count_overlaps(parse_segments(EXAMPLE), True) == 12


def test_parse_segments():
    assert parse_segments("1,2 -> 3,4\n\n5,6 -> 7,8") == [(1, 2, 3, 4), (5, 6, 7, 8)]


def test_horizontal_segment_covers_every_point():
    assert set(coverage([(2, 3, 6, 3)])) == {(x, 3) for x in range(2, 7)}


def test_reversed_segments_cover_the_same():
    segments = parse_segments(EXAMPLE)
    reversed_segments = [(x2, y2, x1, y1) for x1, y1, x2, y2 in segments]
    assert coverage(reversed_segments, True) == coverage(segments, True)


def test_diagonals_only_when_asked():
    assert not coverage([(0, 0, 3, 3)], False)
    assert set(coverage([(0, 0, 3, 3)], True)) == {(i, i) for i in range(4)}


def test_uneven_slope_stops_at_shorter_axis():
    assert set(coverage([(0, 0, 2, 1)], True)) == {(0, 0), (1, 1)}


def test_render_pgm_matches_coverage():
    segments = [(0, 0, 2, 0), (1, 0, 1, 2)]
    size = 3
    counts = coverage(segments, True)
    lines = render_pgm(segments, size).splitlines()
    assert lines[0] == "P2"
    assert lines[1] == f"{size} {size}"
    assert int(lines[2]) == max(counts.values())
    rows = [[int(v) for v in line.split()] for line in lines[3:]]
    assert len(rows) == size
    assert all(rows[y][x] == counts[(x, y)] for y in range(size) for x in range(size))


def test_render_pgm_rejects_points_outside():
    with pytest.raises(ValueError):
        render_pgm([(0, 0, 5, 0)], 3)


def test_malformed_line_rejected():
    with pytest.raises(ValueError):
        parse_segments("1,2 to 3,4")


def test_main_prints_both(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path)]) == 0
    segments = parse_segments(EXAMPLE)
    expected = f"{count_overlaps(segments, False)}\n{count_overlaps(segments, True)}\n"
    assert capsys.readouterr().out == expected