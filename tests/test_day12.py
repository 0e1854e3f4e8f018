import pytest

from aoc2021.day12 import count_paths, is_small, parse_caves

SMALL = """start-A
start-b
A-c
A-b
b-d
A-end
b-end"""


def test_example_paths():
    assert count_paths(parse_caves(SMALL)) == 10


def test_example_paths_with_one_revisit():
    assert count_paths(parse_caves(SMALL), allow_twice=True) == 36


def test_direct_connection():
    assert count_paths(parse_caves("start-end")) == 1


@pytest.mark.parametrize(
    "name, small",
    [("start", True), ("end", True), ("dc", True), ("HN", False), ("Ab", False)],
)
def test_is_small(name, small):
    assert is_small(name) is small


def test_parse_is_symmetric():
    graph = parse_caves(SMALL)
    assert graph["start"] == {"A", "b"}
    for cave, neighbours in graph.items():
        for other in neighbours:
            assert cave in graph[other]


def test_revisits_never_reduce_paths():
    graph = parse_caves(SMALL)
    assert count_paths(graph, allow_twice=True) >= count_paths(graph)


def test_chain_without_revisits_is_unchanged():
    graph = parse_caves("start-a\na-end")
    assert count_paths(graph) == count_paths(graph, allow_twice=True)


def test_malformed_line_raises():
    with pytest.raises(ValueError):
        parse_caves("startend")


def test_missing_start_raises():
    with pytest.raises(ValueError):
        count_paths({"a": {"end"}, "end": {"a"}})