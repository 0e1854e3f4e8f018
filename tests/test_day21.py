import pytest

from aoc2021.day21 import deterministic_game, dirac_wins, parse_starts

EXAMPLE = "Player 1 starting position: 4\nPlayer 2 starting position: 8\n"


def test_parse_starts():
    assert parse_starts(EXAMPLE) == [4, 8]


def test_parse_rejects_position_out_of_range():
    with pytest.raises(ValueError):
        parse_starts("Player 1 starting position: 11\n")


def test_parse_rejects_missing_number():
    with pytest.raises(ValueError):
        parse_starts("Player 1 starting position: four\n")


def test_deterministic_example():
    rolls, scores = deterministic_game([4, 8])
    assert rolls == 993
    assert min(scores) == 745


def test_deterministic_game_invariants():
    rolls, scores = deterministic_game([3, 6], target=100)
    assert rolls % 3 == 0
    assert max(scores) >= 100
    assert sum(score >= 100 for score in scores) == 1


def test_deterministic_rejects_bad_start():
    with pytest.raises(ValueError):
        deterministic_game([0, 5])


def test_dirac_example():
    wins = dirac_wins(4, 8)
    assert wins[0] == 444356092776315
    assert wins[0] > wins[1]


def test_dirac_first_player_wins_at_once_with_tiny_target():
    first, second = dirac_wins(4, 8, target=1)
    assert second == 0
    assert first > 0


def test_dirac_rejects_bad_target():
    with pytest.raises(ValueError):
        dirac_wins(4, 8, target=0)