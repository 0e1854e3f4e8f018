import pytest

from aoc2021.day20 import Image, enhance_times, main, parse_input

IMAGE = "#..#.\n#....\n##..#\n..#..\n..###"

IDENTITY = "".join("#" if i & 16 else "." for i in range(512))
INVERT = "".join("." if i & 16 else "#" for i in range(512))
DARK = "." * 512


def _text(algorithm, image=IMAGE):
    return f"{algorithm}\n\n{image}\n"


def test_parse_and_render_round_trip():
    _, image = parse_input(_text(IDENTITY))
    assert image.render() == IMAGE


def test_parse_counts_lit_pixels():
    _, image = parse_input(_text(IDENTITY))
    assert image.lit_count() == IMAGE.count("#")


def test_identity_algorithm_keeps_pixels():
    algorithm, image = parse_input(_text(IDENTITY))
    enhanced = image.enhance(algorithm)
    assert enhanced.lit == image.lit
    assert enhanced.rows == range(-1, 6)
    assert enhanced.background is False


def test_dark_algorithm_turns_everything_off():
    algorithm, image = parse_input(_text(DARK))
    assert image.enhance(algorithm).lit_count() == 0


def test_inverting_lights_background():
    algorithm, image = parse_input(_text(INVERT))
    enhanced = image.enhance(algorithm)
    assert enhanced.background is True
    with pytest.raises(ValueError):
        enhanced.lit_count()


def test_inverting_twice_restores_image():
    algorithm, image = parse_input(_text(INVERT))
    twice = enhance_times(image, algorithm, 2)
    assert twice.background is False
    assert twice.lit == image.lit


def test_top_left_neighbour_is_most_significant_bit():
    algorithm = "".join("#" if i == 256 else "." for i in range(512))
    image = Image(frozenset({(0, 0)}), range(1), range(1))
    assert image.enhance(algorithm).lit == frozenset({(1, 1)})


def test_enhance_times_zero_returns_same_image():
    algorithm, image = parse_input(_text(IDENTITY))
    assert enhance_times(image, algorithm, 0) == image


def test_enhance_times_negative_raises():
    algorithm, image = parse_input(_text(IDENTITY))
    with pytest.raises(ValueError):
        enhance_times(image, algorithm, -1)


@pytest.mark.parametrize("algorithm", ["#" * 511, "x" * 512])
def test_bad_algorithm_raises(algorithm):
    with pytest.raises(ValueError):
        parse_input(_text(algorithm))


def test_ragged_image_raises():
    with pytest.raises(ValueError):
        parse_input(_text(IDENTITY, "#..\n#."))


def test_main_prints_counts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(_text(IDENTITY))
    assert main([str(path)]) == 0
    lit = str(IMAGE.count("#"))
    assert capsys.readouterr().out.split() == [lit, lit]