import pytest

from wmstate.size import Percentage, Pixel, parse_size


def test_pixel_is_returned_as_is():
    assert Pixel(30).into_absolute(1000.0) == 30.0
    assert Pixel(30).into_absolute(5.0) == Pixel(30).into_absolute(9999.0)


def test_percentage_scales_whole():
    assert Percentage(1.0).into_absolute(640.0) == 640.0
    assert Percentage(0.0).into_absolute(640.0) == 0.0
    assert Percentage(0.5).into_absolute(200.0) == 100.0


def test_parse_integer_is_pixel():
    assert parse_size(5) == Pixel(5)


def test_parse_float_is_percentage():
    assert parse_size(0.25) == Percentage(0.25)
    assert parse_size(1.0) == Percentage(1.0)


def test_parse_passes_sizes_through():
    size = Pixel(7)
    assert parse_size(size) is size


@pytest.mark.parametrize("bad", ["10", None, True, [1]])
def test_parse_rejects_other_values(bad):
    with pytest.raises(TypeError):
        parse_size(bad)