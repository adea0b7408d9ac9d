import pytest

from crabdrill.drills.options import (
    Point,
    describe_coordinates,
    drain_present,
    maybe_icecream,
)


def test_check_icecream():
    assert maybe_icecream(9) == 5
    assert maybe_icecream(10) == 5
    assert maybe_icecream(23) == 0
    assert maybe_icecream(22) == 0
    assert maybe_icecream(25) is None


def test_raw_value():
    icecreams = maybe_icecream(12)
    assert icecreams == 5


def test_icecream_negative_hour_raises():
    with pytest.raises(ValueError):
        maybe_icecream(-1)


def test_simple_option():
    target = "rustlings"
    assert drain_present([target]) == [target]


def test_layered_option():
    values = [None] + list(range(1, 11))
    result = drain_present(values)
    assert result == list(range(10, 0, -1))
    assert values == []


def test_drain_skips_none_in_middle():
    values = [1, None, 2, None]
    assert drain_present(values) == [2, 1]
    assert values == []


def test_drain_keeps_falsy_values():
    assert drain_present([0, None, ""]) == ["", 0]


def test_describe_coordinates():
    assert describe_coordinates(Point(100, 200)) == "Co-ordinates are 100,200 "


def test_describe_coordinates_none_raises():
    with pytest.raises(ValueError, match="no match!"):
        describe_coordinates(None)