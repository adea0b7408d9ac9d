import pytest

from crabdrill.drills.primitives import (
    check_array,
    classify_character,
    describe_cat,
    middle_slice,
    second,
    time_greetings,
)


@pytest.mark.parametrize(
    "morning, evening, expected",
    [
        (True, False, ["Good morning!"]),
        (False, True, ["Good evening!"]),
        (True, True, ["Good morning!", "Good evening!"]),
        (False, False, []),
    ],
)
def test_time_greetings(morning, evening, expected):
    assert time_greetings(morning, evening) == expected


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("C", "Alphabetical!"),
        ("é", "Alphabetical!"),
        ("1", "Numerical!"),
        ("#", "Neither alphabetic nor numeric!"),
        (" ", "Neither alphabetic nor numeric!"),
    ],
)
def test_classify_character(ch, expected):
    assert classify_character(ch) == expected


@pytest.mark.parametrize("text", ["", "ab"])
def test_classify_character_needs_one_character(text):
    with pytest.raises(ValueError):
        classify_character(text)


def test_check_array_big_enough():
    assert check_array([0] * 100) == "Wow, that's a big array!"


def test_check_array_too_small():
    with pytest.raises(ValueError, match="Array not big enough"):
        check_array([0] * 99)


def test_slice_out_of_array():
    a = [1, 2, 3, 4, 5]
    assert middle_slice(a) == [2, 3, 4]


def test_slice_of_tuple():
    assert middle_slice((1, 2, 3, 4, 5)) == (2, 3, 4)


def test_describe_cat():
    assert describe_cat(("Furry McFurson", 3.5)) == "Furry McFurson is 3.5 years old."


def test_describe_cat_whole_age():
    assert describe_cat(("Tom", 3.0)) == "Tom is 3 years old."


def test_indexing_tuple():
    numbers = (1, 2, 3)
    assert second(numbers) == 2