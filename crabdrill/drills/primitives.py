"""Drills on booleans, characters, arrays, slices and tuples."""

from __future__ import annotations

from typing import Sequence

MIN_ARRAY_LENGTH = 100


def time_greetings(is_morning: bool, is_evening: bool) -> list[str]:
    """Return the greetings that fit the time of day."""
    greetings = []
    if is_morning:
        greetings.append("Good morning!")
    if is_evening:
        greetings.append("Good evening!")
    return greetings


def classify_character(ch: str) -> str:
    """Say whether a single character is alphabetic, numeric or neither."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    if ch.isalpha():
        return "Alphabetical!"
    if ch.isnumeric():
        return "Numerical!"
    return "Neither alphabetic nor numeric!"


def check_array(values: Sequence) -> str:
    """Accept a sequence of at least 100 elements; raise ValueError otherwise."""
    if len(values) >= MIN_ARRAY_LENGTH:
        return "Wow, that's a big array!"
    raise ValueError("Array not big enough, more elements needed")


def middle_slice(values: Sequence) -> Sequence:
    """Return the elements at positions 1 to 3."""
    return values[1:4]


def _format_number(value: object) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def describe_cat(cat: tuple[str, float]) -> str:
    """Describe a cat given as a (name, age) pair."""
    name, age = cat
    return f"{name} is {_format_number(age)} years old."


def second(numbers: Sequence):
    """Return the second element."""
    return numbers[1]