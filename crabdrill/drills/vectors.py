"""Drills on lists and on who owns a value."""

from __future__ import annotations

from typing import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """Return a fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    v = [10, 20, 30, 40]
    return a, v


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of ``values`` in place and return it."""
    values[:] = [element * 2 for element in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [element * 2 for element in values]


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a copy of ``values`` with 88 appended; the input is left alone."""
    filled = list(values)
    filled.append(88)
    return filled


def fill_new_vec() -> list[int]:
    """Build a list from scratch."""
    return [22, 44, 66, 88]


def add_in_turn(start: int) -> int:
    """Add 100 and then 1000 to ``start``, one change after the other."""
    x = start
    x += 100
    x += 1000
    return x


def get_char(data: str) -> str:
    """Return the last character of ``data``."""
    if not data:
        raise ValueError("cannot take a character from an empty string")
    return data[-1]


def string_uppercase(data: str) -> str:
    return data.upper()