"""Drills on optional values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TypeVar

T = TypeVar("T")

_CLOSING_HOUR = 22
_HOURS_IN_DAY = 24


@dataclass(frozen=True)
class Point:
    x: int
    y: int


def maybe_icecream(time_of_day: int) -> Optional[int]:
    """Pieces of ice cream left at an hour of the day; None for an invalid hour.

    There are 5 pieces before 22:00 and none from then on.
    """
    if time_of_day < 0:
        raise ValueError("time of day must not be negative")
    if time_of_day < _CLOSING_HOUR:
        return 5
    if time_of_day < _HOURS_IN_DAY:
        return 0
    return None


def drain_present(values: list[Optional[T]]) -> list[T]:
    """Pop every entry off the end of ``values``; return the ones that are not None."""
    present = []
    while values:
        item = values.pop()
        if item is not None:
            present.append(item)
    return present


def describe_coordinates(point: Optional[Point]) -> str:
    """Describe a point; raise ValueError when there is none."""
    match point:
        case Point(x=x, y=y):
            return f"Co-ordinates are {x},{y} "
        case _:
            raise ValueError("no match!")