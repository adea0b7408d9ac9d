"""Drills on borrowed values: choosing between strings and records that refer to them."""

from __future__ import annotations

from dataclasses import dataclass


def longest(x: str, y: str) -> str:
    """Return the longer string by UTF-8 byte length; ``y`` on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


@dataclass(frozen=True)
class Book:
    author: str
    title: str

    def describe(self) -> str:
        return f"{self.title} by {self.author}"