"""Drills on error handling: empty names, bad numbers and value checks."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")

PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly, with the usual fixed-width limits.

    Raises ValueError with a message naming what went wrong.
    """
    if text == "":
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of buying items at 5 tokens each plus a fee of 1.

    Raises ValueError when the quantity is not a whole number.
    """
    qty = _parse_int(item_quantity, 32)
    return qty * COST_PER_ITEM + PROCESSING_FEE


def spend_tokens(tokens: int, user_input: str) -> str:
    """Try to buy the quantity typed in with the tokens at hand."""
    cost = total_cost(user_input)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationError(ValueError):
    """A value cannot become a positive non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"

    _DESCRIPTIONS = {
        NEGATIVE: "number is negative",
        ZERO: "number is zero",
    }

    def __init__(self, reason: str):
        if reason not in self._DESCRIPTIONS:
            raise ValueError(f"unknown reason: {reason!r}")
        super().__init__(self._DESCRIPTIONS[reason])
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CreationError) and other.reason == self.reason

    def __hash__(self) -> int:
        return hash((CreationError, self.reason))


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a positive non-zero integer.

    Exactly one of ``creation`` and ``parse_int`` is set.
    """

    def __init__(self, cause: ValueError):
        super().__init__(str(cause))
        if isinstance(cause, CreationError):
            self.creation: CreationError | None = cause
            self.parse_int: ValueError | None = None
        else:
            self.creation = None
            self.parse_int = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc