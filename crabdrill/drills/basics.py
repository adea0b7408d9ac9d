"""First drills: printing, variables and functions."""

from __future__ import annotations

_INTRO_LINES = (
    "Hello and",
    "       welcome to crabdrill!",
    "",
    "This exercise compiles successfully. The remaining exercises contain a compiler",
    "or logic error. The central concept behind these drills is to fix these errors and",
    "solve the exercises. Good luck!",
    "",
    "The source for this exercise is in `exercises/00_intro/intro1.rs`. Have a look!",
    "Going forward, the source of the exercises will always be in the success/failure output.",
    "",
    "If you want to use rust-analyzer, make sure your editor is set",
    "up, and then run `crabdrill lsp` before continuing.",
)


def intro_text() -> str:
    """The welcome text of the first exercise."""
    return "\n".join(_INTRO_LINES)


def greeting() -> str:
    return "Hello there!"


def describe_ten(x: int) -> str:
    return "x is ten!" if x == 10 else "x is not ten!"


def shadowing_lines() -> list[str]:
    """A name rebound from a string to a number."""
    number = "T-H-R-E-E"
    lines = [f"Spell a Number : {number}"]
    number = 3
    lines.append(f"Number plus two is : {number + 2}")
    return lines


def ring(num: int) -> list[str]:
    """One line per call, numbered from 1."""
    return [f"Ring! Call number {i}" for i in range(1, num + 1)]


def is_even(num: int) -> bool:
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    return num * num