"""Drills on enumerations and on messages that change a state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class MessageKind(Enum):
    QUIT = "quit"
    ECHO = "echo"
    MOVE = "move"
    CHANGE_COLOR = "change_color"


@dataclass
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Move:
    point: Point
    kind: ClassVar[MessageKind] = MessageKind.MOVE


@dataclass(frozen=True)
class Echo:
    text: str
    kind: ClassVar[MessageKind] = MessageKind.ECHO


@dataclass(frozen=True)
class ChangeColor:
    red: int
    green: int
    blue: int
    kind: ClassVar[MessageKind] = MessageKind.CHANGE_COLOR


@dataclass(frozen=True)
class Quit:
    kind: ClassVar[MessageKind] = MessageKind.QUIT


Message = Union[Move, Echo, ChangeColor, Quit]


def _to_byte(value: int) -> int:
    return value & 0xFF


@dataclass
class State:
    """A state changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case Move(point):
                self.position = point
            case Echo(text):
                self.message = text
            case ChangeColor(red, green, blue):
                self.color = (_to_byte(red), _to_byte(green), _to_byte(blue))
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")