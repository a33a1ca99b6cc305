"""Editor commands and their textual syntax."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Mode(Enum):
    """Editor input mode."""

    MIGRATE = "migrate"
    COMMAND = "command"


class Migrate(Enum):
    """Direction of cursor movement in the term tree."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Quit:
    """Leave the editor."""


@dataclass(frozen=True)
class SetMode:
    """Switch the editor to ``mode``."""

    mode: Mode


@dataclass(frozen=True)
class MigrateCommand:
    """Move the cursor in ``direction``."""

    direction: Migrate


Command = Union[Quit, SetMode, MigrateCommand]


class SyntaxKind(Enum):
    """Kind of syntax item that can be typed."""

    I = "i"
    ADD = "+"
    MUL = "*"


@dataclass(frozen=True)
class SyntaxItem:
    """A syntax item; ``value`` is set for integers only."""

    kind: SyntaxKind
    value: int | None = None


class ParseError(ValueError):
    """Raised when text does not start with the expected syntax."""


_U32_MAX = 2**32 - 1
_DIGITS = re.compile(r"[0-9]+")


def parse_command(text: str) -> tuple[str, Command]:
    """Parse a command prefix of ``text``; return the rest and the command."""
    if text.startswith("quit"):
        return text[len("quit"):], Quit()
    try:
        rest, direction = parse_migrate(text)
    except ParseError:
        raise ParseError(f"unknown command: {text!r}") from None
    return rest, MigrateCommand(direction)


def parse_migrate(text: str) -> tuple[str, Migrate]:
    """Parse a direction prefix of ``text``; return the rest and the direction."""
    for direction in Migrate:
        if text.startswith(direction.value):
            return text[len(direction.value):], direction
    raise ParseError(f"unknown direction: {text!r}")


def parse_syntax_item(text: str) -> tuple[str, SyntaxItem]:
    """Parse an integer, ``+`` or ``*`` prefix of ``text``."""
    match = _DIGITS.match(text)
    if match is not None:
        number = int(match.group())
        if number <= _U32_MAX:
            return text[match.end():], SyntaxItem(SyntaxKind.I, number)
    if text.startswith("+"):
        return text[1:], SyntaxItem(SyntaxKind.ADD)
    if text.startswith("*"):
        return text[1:], SyntaxItem(SyntaxKind.MUL)
    raise ParseError(f"unknown syntax item: {text!r}")