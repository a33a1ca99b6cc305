"""Terms of the ergo language and convenience constructors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Id:
    """A reference to a bound name."""

    name: str


@dataclass(frozen=True)
class Abstract:
    """A function binding ``name`` in ``body``."""

    name: str
    body: Term


@dataclass(frozen=True)
class Let:
    """Feed ``value`` to whatever ``cont`` evaluates to."""

    value: Term
    cont: Term


@dataclass(frozen=True)
class I:
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class Pair:
    """An ordered pair of terms."""

    first: Term
    second: Term


@dataclass(frozen=True)
class If:
    """A set of tagged branches to dispatch on."""

    branches: tuple[Term, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "branches", tuple(self.branches))


Term = Union[Id, Abstract, Let, I, Pair, If]


def ident(name: str) -> Id:
    """Build an identifier term."""
    return Id(name)


def abstract(name: str, body: Term) -> Abstract:
    """Build an abstraction binding ``name``."""
    return Abstract(name, body)


def let(value: Term, cont: Term) -> Let:
    """Build a let term applying ``cont`` to ``value``."""
    return Let(value, cont)


def i(value: int) -> I:
    """Build an integer literal."""
    return I(value)


def pair(first: Term, second: Term) -> Pair:
    """Build a pair."""
    return Pair(first, second)


def tag(index: int) -> Abstract:
    """Build a function that wraps its argument as ``(index, x)``."""
    name = "x"
    return Abstract(name, Pair(I(index), Id(name)))