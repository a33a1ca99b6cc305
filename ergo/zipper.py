"""A zipper for moving a focus around a term tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ergo.term import Abstract, If, Let, Pair, Term


@dataclass(frozen=True)
class AbstractContinue:
    """Focus is the body of an abstraction binding ``name``."""

    name: str


@dataclass(frozen=True)
class LetValue:
    """Focus is the value of a let whose continuation is ``cont``."""

    cont: Term


@dataclass(frozen=True)
class LetAbstract:
    """Focus is the continuation of a let whose value is ``value``."""

    value: Term


@dataclass(frozen=True)
class PairA:
    """Focus is the first of a pair whose second is ``second``."""

    second: Term


@dataclass(frozen=True)
class PairB:
    """Focus is the second of a pair whose first is ``first``."""

    first: Term


@dataclass(frozen=True)
class IfBranch:
    """Focus is one branch; ``rev_after`` holds later branches in reverse."""

    before: tuple[Term, ...]
    rev_after: tuple[Term, ...]


Step = Union[AbstractContinue, LetValue, LetAbstract, PairA, PairB, IfBranch]


@dataclass
class Zip:
    """A focused term together with the path taken to reach it."""

    term: Term
    went: list[Step] = field(default_factory=list)

    def down(self) -> bool:
        """Move into the focused term's last child."""
        match self.term:
            case Abstract(name, body):
                self.went.append(AbstractContinue(name))
                self.term = body
            case Let(value, cont):
                self.went.append(LetAbstract(value))
                self.term = cont
            case Pair(first, second):
                self.went.append(PairB(first))
                self.term = second
            case If(branches) if branches:
                self.went.append(IfBranch(branches[:-1], ()))
                self.term = branches[-1]
            case _:
                return False
        return True

    def up(self) -> bool:
        """Rebuild the parent of the focused term and focus on it."""
        if not self.went:
            return False
        match self.went.pop():
            case AbstractContinue(name):
                self.term = Abstract(name, self.term)
            case LetValue(cont):
                self.term = Let(self.term, cont)
            case LetAbstract(value):
                self.term = Let(value, self.term)
            case PairA(second):
                self.term = Pair(self.term, second)
            case PairB(first):
                self.term = Pair(first, self.term)
            case IfBranch(before, rev_after):
                self.term = If((*before, self.term, *reversed(rev_after)))
        return True

    def left(self) -> bool:
        """Move to the previous sibling."""
        if not self.went:
            return False
        match self.went[-1]:
            case LetAbstract(value):
                self.went[-1] = LetValue(self.term)
                self.term = value
            case PairB(first):
                self.went[-1] = PairA(self.term)
                self.term = first
            case IfBranch(before, rev_after) if before:
                self.went[-1] = IfBranch(before[:-1], (*rev_after, self.term))
                self.term = before[-1]
            case _:
                return False
        return True

    def right(self) -> bool:
        """Move to the next sibling."""
        if not self.went:
            return False
        match self.went[-1]:
            case LetValue(cont):
                self.went[-1] = LetAbstract(self.term)
                self.term = cont
            case PairA(second):
                self.went[-1] = PairB(self.term)
                self.term = second
            case IfBranch(before, rev_after) if rev_after:
                self.went[-1] = IfBranch((*before, self.term), rev_after[:-1])
                self.term = rev_after[-1]
            case _:
                return False
        return True