"""Plain-text rendering of terms and zippers."""

from __future__ import annotations

from ergo.term import Abstract, I, Id, If, Let, Pair, Term
from ergo.zipper import (
    AbstractContinue,
    IfBranch,
    LetAbstract,
    LetValue,
    PairA,
    PairB,
    Step,
    Zip,
)

ABSTRACT_BOUNDS = (0, 4)
LET_BOUNDS = (0, 2)


def inside(bounds: tuple[int, int], position: int) -> bool:
    """Tell whether ``position`` lies within the inclusive ``bounds``."""
    low, high = bounds
    return low <= position <= high


def render_abstract(
    bounds: tuple[int, int], name: str | None, body: Term | None
) -> str:
    """Render the parts of ``(name: body)`` whose positions lie in ``bounds``."""
    parts = [
        "(",
        name or "",
        ": ",
        render_term(body) if body is not None else "",
        ")",
    ]
    return "".join(part for position, part in enumerate(parts) if inside(bounds, position))


def render_let(bounds: tuple[int, int], value: Term | None, cont: Term | None) -> str:
    """Render the parts of ``value: cont`` whose positions lie in ``bounds``."""
    parts = [
        render_term(value) if value is not None else "",
        ": ",
        render_term(cont) if cont is not None else "",
    ]
    return "".join(part for position, part in enumerate(parts) if inside(bounds, position))


def _render_branches(branches) -> str:
    return "".join(f"{render_term(branch)}\n" for branch in branches)


def render_term(term: Term) -> str:
    """Render a whole term; each branch of an ``If`` ends its own line."""
    match term:
        case Id(name):
            return name
        case Abstract(name, body):
            return render_abstract(ABSTRACT_BOUNDS, name, body)
        case Let(value, cont):
            return render_let(LET_BOUNDS, value, cont)
        case I(value):
            return str(value)
        case Pair(first, second):
            return f"({render_term(first)}, {render_term(second)})"
        case If(branches):
            return _render_branches(branches)
    raise TypeError(f"not a term: {term!r}")


def render_before(step: Step) -> str:
    """Render what a step puts in front of the focused term."""
    match step:
        case AbstractContinue(name):
            return render_abstract((0, 2), name, None)
        case LetValue():
            return ""
        case LetAbstract(value):
            return render_let((0, 1), value, None)
        case PairA():
            return "("
        case PairB(first):
            return f"({render_term(first)}, "
        case IfBranch(before, _):
            return _render_branches(before)
    raise TypeError(f"not a step: {step!r}")


def render_after(step: Step) -> str:
    """Render what a step puts behind the focused term."""
    match step:
        case AbstractContinue():
            return render_abstract((4, 4), None, None)
        case LetValue(cont):
            return render_let((1, 2), None, cont)
        case LetAbstract():
            return ""
        case PairA(second):
            return f", {render_term(second)})"
        case PairB():
            return ")"
        case IfBranch(_, rev_after):
            return "\n" + _render_branches(reversed(rev_after))
    raise TypeError(f"not a step: {step!r}")


def render_zip(zip: Zip) -> tuple[str, str, str]:
    """Render a zipper as the text before, at and after the focus."""
    prefix = "".join(render_before(step) for step in zip.went)
    suffix = "".join(render_after(step) for step in reversed(zip.went))
    return prefix, render_term(zip.term), suffix