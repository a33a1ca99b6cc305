"""Evaluation of ergo terms."""

from __future__ import annotations

from enum import Enum

from ergo.term import Abstract, I, Id, If, Let, Pair, Term


class ErrorKind(Enum):
    """Why evaluation failed."""

    ID = "unbound identifier"
    CALL_IF_VALUE_PAIR = "value passed to an if must be a pair"
    CALL_IF_VALUE_PAIR_FIRST_I = "value passed to an if must start with an integer tag"
    CALL_IF_BRANCH_MISSING = "no branch matches the tag"
    CALL_IF_BRANCH_PAIR = "if branch must be a pair"
    CALL_WRONG = "only abstractions and ifs can be called"


class EvalError(Exception):
    """Raised when a term cannot be evaluated."""

    def __init__(self, kind: ErrorKind, name: str | None = None) -> None:
        self.kind = kind
        self.name = name
        message = kind.value if name is None else f"{kind.value}: {name}"
        super().__init__(message)


Context = dict[str, Term]


def evaluate(ctx: Context, term: Term) -> Term:
    """Evaluate ``term``, binding names into ``ctx`` as calls are made."""
    match term:
        case Id(name):
            try:
                return ctx[name]
            except KeyError:
                raise EvalError(ErrorKind.ID, name) from None
        case Abstract() | I():
            return term
        case Let(value, cont):
            return _call(ctx, value, evaluate(ctx, cont))
        case Pair(first, second):
            return Pair(evaluate(ctx, first), evaluate(ctx, second))
        case If(branches):
            return If(tuple(evaluate(ctx, branch) for branch in branches))
    raise TypeError(f"not a term: {term!r}")


def _call(ctx: Context, value: Term, callee: Term) -> Term:
    match callee:
        case Abstract(name, body):
            ctx[name] = value
            return evaluate(ctx, body)
        case If(branches):
            return _dispatch(ctx, value, branches)
    raise EvalError(ErrorKind.CALL_WRONG)


def _dispatch(ctx: Context, value: Term, branches: tuple[Term, ...]) -> Term:
    if not isinstance(value, Pair):
        raise EvalError(ErrorKind.CALL_IF_VALUE_PAIR)
    if not isinstance(value.first, I):
        raise EvalError(ErrorKind.CALL_IF_VALUE_PAIR_FIRST_I)
    wanted = value.first.value
    branch = next(
        (
            b
            for b in branches
            if isinstance(b, Pair) and isinstance(b.first, I) and b.first.value == wanted
        ),
        None,
    )
    if branch is None:
        raise EvalError(ErrorKind.CALL_IF_BRANCH_MISSING)
    if not isinstance(branch, Pair):
        raise EvalError(ErrorKind.CALL_IF_BRANCH_PAIR)
    return evaluate(ctx, Let(value.second, branch.second))