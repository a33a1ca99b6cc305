import pytest

from ergo.term import I, Id, If, abstract, i, ident, let, pair
from ergo.zipper import AbstractContinue, IfBranch, LetAbstract, LetValue, PairB, Zip


def _to_root(z):
    while z.up():
        pass
    return z.term


def _sample():
    return let(i(69), abstract("x", ident("x")))


@pytest.mark.parametrize("leaf", [i(1), ident("a"), If(())])
def test_down_on_leaf_fails(leaf):
    z = Zip(leaf)
    assert z.down() is False
    assert z.term == leaf
    assert z.went == []


def test_moves_at_root_fail():
    z = Zip(_sample())
    assert z.up() is False
    assert z.left() is False
    assert z.right() is False
    assert z.term == _sample()


def test_down_into_let_and_abstract():
    z = Zip(_sample())
    assert z.down()
    assert z.term == abstract("x", ident("x"))
    assert z.went == [LetAbstract(I(69))]
    assert z.down()
    assert z.term == Id("x")
    assert z.went[-1] == AbstractContinue("x")
    assert _to_root(z) == _sample()


def test_let_left_and_right():
    z = Zip(_sample())
    z.down()
    assert z.left()
    assert z.term == I(69)
    assert z.went == [LetValue(abstract("x", ident("x")))]
    assert z.left() is False
    assert z.right()
    assert z.term == abstract("x", ident("x"))
    assert z.right() is False
    assert _to_root(z) == _sample()


def test_abstract_body_has_no_siblings():
    z = Zip(abstract("x", i(1)))
    z.down()
    assert z.left() is False
    assert z.right() is False
    assert z.term == I(1)


def test_pair_navigation_round_trip():
    original = pair(i(1), i(2))
    z = Zip(original)
    assert z.down()
    assert z.term == I(2)
    assert z.went == [PairB(I(1))]
    assert z.left()
    assert z.term == I(1)
    assert z.up()
    assert z.term == original


def test_if_branch_navigation():
    original = If((i(1), i(2), i(3)))
    z = Zip(original)
    assert z.down()
    assert z.term == I(3)
    assert z.went == [IfBranch((I(1), I(2)), ())]
    assert z.right() is False
    assert z.left() and z.term == I(2)
    assert z.left() and z.term == I(1)
    assert z.left() is False
    assert z.right() and z.term == I(2)
    assert z.up()
    assert z.term == original


def test_edit_through_focus_is_kept():
    z = Zip(pair(i(1), i(2)))
    z.down()
    z.term = ident("y")
    assert _to_root(z) == pair(i(1), ident("y"))


@pytest.mark.parametrize(
    "moves",
    [
        "dldrlu",
        "ddlruu",
        "rrlldddlu",
        "dlldrrru",
    ],
)
def test_any_walk_preserves_tree(moves):
    original = let(pair(i(1), If((i(2), i(3)))), abstract("x", pair(ident("x"), i(4))))
    z = Zip(original)
    actions = {"d": z.down, "u": z.up, "l": z.left, "r": z.right}
    for move in moves:
        actions[move]()
    assert _to_root(z) == original
    assert z.went == []