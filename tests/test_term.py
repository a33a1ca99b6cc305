import dataclasses

import pytest

from ergo.term import Abstract, I, Id, If, Let, Pair, abstract, i, ident, let, pair, tag


def test_constructors_build_matching_nodes():
    assert ident("x") == Id("x")
    assert i(69) == I(69)
    assert abstract("x", ident("x")) == Abstract("x", Id("x"))
    assert let(i(69), abstract("x", ident("x"))) == Let(I(69), Abstract("x", Id("x")))
    assert pair(i(1), i(2)) == Pair(I(1), I(2))


def test_tag_wraps_argument_with_index():
    assert tag(3) == Abstract("x", Pair(I(3), Id("x")))


def test_if_branches_are_stored_as_tuple():
    branches = [i(1), i(2)]
    node = If(branches)
    assert node.branches == (I(1), I(2))
    assert node == If((I(1), I(2)))


def test_empty_if_defaults_to_no_branches():
    assert If().branches == ()


def test_terms_are_immutable():
    node = i(5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = 6
    assert node.value == 5
    assert node == I(5)


def test_terms_are_hashable_and_equal_by_value():
    assert hash(pair(i(1), ident("y"))) == hash(Pair(I(1), Id("y")))
    assert pair(i(1), i(2)) != pair(i(2), i(1))