"""Unit tests for the chain builder."""

import pytest

from nullsafe.chain import Chain
from nullsafe.exceptions import InvalidChainError


def test_builder_walks_chain(make_dtos):
    """Test a built chain returns the leaf."""
    dtos = make_dtos(4)

    chain = Chain(dtos[0]).then(lambda x: x.child).then(lambda x: x.child).then(lambda x: x.child)

    assert chain.steps == 3
    assert chain.get() is dtos[3]
    assert chain.is_present() is True


def test_builder_is_immutable(make_dtos):
    """Test then() leaves the original chain untouched."""
    dtos = make_dtos(3)
    base = Chain(dtos[0]).then(lambda x: x.child)

    longer = base.then(lambda x: x.child)

    assert base.steps == 1
    assert longer.steps == 2
    assert base.get() is dtos[1]
    assert longer.get() is dtos[2]


def test_builder_short_circuits(make_dtos, make_accessors):
    """Test absence stops the built chain."""
    root = make_dtos(2)[0]
    first, second, third = make_accessors(3)

    chain = Chain(root).then(first).then(second).then(third)

    assert chain.get() is None
    assert (first.calls, second.calls, third.calls) == (1, 1, 0)
    assert chain.is_present() is False


def test_builder_default(make_dtos):
    """Test get_or_default falls back on absence."""
    root = make_dtos(1)[0]
    fallback = make_dtos(1)[0]

    assert Chain(root).then(lambda x: x.child).get_or_default(fallback) is fallback
    assert Chain(None).then(lambda x: x.child).get_or_default(fallback) is fallback


def test_builder_absent_step(make_dtos):
    """Test a None step is an absent link."""
    assert Chain(make_dtos(2)[0]).then(None).get() is None


def test_builder_without_steps():
    """Test a chain with no steps is rejected on use."""
    with pytest.raises(InvalidChainError):
        Chain("root").get()


def test_repr():
    """Test repr shows root and step count."""
    assert repr(Chain("root").then(str.upper)) == "Chain(root='root', steps=1)"
