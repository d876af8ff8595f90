import math

import pytest

from argline.parser import ArgumentAction, Arity


def test_argument_action():
    action = ArgumentAction.STORE_TRUE
    assert action == ArgumentAction.STORE_TRUE
    assert action != ArgumentAction.STORE
    assert action != "invalid_action"
    assert action.value == "store_true"
    assert str(action) == "store_true"
    assert len(ArgumentAction.choices()) == 4


@pytest.mark.parametrize(
    "value,expected",
    [
        ("store", ArgumentAction.STORE),
        ("true", ArgumentAction.STORE_TRUE),
        (" FALSE ", ArgumentAction.STORE_FALSE),
        ("Store_True", ArgumentAction.STORE_TRUE),
    ],
)
def test_argument_action_aliases(value, expected):
    assert ArgumentAction(value) is expected


def test_argument_action_invalid():
    with pytest.raises(ValueError, match="Must be one of"):
        ArgumentAction("append")
    with pytest.raises(ValueError):
        ArgumentAction(3)


def test_takes_values():
    assert ArgumentAction.STORE.takes_values
    assert not ArgumentAction.STORE_TRUE.takes_values
    assert not ArgumentAction.HELP.takes_values


@pytest.mark.parametrize(
    "value,expected",
    [
        ("1", Arity.EXACTLY_ONE),
        (1, Arity.EXACTLY_ONE),
        (0, Arity.NONE),
        ("?", Arity.ZERO_OR_ONE),
        ("*", Arity.ZERO_OR_MORE),
        (" + ", Arity.ONE_OR_MORE),
    ],
)
def test_arity_aliases(value, expected):
    assert Arity(value) is expected


@pytest.mark.parametrize("value", ["x", 2, True, None])
def test_arity_invalid(value):
    with pytest.raises(ValueError):
        Arity(value)


def test_arity_window():
    assert Arity.NONE.window == (0, 0)
    assert Arity.EXACTLY_ONE.window == (1, 1)
    assert Arity.ZERO_OR_ONE.window == (0, 1)
    assert Arity.ZERO_OR_MORE.window == (0, math.inf)
    assert Arity.ONE_OR_MORE.window == (1, math.inf)


def test_arity_is_multiple():
    assert Arity.ZERO_OR_MORE.is_multiple
    assert Arity.ONE_OR_MORE.is_multiple
    assert not Arity.ZERO_OR_ONE.is_multiple
    assert not Arity.EXACTLY_ONE.is_multiple
    assert str(Arity.ONE_OR_MORE) == "+"
