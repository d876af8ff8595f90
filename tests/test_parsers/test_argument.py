import pytest

from argline.parser import Argument, ArgumentAction, Arity, ShowIn


def test_positional_text_with_choices():
    arg = Argument(long_name="path", dest="path", choices=("a", "b"))
    assert arg.get_positional_text() == "{a,b}"


def test_positional_text_without_choices():
    arg = Argument(long_name="path", dest="path")
    assert arg.get_positional_text() == "path"


def test_option_has_no_positional_text():
    arg = Argument(long_name="--path", dest="path")
    assert arg.get_positional_text() == ""


@pytest.mark.parametrize(
    "nargs,expected",
    [
        (Arity.EXACTLY_ONE, "VALUE"),
        (Arity.ZERO_OR_ONE, "[VALUE]"),
        (Arity.ZERO_OR_MORE, "[VALUE ...]"),
        (Arity.ONE_OR_MORE, "VALUE [VALUE ...]"),
    ],
)
def test_value_text_variants(nargs, expected):
    arg = Argument(long_name="--value", dest="value", nargs=nargs)
    assert arg.get_value_text() == expected


def test_value_text_uses_metavar():
    arg = Argument(long_name="--count", dest="count", metavar="N")
    assert arg.get_value_text() == "N"


def test_value_text_with_choices():
    arg = Argument(long_name="--mode", dest="mode", choices=("dev", "prod"))
    assert arg.get_value_text() == "{dev,prod}"


def test_value_text_for_switches():
    arg = Argument(
        long_name="--verbose",
        dest="verbose",
        action=ArgumentAction.STORE_TRUE,
        nargs=Arity.NONE,
    )
    assert arg.get_value_text() == ""


def test_kind_and_required():
    positional = Argument(long_name="file", dest="file", required=False)
    option = Argument(long_name="--file", dest="file")
    one_dash = Argument(long_name="-f", dest="f", required=True)

    assert positional.positional
    assert positional.is_required
    assert not option.positional
    assert not option.is_required
    assert not one_dash.positional
    assert one_dash.is_required


def test_option_strings():
    assert Argument(long_name="--count", short_name="-c", dest="count").option_strings == (
        "-c",
        "--count",
    )
    assert Argument(long_name="--count", dest="count").option_strings == ("--count",)
    assert Argument(long_name="count", dest="count").option_strings == ()


@pytest.mark.parametrize(
    "argument,expected",
    [
        (
            Argument(
                long_name="--on",
                dest="on",
                action=ArgumentAction.STORE_TRUE,
                nargs=Arity.NONE,
            ),
            False,
        ),
        (
            Argument(
                long_name="--off",
                dest="off",
                action=ArgumentAction.STORE_FALSE,
                nargs=Arity.NONE,
            ),
            True,
        ),
        (Argument(long_name="--tags", dest="tags", nargs=Arity.ZERO_OR_MORE), []),
        (Argument(long_name="--name", dest="name", default="x"), "x"),
        (Argument(long_name="--name", dest="name"), None),
    ],
)
def test_initial_value(argument, expected):
    assert argument.initial_value == expected


def test_equality_and_hash():
    a1 = Argument(long_name="--f", dest="f")
    a2 = Argument(long_name="--f", dest="f")
    a3 = Argument(long_name="-x", dest="x")

    assert a1 == a2
    assert a1 != a3
    assert hash(a1) == hash(a2)
    assert a1 != "not an argument"


def test_arguments_are_immutable():
    arg = Argument(long_name="--f", dest="f")
    with pytest.raises(AttributeError):
        arg.default = "changed"


def test_str():
    arg = Argument(long_name="--count", short_name="-c", dest="count")
    assert str(arg) == "Argument(-c, --count, action=store, nargs=1)"
    assert Argument(long_name="file", dest="file").show_in is ShowIn.USAGE_AND_HELP
