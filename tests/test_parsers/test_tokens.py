import pytest

from argline.parser.tokens import (
    TokenKind,
    classify_token,
    is_option_marker,
    split_leading_dashes,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("-v", TokenKind.SHORT_OPTION),
        ("-5", TokenKind.SHORT_OPTION),
        ("--verbose", TokenKind.LONG_OPTION),
        ("--x", TokenKind.LONG_OPTION),
        ("--dry-run", TokenKind.LONG_OPTION),
        ("value", TokenKind.VALUE),
        ("", TokenKind.VALUE),
        ("-", TokenKind.VALUE),
        ("--", TokenKind.VALUE),
        ("---x", TokenKind.VALUE),
        ("-12", TokenKind.VALUE),
        ("-3.14", TokenKind.VALUE),
        ("-vx", TokenKind.VALUE),
        ("v-", TokenKind.VALUE),
    ],
)
def test_classify_token(token, expected):
    assert classify_token(token) is expected


def test_is_option_marker():
    assert is_option_marker("-v")
    assert is_option_marker("--unknown")
    assert not is_option_marker("-")
    assert not is_option_marker("--")
    assert not is_option_marker("input.txt")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("--out", ("--", "out")),
        ("-o", ("-", "o")),
        ("file", ("", "file")),
        ("---x", ("---", "x")),
        ("--", ("--", "")),
    ],
)
def test_split_leading_dashes(name, expected):
    assert split_leading_dashes(name) == expected
