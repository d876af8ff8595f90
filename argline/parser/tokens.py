# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification for the Argline decoder.

A raw command-line string is either a short option marker (`-v`), a long option
marker (`--verbose`), or a plain value. Classification only answers whether a
token *looks* like an option; whether it names a registered argument is decided
by the decoder. The decoder uses it to end a value-consumption window, so a
value such as `-x` stops a window even if no `-x` option exists.
"""
from __future__ import annotations

from enum import Enum

PREFIX_CHAR = "-"


class TokenKind(Enum):
    SHORT_OPTION = "short_option"
    LONG_OPTION = "long_option"
    VALUE = "value"


def classify_token(token: str) -> TokenKind:
    """
    Classify a single raw token.

    - SHORT_OPTION: exactly two characters, a dash then a non-dash (`-v`).
    - LONG_OPTION: more than two characters, two dashes then a non-dash (`--verbose`).
    - VALUE: everything else, including `-`, `--`, `---x` and `-12`.
    """
    if len(token) == 2 and token[0] == PREFIX_CHAR and token[1] != PREFIX_CHAR:
        return TokenKind.SHORT_OPTION
    if (
        len(token) > 2
        and token[0] == PREFIX_CHAR
        and token[1] == PREFIX_CHAR
        and token[2] != PREFIX_CHAR
    ):
        return TokenKind.LONG_OPTION
    return TokenKind.VALUE


def is_option_marker(token: str) -> bool:
    """Return True if the token classifies as a short or long option marker."""
    return classify_token(token) is not TokenKind.VALUE


def split_leading_dashes(name: str) -> tuple[str, str]:
    """Split a name into its leading dashes and the rest: '--out' -> ('--', 'out')."""
    bare = name.lstrip(PREFIX_CHAR)
    return name[: len(name) - len(bare)], bare
