# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentAction` and `Arity`, the enums that describe how an argument
behaves when the decoder meets it.

`ArgumentAction` decides what a matched option does (store values or store an
implied boolean). `Arity` decides how many value tokens a store option
consumes. Both accept config-friendly aliases so declarations can be written
with plain strings.

Exports:
    - ArgumentAction: Enum of allowed actions for arguments.
    - Arity: Enum of allowed value counts for store arguments.

Example:
    ArgumentAction("true") → ArgumentAction.STORE_TRUE
    Arity("+")             → Arity.ONE_OR_MORE
    Arity(1)               → Arity.EXACTLY_ONE
"""
from __future__ import annotations

import math
from enum import Enum


class ArgumentAction(Enum):
    """
    Defines the action to be taken when the argument is encountered.

    Members:
        STORE: Store the value(s) that follow the option (default).
        STORE_TRUE: Store `True` if the flag is present.
        STORE_FALSE: Store `False` if the flag is present.
        HELP: Display help and stop decoding.

    Aliases:
        - "true" → "store_true"
        - "false" → "store_false"
    """

    STORE = "store"
    STORE_TRUE = "store_true"
    STORE_FALSE = "store_false"
    HELP = "help"

    @classmethod
    def choices(cls) -> list[ArgumentAction]:
        """Return a list of all argument actions."""
        return list(cls)

    @property
    def takes_values(self) -> bool:
        return self is ArgumentAction.STORE

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "true": "store_true",
            "false": "store_false",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgumentAction:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the argument action."""
        return self.value


class Arity(Enum):
    """
    Number of value tokens an argument consumes.

    Members:
        NONE: No values (boolean switches).
        EXACTLY_ONE: One value (default for store arguments).
        ZERO_OR_ONE: An optional single value.
        ZERO_OR_MORE: Any number of values.
        ONE_OR_MORE: At least one value.
    """

    NONE = "0"
    EXACTLY_ONE = "1"
    ZERO_OR_ONE = "?"
    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"

    @classmethod
    def _missing_(cls, value: object) -> Arity:
        if isinstance(value, int) and not isinstance(value, bool):
            for member in cls:
                if member.value == str(value):
                    return member
        if isinstance(value, str):
            normalized = value.strip()
            for member in cls:
                if member.value == normalized:
                    return member
        valid = ", ".join(repr(member.value) for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: {value!r}. Must be one of: {valid}")

    @property
    def window(self) -> tuple[int, float]:
        """Return the (minimum, maximum) number of values this arity consumes."""
        return {
            Arity.NONE: (0, 0),
            Arity.EXACTLY_ONE: (1, 1),
            Arity.ZERO_OR_ONE: (0, 1),
            Arity.ZERO_OR_MORE: (0, math.inf),
            Arity.ONE_OR_MORE: (1, math.inf),
        }[self]

    @property
    def is_multiple(self) -> bool:
        """True if values are bound as a list rather than a single value."""
        return self in (Arity.ZERO_OR_MORE, Arity.ONE_OR_MORE)

    def __str__(self) -> str:
        return self.value
