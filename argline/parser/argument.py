# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass, the immutable descriptor of one option or
positional slot registered with an `ArgumentParser`.

An `Argument` is built once (normally through `ArgumentParser.add_argument()`,
which validates the declaration with `ArgumentDefinition`) and never changes
afterwards. The decoder reads descriptors; resolved values live in the
`ParseResult` of each decode pass.

Key Attributes:
- `long_name`: `--count`, `-v` or, for positionals, a bare name like `file`
- `short_name`: optional `-c` alias for a dashed long name
- `action`: `ArgumentAction` describing decode semantics
- `nargs`: `Arity` describing how many values a store argument consumes
- `default`, `choices`, `type`, `required`: value policy
- `group`, `help`, `metavar`, `show_in`: help rendering metadata
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from argline.parser.argument_action import ArgumentAction, Arity
from argline.parser.tokens import split_leading_dashes


class ShowIn(Enum):
    """Where an argument appears in rendered help."""

    USAGE_AND_HELP = "usage_and_help"
    HELP_ONLY = "help_only"


@dataclass(frozen=True)
class Argument:
    """
    Represents a command-line argument.

    Attributes:
        long_name (str): Long option string (`--count`) or positional name (`file`).
        short_name (str | None): Optional short option string (`-c`).
        dest (str): Key of the value in `ParseResult.as_dict()`. Derived from the
            long name when empty.
        action (ArgumentAction): What happens when the argument is matched.
        nargs (Arity): Number of values consumed by store arguments.
        type (Any): Callable that converts each captured string.
        default (Any): Value used when the argument is absent or gets no values.
        choices (tuple[str, ...] | None): Accepted values, if restricted.
        required (bool): True if an option must be supplied. Positionals are always required.
        help (str): Help text.
        metavar (str): Value placeholder used in help.
        group (str): Name of the help section the argument is listed under.
        show_in (ShowIn): Whether the argument appears in the usage line.
    """

    long_name: str
    short_name: str | None = None
    dest: str = ""
    action: ArgumentAction = ArgumentAction.STORE
    nargs: Arity = Arity.EXACTLY_ONE
    type: Any = str
    default: Any = None
    choices: tuple[str, ...] | None = None
    required: bool = False
    help: str = ""
    metavar: str = ""
    group: str = ""
    show_in: ShowIn = ShowIn.USAGE_AND_HELP

    def __post_init__(self) -> None:
        if not self.dest:
            object.__setattr__(self, "dest", self.bare_name.replace("-", "_"))

    @property
    def positional(self) -> bool:
        """True if the long name carries no leading dash."""
        return not self.long_name.startswith("-")

    @property
    def is_required(self) -> bool:
        if self.positional:
            return True
        return self.required

    @property
    def option_strings(self) -> tuple[str, ...]:
        """The option strings that select this argument; empty for positionals."""
        if self.positional:
            return ()
        if self.short_name:
            return (self.short_name, self.long_name)
        return (self.long_name,)

    @property
    def bare_name(self) -> str:
        return split_leading_dashes(self.long_name)[1]

    @property
    def initial_value(self) -> Any:
        """The value an argument resolves to before any token is decoded."""
        if self.action == ArgumentAction.STORE_TRUE:
            return False
        if self.action == ArgumentAction.STORE_FALSE:
            return True
        if self.action == ArgumentAction.HELP:
            return False
        if self.default is None and self.nargs.is_multiple:
            return []
        return self.default

    def get_positional_text(self) -> str:
        """Get the positional text for the argument."""
        text = ""
        if self.positional:
            if self.choices:
                text = f"{{{','.join(self.choices)}}}"
            else:
                text = self.long_name
        return text

    def get_value_text(self) -> str:
        """Get the value placeholder shown after an option in help and usage."""
        if not self.action.takes_values:
            return ""
        if self.choices:
            text = f"{{{','.join(self.choices)}}}"
        elif self.positional:
            text = self.long_name
        else:
            text = self.metavar or self.bare_name.upper()

        if self.nargs == Arity.ZERO_OR_ONE:
            text = f"[{text}]"
        elif self.nargs == Arity.ZERO_OR_MORE:
            text = f"[{text} ...]"
        elif self.nargs == Arity.ONE_OR_MORE:
            text = f"{text} [{text} ...]"
        return text

    def __str__(self) -> str:
        names = ", ".join(self.option_strings) or self.long_name
        return f"Argument({names}, action={self.action}, nargs={self.nargs})"
