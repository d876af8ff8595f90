# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, the registry of arguments that callers
build once and then decode command lines against.

Arguments are declared with `add_argument()`, which validates each declaration
through `ArgumentDefinition` and fails immediately on a malformed one. The
parser owns its arguments in declaration order; argument groups only collect
references to them for help rendering and never affect decoding.

Public Interface:
- `add_argument(...)`: Register a new option or positional and return its `Argument`.
- `add_argument_group(...)`: Create a named help section.
- `parse_args(...)`: Decode an already-split token list (defaults to `sys.argv[1:]`).
- `parse_argv(...)`: Decode a raw OS argument vector, program path first.
- `render_help()` / `get_usage()`: Rich help output.
- `to_definition_list()` / `from_definitions(...)`: Export and rebuild registries.

Example Usage:
    parser = ArgumentParser(description="Count lines")
    parser.add_argument("--count", "-c", type=int, default=1)
    parser.add_argument("file")

    result = parser.parse_args(["--count", "5", "input.txt"])

    # result.pairs() == [('count', 5), ('file', 'input.txt')]
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Iterable, Sequence

from rich.console import Console

from argline.console import console as default_console
from argline.exceptions import ArgumentDefinitionError, DuplicateOptionError
from argline.logger import logger
from argline.parser.argument import Argument, ShowIn
from argline.parser.argument_action import ArgumentAction
from argline.parser.decoder import decode
from argline.parser.definition import define_argument
from argline.parser.formatter import HelpFormatter
from argline.parser.parser_types import ParseResult
from argline.utils import basename

DEFAULT_GROUP = "arguments:"


@dataclass
class ArgumentGroup:
    """A named help section and the arguments listed under it."""

    name: str
    epilog: str = ""
    arguments: list[Argument] = field(default_factory=list)
    parser: ArgumentParser | None = field(default=None, repr=False, compare=False)

    def add_argument(
        self, long_name: str, short_name: str | None = None, **options: Any
    ) -> Argument:
        """Register an argument with the owning parser, listed under this group."""
        if self.parser is None:
            raise ArgumentDefinitionError(
                f"Argument group '{self.name}' is not attached to a parser"
            )
        options["group"] = self
        return self.parser.add_argument(long_name, short_name, **options)


class ArgumentParser:
    """
    Registry of command-line arguments.

    Features:
    - Long and short options, positionals matched in declaration order.
    - Store, store-true and store-false actions.
    - Multi-value arities ('?', '*', '+').
    - Type coercion and choice enforcement.
    - Help output grouped by section, rendered with Rich.
    """

    def __init__(
        self,
        description: str = "",
        prog: str | None = None,
        epilog: str = "",
        add_help: bool = True,
        console: Console | None = None,
    ) -> None:
        self.description: str = description
        self.epilog: str = epilog
        self.console: Console = console or default_console
        self._prog: str | None = prog
        self._arguments: list[Argument] = []
        self._option_map: dict[str, Argument] = {}
        self._dest_set: set[str] = set()
        self._groups: dict[str, ArgumentGroup] = {}
        self.add_argument_group(DEFAULT_GROUP)
        if add_help:
            self._add_help()

    def _add_help(self) -> None:
        """Add the -h/--help switch."""
        self.add_argument(
            "--help",
            "-h",
            action=ArgumentAction.HELP,
            help="Show this help message and exit.",
        )

    @property
    def prog(self) -> str:
        if self._prog is None:
            return basename(sys.argv[0]) if sys.argv and sys.argv[0] else "prog"
        return self._prog

    def set_prog(self, prog_name: str, basename_only: bool = True) -> None:
        """Set the program name shown in usage, reduced to its basename by default."""
        self._prog = basename(prog_name) if basename_only else prog_name

    @property
    def arguments(self) -> list[Argument]:
        """Registered arguments in declaration order."""
        return list(self._arguments)

    @property
    def argument_groups(self) -> list[ArgumentGroup]:
        return list(self._groups.values())

    def add_argument_group(self, name: str, epilog: str = "") -> ArgumentGroup:
        """
        Create a help section, or return the existing one with the same name.

        Pass the group (or its name) as `group=` to `add_argument()`.
        """
        if not name:
            raise ArgumentDefinitionError("Argument group name must not be empty")
        group = self._groups.get(name)
        if group is None:
            group = ArgumentGroup(name=name, epilog=epilog, parser=self)
            self._groups[name] = group
        elif epilog:
            group.epilog = epilog
        return group

    def _register_argument(self, argument: Argument) -> None:
        for option in argument.option_strings:
            if option in self._option_map:
                existing = self._option_map[option]
                raise DuplicateOptionError(
                    option,
                    f"Option string '{option}' is already used by argument '{existing.dest}'",
                )
        if argument.dest in self._dest_set:
            raise ArgumentDefinitionError(
                f"Destination '{argument.dest}' is already defined. "
                "Define a unique 'dest' for each argument."
            )

        for option in argument.option_strings:
            self._option_map[option] = argument
        self._dest_set.add(argument.dest)
        self._arguments.append(argument)
        self.add_argument_group(argument.group).arguments.append(argument)
        logger.debug("Registered %s in group '%s'", argument, argument.group)

    def add_argument(
        self,
        long_name: str,
        short_name: str | None = None,
        *,
        action: str | ArgumentAction = "store",
        nargs: int | str | None = None,
        default: Any = None,
        type: Any = str,
        choices: Iterable | None = None,
        required: bool = False,
        help: str = "",
        metavar: str | None = None,
        group: str | ArgumentGroup | None = None,
        dest: str | None = None,
        show_in: str | ShowIn = ShowIn.USAGE_AND_HELP,
    ) -> Argument:
        """
        Define a new argument for the parser.

        Args:
            long_name (str): `--name` or `-n` for options, a bare name for positionals.
            short_name (str | None): Optional `-x` alias; requires a `--` long name.
            action (str | ArgumentAction): "store", "store_true" or "store_false".
            nargs (int | str | None): 1, "?", "*" or "+" for store arguments.
            default (Any): Value used when the argument is absent.
            type (Any): Callable used to convert each captured value.
            choices (Iterable | None): Allowed string values.
            required (bool): Whether an option must be supplied.
            help (str): Help text.
            metavar (str | None): Value placeholder in help, defaults to the upper-cased name.
            group (str | ArgumentGroup | None): Help section, defaults to "arguments:".
            dest (str | None): Custom key in `ParseResult.as_dict()`.
            show_in (str | ShowIn): Whether the argument appears in the usage line.

        Returns:
            Argument: The registered, immutable argument.

        Raises:
            ArgumentDefinitionError: If the declaration is malformed.
            DuplicateOptionError: If an option string is already registered.
        """
        if isinstance(group, ArgumentGroup):
            group_name = group.name
        else:
            group_name = group or DEFAULT_GROUP
        argument = define_argument(
            long_name,
            short_name,
            action=action,
            nargs=nargs,
            default=default,
            type=type,
            choices=choices,
            required=required,
            help=help,
            metavar=metavar,
            group=group_name,
            dest=dest,
            show_in=show_in,
        )
        self._register_argument(argument)
        return argument

    def get_argument(self, dest: str) -> Argument | None:
        """Return the Argument registered under `dest`, if any."""
        return next((arg for arg in self._arguments if arg.dest == dest), None)

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert argument metadata into a list of plain dicts.

        The built-in help switch is left out; `from_definitions()` adds it back.
        """
        defs = []
        for arg in self._arguments:
            if arg.action == ArgumentAction.HELP:
                continue
            defs.append(
                {
                    "long_name": arg.long_name,
                    "short_name": arg.short_name,
                    "dest": arg.dest,
                    "action": arg.action.value,
                    "nargs": arg.nargs.value,
                    "type": arg.type,
                    "default": arg.default,
                    "choices": list(arg.choices) if arg.choices is not None else None,
                    "required": arg.required,
                    "help": arg.help,
                    "metavar": arg.metavar,
                    "group": arg.group,
                    "show_in": arg.show_in.value,
                }
            )
        return defs

    @classmethod
    def from_definitions(
        cls, definitions: Sequence[dict[str, Any]], **parser_options: Any
    ) -> ArgumentParser:
        """Build a parser from a list of argument definition dicts."""
        parser = cls(**parser_options)
        for definition in definitions:
            options = dict(definition)
            try:
                long_name = options.pop("long_name")
            except KeyError:
                raise ArgumentDefinitionError(
                    f"Argument definition is missing 'long_name': {definition!r}"
                ) from None
            short_name = options.pop("short_name", None)
            parser.add_argument(long_name, short_name, **options)
        return parser

    def parse_args(self, args: Sequence[str] | None = None) -> ParseResult:
        """
        Decode an already-split list of tokens.

        Args:
            args (Sequence[str] | None): Tokens to decode, `sys.argv[1:]` when None.

        Returns:
            ParseResult: The specified arguments in scan order.
        """
        if args is None:
            args = sys.argv[1:]
        elif isinstance(args, str):
            raise TypeError("parse_args() expects a sequence of tokens, not a string")
        return decode(args, self._arguments, on_help=self.render_help)

    def parse_argv(self, argv: Sequence[str]) -> ParseResult:
        """
        Decode a raw OS argument vector. The first element is the program path:
        it is discarded, and names the program when no `prog` was set.
        """
        if isinstance(argv, str):
            raise TypeError("parse_argv() expects a sequence of tokens, not a string")
        argv = list(argv)
        if argv and self._prog is None:
            self.set_prog(argv[0])
        return self.parse_args(argv[1:])

    def get_usage(self) -> str:
        """Return the plain-text usage line without the `usage:` prefix."""
        return HelpFormatter(self).usage_text()

    def format_help(self) -> str:
        """Return the full help text as a plain string."""
        return HelpFormatter(self).format_help().plain

    def render_help(self) -> None:
        """Print usage, description, argument sections and epilog to the console."""
        HelpFormatter(self).print_help(self.console)

    def __str__(self) -> str:
        """Return a human-readable summary of the parser state."""
        positional = sum(arg.positional for arg in self._arguments)
        required = sum(arg.is_required for arg in self._arguments)
        return (
            f"ArgumentParser(args={len(self._arguments)}, "
            f"options={len(self._option_map)}, positional={positional}, "
            f"required={required})"
        )

    def __repr__(self) -> str:
        return str(self)
