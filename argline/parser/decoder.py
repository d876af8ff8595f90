# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The Argline decoder: matches a raw token sequence against registered arguments.

`decode()` runs in four phases:

1. Reset: every argument starts each pass at its initial value, so repeated
   decodes against the same arguments never see each other's values.
2. Index: option strings are mapped to their arguments and positionals are
   queued in declaration order. An option string claimed twice raises
   `DuplicateOptionError`; a shared destination raises `ArgumentDefinitionError`.
3. Scan: tokens are walked left to right. A token naming a registered option
   is always handled as that option, even while positionals are outstanding.
   Store options then consume a window of following tokens, which ends at the
   first token that looks like an option (registered or not), at the arity's
   maximum, or at the end of input. Any other token is bound to the next
   queued positional, or rejected when none remain.
4. Completion: unfilled positionals and missing required options are errors.

Decoding is atomic: it returns a complete `ParseResult` or raises an
`ArgParseError` subclass naming the offending token.
"""
from __future__ import annotations

from collections import deque
from copy import deepcopy
from typing import Any, Callable, Sequence

from argline.exceptions import (
    ArgParseError,
    ArgumentDefinitionError,
    DuplicateOptionError,
    InsufficientValuesError,
    InvalidChoiceError,
    InvalidValueError,
    MissingPositionalError,
    MissingRequiredOptionError,
    MissingValueError,
    UnrecognizedArgumentError,
)
from argline.logger import logger
from argline.parser.argument import Argument
from argline.parser.argument_action import ArgumentAction
from argline.parser.parser_types import ArgumentState, ParseResult, ParsedArgument
from argline.parser.tokens import is_option_marker
from argline.parser.utils import coerce_value
from argline.signals import HelpSignal


def reset_states(arguments: Sequence[Argument]) -> dict[str, ArgumentState]:
    """Create a fresh state table with every argument at its initial value."""
    states = {}
    for argument in arguments:
        state = ArgumentState(argument)
        state.reset()
        states[argument.dest] = state
    return states


def build_index(
    arguments: Sequence[Argument],
) -> tuple[dict[str, Argument], deque[Argument]]:
    """
    Map option strings to arguments and queue positionals in declaration order.

    Raises:
        DuplicateOptionError: Two arguments claim the same option string.
        ArgumentDefinitionError: Two arguments share a destination.
    """
    option_index: dict[str, Argument] = {}
    positionals: deque[Argument] = deque()
    dests: set[str] = set()
    for argument in arguments:
        if argument.dest in dests:
            raise ArgumentDefinitionError(
                f"Destination '{argument.dest}' is claimed by more than one argument"
            )
        dests.add(argument.dest)
        if argument.positional:
            positionals.append(argument)
            continue
        for option in argument.option_strings:
            if option in option_index:
                raise DuplicateOptionError(option)
            option_index[option] = argument
    return option_index, positionals


def consume_window(tokens: Sequence[str], start: int, argument: Argument, token: str) -> list[str]:
    """
    Collect the value tokens for a store option found just before `start`.

    Raises:
        MissingValueError: Input ended before the minimum number of values.
        InsufficientValuesError: An option marker arrived before the minimum.
    """
    minimum, maximum = argument.nargs.window
    values: list[str] = []
    i = start
    while len(values) < maximum:
        if i >= len(tokens):
            if len(values) < minimum:
                raise MissingValueError(token)
            break
        if is_option_marker(tokens[i]):
            break
        values.append(tokens[i])
        i += 1

    if len(values) < minimum:
        raise InsufficientValuesError(token, minimum)
    return values


def convert_value(token: str, argument: Argument) -> Any:
    """Check a captured token against `choices` and coerce it to the argument's type."""
    if argument.choices and token not in argument.choices:
        raise InvalidChoiceError(token, argument.long_name, list(argument.choices))
    try:
        return coerce_value(token, argument.type)
    except (ValueError, TypeError) as error:
        raise InvalidValueError(token, argument.long_name, error) from error


def _bind_store(argument: Argument, values: list[str]) -> Any:
    typed = [convert_value(value, argument) for value in values]
    if not typed:
        return deepcopy(argument.initial_value)
    if argument.nargs.is_multiple:
        return typed
    return typed[0]


def decode(
    tokens: Sequence[str],
    arguments: Sequence[Argument],
    on_help: Callable[[], None] | None = None,
) -> ParseResult:
    """
    Decode `tokens` against `arguments`.

    Args:
        tokens (Sequence[str]): Already-split command-line tokens, program name excluded.
        arguments (Sequence[Argument]): Registered arguments in declaration order.
        on_help (Callable | None): Called when a help switch is matched, before
            `HelpSignal` is raised.

    Returns:
        ParseResult: The specified arguments in scan order.

    Raises:
        ArgParseError: A subclass describing the first problem found.
        DuplicateOptionError: Two arguments claim the same option string.
        ArgumentDefinitionError: Two arguments share a destination.
        HelpSignal: A help switch was matched.
    """
    tokens = list(tokens)
    logger.debug("Decoding %d token(s) against %d argument(s)", len(tokens), len(arguments))

    option_index, positionals = build_index(arguments)
    states = reset_states(arguments)
    entries: list[ParsedArgument] = []

    try:
        i = 0
        while i < len(tokens):
            token = tokens[i]
            argument = option_index.get(token)
            if argument is not None:
                state = states[argument.dest]
                action = argument.action
                if action == ArgumentAction.HELP:
                    logger.debug("Help requested by '%s'", token)
                    if on_help is not None:
                        on_help()
                    raise HelpSignal()
                elif action == ArgumentAction.STORE_TRUE:
                    value: Any = True
                    next_i = i + 1
                elif action == ArgumentAction.STORE_FALSE:
                    value = False
                    next_i = i + 1
                else:
                    values = consume_window(tokens, i + 1, argument, token)
                    value = _bind_store(argument, values)
                    next_i = i + 1 + len(values)
            elif positionals:
                argument = positionals.popleft()
                state = states[argument.dest]
                value = convert_value(token, argument)
                next_i = i + 1
            else:
                raise UnrecognizedArgumentError(token)

            state.set_consumed(value, position=i)
            entries.append(ParsedArgument(argument, value, state.consumed_position))
            logger.debug("Bound '%s' to %r", argument.dest, value)
            i = next_i

        if positionals:
            raise MissingPositionalError(positionals[0].long_name)

        for argument in arguments:
            if argument.is_required and not states[argument.dest].consumed:
                raise MissingRequiredOptionError(argument.long_name)
    except ArgParseError as error:
        logger.debug("Decode failed: %s", error)
        raise

    return ParseResult.from_states(entries, states)
