# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result and state models for the Argline decoder.

Contents:
- `ParsedArgument`: one (argument, value) entry of a successful decode.
- `ParseResult`: the ordered entries of a decode, in token-scan order, plus
  dict-style access to every registered destination.
- `ArgumentState`: per-decode resolved-value slot for one argument.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Iterator

from argline.parser.argument import Argument
from argline.parser.argument_action import ArgumentAction


@dataclass(frozen=True)
class ParsedArgument:
    """An argument, the value it captured and the index of its token."""

    argument: Argument
    value: Any
    position: int | None = None

    @property
    def dest(self) -> str:
        return self.argument.dest


@dataclass
class ArgumentState:
    """Tracks the resolved value of one argument during a single decode."""

    arg: Argument
    value: Any = None
    consumed: bool = False
    consumed_position: int | None = None

    def set_consumed(self, value: Any, position: int | None = None) -> None:
        """Bind a value and mark this argument as specified."""
        self.value = value
        self.consumed = True
        self.consumed_position = position

    def reset(self) -> None:
        """Return to the argument's initial value."""
        self.value = deepcopy(self.arg.initial_value)
        self.consumed = False
        self.consumed_position = None


@dataclass
class ParseResult:
    """
    Ordered result of a successful decode.

    Iterating yields `ParsedArgument` entries for the arguments that were
    specified, in the order their tokens were scanned. `as_dict()` also
    includes every other registered argument at its default.
    """

    entries: list[ParsedArgument] = field(default_factory=list)
    values: dict[str, Any] = field(default_factory=dict)

    def __iter__(self) -> Iterator[ParsedArgument]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, dest: str) -> Any:
        for entry in reversed(self.entries):
            if entry.dest == dest:
                return entry.value
        if dest in self.values:
            return self.values[dest]
        raise KeyError(dest)

    def __contains__(self, dest: object) -> bool:
        return dest in self.values or any(entry.dest == dest for entry in self.entries)

    def get(self, dest: str, default: Any = None) -> Any:
        try:
            return self[dest]
        except KeyError:
            return default

    def specified(self, dest: str) -> bool:
        """True if the argument was present in the decoded tokens."""
        return any(entry.dest == dest for entry in self.entries)

    def pairs(self) -> list[tuple[str, Any]]:
        """Return the specified entries as (dest, value) tuples in scan order."""
        return [(entry.dest, entry.value) for entry in self.entries]

    def as_dict(self) -> dict[str, Any]:
        """Return every registered destination mapped to its resolved value."""
        result = dict(self.values)
        for entry in self.entries:
            result[entry.dest] = entry.value
        return result

    @classmethod
    def from_states(
        cls, entries: list[ParsedArgument], states: dict[str, ArgumentState]
    ) -> ParseResult:
        values = {
            dest: state.value
            for dest, state in states.items()
            if state.arg.action != ArgumentAction.HELP
        }
        return cls(entries=entries, values=values)
