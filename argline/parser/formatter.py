# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich-based help rendering for `ArgumentParser`.

`HelpFormatter` reads a parser without changing it and produces four blocks:
usage, description, one section per argument group, and epilog. Each block is a
`rich.text.Text`, so bracketed placeholders such as `[COUNT ...]` are printed
literally instead of being read as console markup.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from argline.parser.argument import Argument, ShowIn
from argline.parser.argument_action import ArgumentAction

if TYPE_CHECKING:
    from argline.parser.argument_parser import ArgumentParser

HELP_POSITION = 30


def usage_fragment(argument: Argument) -> str:
    """Return how an argument is written in the usage line."""
    if argument.positional:
        return argument.get_positional_text()
    option = argument.option_strings[0]
    value_text = argument.get_value_text()
    text = f"{option} {value_text}" if value_text else option
    if argument.is_required:
        return text
    return f"[{text}]"


def invocation_text(argument: Argument) -> str:
    """Return the left-hand column of an argument's help line."""
    if argument.positional:
        return argument.get_positional_text()
    flags = ", ".join(argument.option_strings)
    value_text = argument.get_value_text()
    return f"{flags} {value_text}" if value_text else flags


class HelpFormatter:
    """Formats help for a single parser."""

    def __init__(self, parser: ArgumentParser) -> None:
        self.parser = parser

    def usage_text(self) -> str:
        fragments = [
            usage_fragment(argument)
            for argument in self.parser.arguments
            if argument.show_in == ShowIn.USAGE_AND_HELP and not argument.positional
        ]
        fragments.extend(
            usage_fragment(argument)
            for argument in self.parser.arguments
            if argument.show_in == ShowIn.USAGE_AND_HELP and argument.positional
        )
        return " ".join([self.parser.prog, *fragments]).rstrip()

    def format_usage(self) -> Text:
        return Text.assemble(("usage: ", "usage"), (self.usage_text(), "usage"), "\n")

    def format_description(self) -> Text:
        if not self.parser.description:
            return Text("")
        return Text(f"\n{self.parser.description}\n")

    def format_argument(self, argument: Argument) -> Text:
        invocation = invocation_text(argument)
        help_text = argument.help
        if (
            argument.action == ArgumentAction.STORE
            and argument.default is not None
            and not argument.positional
        ):
            help_text = f"{help_text} (default: {argument.default})".strip()

        line = Text("  ")
        line.append(invocation, style="flag")
        if not help_text:
            return line
        if len(invocation) + 2 >= HELP_POSITION:
            line.append("\n" + " " * (HELP_POSITION + 1))
        else:
            line.append(" " * (HELP_POSITION - len(invocation) - 1))
        line.append(help_text)
        return line

    def format_arguments(self) -> Text:
        blocks = []
        for group in self.parser.argument_groups:
            if not group.arguments:
                continue
            block = Text("\n")
            block.append(group.name, style="section")
            for argument in group.arguments:
                block.append("\n")
                block.append_text(self.format_argument(argument))
            if group.epilog:
                block.append("\n")
                block.append(group.epilog, style="epilog")
            block.append("\n")
            blocks.append(block)
        return Text("").join(blocks)

    def format_epilog(self) -> Text:
        if not self.parser.epilog:
            return Text("")
        return Text(f"\n{self.parser.epilog}\n", style="epilog")

    def format_help(self) -> Text:
        return Text("").join(
            [
                self.format_usage(),
                self.format_description(),
                self.format_arguments(),
                self.format_epilog(),
            ]
        )

    def print_help(self, console: Console) -> None:
        console.print(self.format_help(), end="")
