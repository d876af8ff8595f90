from io import StringIO

import pytest
from rich.console import Console

from argline.console import HELP_THEME
from argline.exceptions import ArgumentDefinitionError
from argline.parser import ArgumentGroup, ArgumentParser, HelpFormatter
from argline.signals import HelpSignal


@pytest.fixture
def console():
    return Console(file=StringIO(), theme=HELP_THEME, width=100)


@pytest.fixture
def parser(console):
    parser = ArgumentParser(
        description="Count lines in a file.",
        prog="tool",
        epilog="See the manual for more.",
        console=console,
    )
    parser.add_argument("--count", "-c", type=int, default="3", help="How many lines")
    parser.add_argument("--verbose", "-v", action="store_true", help="Chatty output")
    parser.add_argument("--name", required=True, help="Your name")
    parser.add_argument("--mode", choices=["dev", "prod"], show_in="help_only")
    parser.add_argument("file", help="Input file")
    return parser


def test_usage(parser):
    assert parser.get_usage() == "tool [-h] [-c COUNT] [-v] --name NAME file"


def test_usage_with_multi_value_options():
    parser = ArgumentParser(prog="tool", add_help=False)
    parser.add_argument("--files", nargs="+")
    parser.add_argument("--level", nargs="?", metavar="N")
    assert parser.get_usage() == "tool [--files FILES [FILES ...]] [--level [N]]"


def test_format_help_sections(parser):
    text = parser.format_help()

    assert text.startswith("usage: tool [-h] [-c COUNT] [-v] --name NAME file\n")
    assert "\nCount lines in a file.\n" in text
    assert "\narguments:\n" in text
    assert "-c, --count COUNT" in text
    assert "How many lines (default: 3)" in text
    assert "--mode {dev,prod}" in text
    assert "-h, --help" in text
    assert "  file" in text
    assert text.rstrip().endswith("See the manual for more.")


def test_help_columns():
    parser = ArgumentParser(prog="tool", add_help=False)
    parser.add_argument("--count", help="How many")
    parser.add_argument("--a-very-long-option-name", "-a", help="Wrapped")

    lines = parser.format_help().splitlines()
    count_line = next(line for line in lines if "--count" in line)
    assert count_line.index("How many") == 31

    long_index = next(i for i, line in enumerate(lines) if "--a-very-long-option-name" in line)
    assert "Wrapped" not in lines[long_index]
    assert lines[long_index + 1] == " " * 31 + "Wrapped"


def test_argument_groups(console):
    parser = ArgumentParser(prog="tool", add_help=False, console=console)
    inputs = parser.add_argument_group("input options:", epilog="Inputs are read lazily.")
    parser.add_argument("--source", group=inputs)
    inputs.add_argument("--limit", "-l", type=int)
    parser.add_argument("--target", group="output options:")
    parser.add_argument("--dry-run", action="store_true")

    assert [group.name for group in parser.argument_groups] == [
        "arguments:",
        "input options:",
        "output options:",
    ]
    assert [arg.dest for arg in inputs.arguments] == ["source", "limit"]
    assert parser.get_argument("limit").group == "input options:"
    assert parser.add_argument_group("input options:") is inputs

    text = parser.format_help().split("\n", 1)[1]
    assert text.index("arguments:") < text.index("--dry-run")
    assert text.index("input options:") < text.index("--source")
    assert text.index("--source") < text.index("Inputs are read lazily.")
    assert text.index("output options:") < text.index("--target")


def test_groups_do_not_change_decode_order(console):
    parser = ArgumentParser(add_help=False, console=console)
    parser.add_argument("first", group="later:")
    parser.add_argument("second")

    result = parser.parse_args(["a", "b"])
    assert result.pairs() == [("first", "a"), ("second", "b")]


def test_empty_groups_are_not_rendered():
    parser = ArgumentParser(prog="tool", add_help=False)
    parser.add_argument_group("unused:")
    assert "unused:" not in parser.format_help()


def test_render_help_prints_to_console(parser, console):
    parser.render_help()
    output = console.file.getvalue()
    assert "usage: tool" in output
    assert "Count lines in a file." in output


def test_help_switch(parser, console):
    with pytest.raises(HelpSignal):
        parser.parse_args(["--count", "2", "-h"])
    assert "usage: tool" in console.file.getvalue()


def test_set_prog():
    parser = ArgumentParser()
    parser.set_prog("/usr/local/bin/tool")
    assert parser.prog == "tool"

    parser.set_prog("./bin/tool", basename_only=False)
    assert parser.prog == "./bin/tool"


def test_formatter_is_read_only(parser):
    before = parser.arguments
    HelpFormatter(parser).format_help()
    assert parser.arguments == before


def test_detached_group_cannot_add_arguments():
    group = ArgumentGroup(name="orphan:")
    with pytest.raises(ArgumentDefinitionError, match="not attached"):
        group.add_argument("--x")
