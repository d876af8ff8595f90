"""
Argline CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument, ShowIn
from .argument_action import ArgumentAction, Arity
from .argument_parser import DEFAULT_GROUP, ArgumentGroup, ArgumentParser
from .decoder import decode
from .definition import ArgumentDefinition, define_argument
from .formatter import HelpFormatter
from .parser_types import ParsedArgument, ParseResult
from .tokens import TokenKind, classify_token, is_option_marker

__all__ = [
    "Argument",
    "ArgumentAction",
    "ArgumentDefinition",
    "ArgumentGroup",
    "ArgumentParser",
    "Arity",
    "DEFAULT_GROUP",
    "HelpFormatter",
    "ParsedArgument",
    "ParseResult",
    "ShowIn",
    "TokenKind",
    "classify_token",
    "decode",
    "define_argument",
    "is_option_marker",
]
