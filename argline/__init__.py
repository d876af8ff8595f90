"""
Argline CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArglineError,
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
from .parser import (
    Argument,
    ArgumentAction,
    ArgumentParser,
    Arity,
    ParsedArgument,
    ParseResult,
    ShowIn,
    decode,
)
from .signals import HelpSignal

logger = logging.getLogger("argline")


__all__ = [
    "Argument",
    "ArgumentAction",
    "ArgumentParser",
    "Arity",
    "ParsedArgument",
    "ParseResult",
    "ShowIn",
    "decode",
    "HelpSignal",
    "ArglineError",
    "ArgParseError",
    "ArgumentDefinitionError",
    "DuplicateOptionError",
    "InsufficientValuesError",
    "InvalidChoiceError",
    "InvalidValueError",
    "MissingPositionalError",
    "MissingRequiredOptionError",
    "MissingValueError",
    "UnrecognizedArgumentError",
]
