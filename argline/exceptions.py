# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argline.

Declaration problems are raised while an `ArgumentParser` is being built, so a
malformed registry never reaches the decoder. Decode problems are user-input
errors: each kind has its own class so callers can render targeted messages,
and each carries the offending token.

Exception Hierarchy:
- ArglineError
    ├── ArgumentDefinitionError
    │   └── DuplicateOptionError
    └── ArgParseError
        ├── MissingValueError
        ├── InsufficientValuesError
        ├── UnrecognizedArgumentError
        ├── MissingPositionalError
        ├── MissingRequiredOptionError
        ├── InvalidValueError
        └── InvalidChoiceError
"""
from __future__ import annotations


class ArglineError(Exception):
    """Base exception for Argline."""


class ArgumentDefinitionError(ArglineError):
    """Exception raised when an argument declaration is malformed."""


class DuplicateOptionError(ArgumentDefinitionError):
    """Exception raised when two options claim the same option string."""

    def __init__(self, option: str, message: str | None = None) -> None:
        self.option = option
        super().__init__(message or f"Option string '{option}' maps to multiple options")


class ArgParseError(ArglineError):
    """Base class for errors raised while decoding command-line tokens."""

    def __init__(self, message: str, token: str = "") -> None:
        self.token = token
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class MissingValueError(ArgParseError):
    """Exception raised when input ends before an option received its values."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Missing expected argument for '{token}'", token)


class InsufficientValuesError(ArgParseError):
    """Exception raised when an option is followed by too few values."""

    def __init__(self, token: str, minimum: int) -> None:
        self.minimum = minimum
        super().__init__(
            f"Expected at least {minimum} values for argument '{token}'", token
        )


class UnrecognizedArgumentError(ArgParseError):
    """Exception raised for a token that matches no option and no positional."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unexpected command-line argument '{token}'", token)


class MissingPositionalError(ArgParseError):
    """Exception raised when a positional argument was never supplied."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required positional argument: {name}", name)


class MissingRequiredOptionError(ArgParseError):
    """Exception raised when an option declared as required was never supplied."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Missing required option: {name}", name)


class InvalidValueError(ArgParseError):
    """Exception raised when a value cannot be converted to the declared type."""

    def __init__(self, token: str, name: str, error: Exception) -> None:
        self.name = name
        super().__init__(f"Invalid value '{token}' for argument '{name}': {error}", token)


class InvalidChoiceError(ArgParseError):
    """Exception raised when a value is not one of the declared choices."""

    def __init__(self, token: str, name: str, choices: list[str]) -> None:
        self.name = name
        self.choices = choices
        super().__init__(
            f"Invalid choice '{token}' for argument '{name}' "
            f"(choose from {', '.join(choices)})",
            token,
        )
