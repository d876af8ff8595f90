# Argline CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Validated factory for `Argument` descriptors.

`ArgumentDefinition` is a pydantic model holding a raw argument declaration, as
passed to `ArgumentParser.add_argument()` or found in a list of definitions
given to `ArgumentParser.from_definitions()`. Validation normalizes aliases
(`"true"`, `"+"`, `1`), derives `dest` and `metavar`, and rejects malformed
declarations before any token is decoded:

- the long name is empty, has more than two leading dashes, or is only dashes
- a short name is given but the long name is not a `--` option
- a short name is not of the form `-x`
- the action and arity disagree (boolean switches take no values)
- a positional uses a non-store action or a multi-value arity
- a boolean switch declares a default, choices, or `required=True`
- the default is not one of the choices, or does not coerce to `type`

`define_argument()` wraps the model and turns pydantic's `ValidationError` into
`ArgumentDefinitionError`.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from argline.exceptions import ArgumentDefinitionError
from argline.parser.argument import Argument, ShowIn
from argline.parser.argument_action import ArgumentAction, Arity
from argline.parser.tokens import PREFIX_CHAR, split_leading_dashes
from argline.parser.utils import coerce_value

BOOLEAN_ACTIONS = (
    ArgumentAction.STORE_TRUE,
    ArgumentAction.STORE_FALSE,
    ArgumentAction.HELP,
)


class ArgumentDefinition(BaseModel):
    """Raw, unvalidated argument declaration."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="forbid")

    long_name: str
    short_name: str | None = None
    action: ArgumentAction = ArgumentAction.STORE
    nargs: Arity | None = None
    default: Any = None
    type: Any = str
    choices: list[str] | None = None
    required: bool = False
    help: str = ""
    metavar: str | None = None
    group: str = ""
    show_in: ShowIn = ShowIn.USAGE_AND_HELP
    dest: str | None = None

    @field_validator("action", mode="before")
    @classmethod
    def validate_action(cls, value: Any) -> ArgumentAction:
        if isinstance(value, ArgumentAction):
            return value
        return ArgumentAction(value)

    @field_validator("nargs", mode="before")
    @classmethod
    def validate_nargs(cls, value: Any) -> Arity | None:
        if value is None or isinstance(value, Arity):
            return value
        return Arity(value)

    @field_validator("show_in", mode="before")
    @classmethod
    def validate_show_in(cls, value: Any) -> ShowIn:
        if isinstance(value, ShowIn):
            return value
        return ShowIn(value)

    @field_validator("choices", mode="before")
    @classmethod
    def validate_choices(cls, value: Any) -> list[str] | None:
        if value is None:
            return None
        if isinstance(value, (str, dict)):
            raise ValueError("choices must be a list, tuple, or set of strings")
        try:
            choices = [str(choice) for choice in value]
        except TypeError:
            raise ValueError("choices must be iterable (like list, tuple, or set)")
        if not choices:
            raise ValueError("choices must not be empty")
        if len(set(choices)) != len(choices):
            raise ValueError(f"choices contain duplicates: {choices}")
        return choices

    @field_validator("long_name")
    @classmethod
    def validate_long_name(cls, value: str) -> str:
        if len(value) < 1:
            raise ValueError("Argument must be at least one character long")
        dashes, name = split_leading_dashes(value)
        if len(dashes) > 2:
            raise ValueError(f"More than two dashes in argument name '{value}'")
        if not name:
            raise ValueError(f"Argument name '{value}' has no characters after its dashes")
        return value

    @field_validator("short_name")
    @classmethod
    def validate_short_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if len(value) != 2 or value[0] != PREFIX_CHAR or value[1] == PREFIX_CHAR:
            raise ValueError(
                f"Short option '{value}' must be a dash followed by a single character"
            )
        return value

    @model_validator(mode="after")
    def validate_definition(self) -> ArgumentDefinition:
        dashes, name = split_leading_dashes(self.long_name)
        positional = not dashes

        if self.short_name is not None and len(dashes) != 2:
            raise ValueError("Long option must be specified before short option")

        if positional and self.action != ArgumentAction.STORE:
            raise ValueError(
                f"Action '{self.action}' cannot be used with positional arguments"
            )

        if self.action in BOOLEAN_ACTIONS:
            if self.nargs not in (None, Arity.NONE):
                raise ValueError(f"{self.action} action requires nargs to be '0'")
            if self.default is not None:
                raise ValueError(
                    f"Default value cannot be set for action {self.action}. "
                    "It is a boolean flag."
                )
            if self.choices is not None:
                raise ValueError(f"choices cannot be specified for {self.action} actions")
            if self.required:
                raise ValueError(f"Argument with action {self.action} cannot be required")
            self.nargs = Arity.NONE
        else:
            if self.nargs is None:
                self.nargs = Arity.EXACTLY_ONE
            elif self.nargs == Arity.NONE:
                raise ValueError("store action requires nargs other than '0'")
            if positional and self.nargs != Arity.EXACTLY_ONE:
                raise ValueError("Positional arguments consume exactly one value")

        if self.default is not None and self.choices:
            defaults = self.default if isinstance(self.default, list) else [self.default]
            for item in defaults:
                if str(item) not in self.choices:
                    raise ValueError(
                        f"Default value '{item}' not in allowed choices: {self.choices}"
                    )

        if self.dest is None:
            self.dest = name.replace("-", "_")
        if not self.dest.replace("_", "").isalnum():
            raise ValueError(
                f"dest '{self.dest}' must be a valid identifier "
                "(letters, digits, and underscores only)"
            )
        if self.dest[0].isdigit():
            raise ValueError(f"dest '{self.dest}' must not start with a digit")

        if self.metavar is None:
            self.metavar = name.upper()
        return self

    def resolve_default(self) -> Any:
        """Coerce string defaults to the declared type."""
        if self.action in BOOLEAN_ACTIONS or self.default is None:
            return self.default
        try:
            if isinstance(self.default, list):
                return [
                    coerce_value(item, self.type) if isinstance(item, str) else item
                    for item in self.default
                ]
            if isinstance(self.default, str):
                return coerce_value(self.default, self.type)
        except (ValueError, TypeError) as error:
            raise ArgumentDefinitionError(
                f"Default value {self.default!r} for '{self.dest}' cannot be coerced: {error}"
            ) from error
        return self.default

    def build(self) -> Argument:
        """Return the immutable `Argument` this definition describes."""
        assert self.nargs is not None, "nargs is resolved by validation"
        assert self.dest is not None, "dest is resolved by validation"
        return Argument(
            long_name=self.long_name,
            short_name=self.short_name,
            dest=self.dest,
            action=self.action,
            nargs=self.nargs,
            type=self.type,
            default=self.resolve_default(),
            choices=tuple(self.choices) if self.choices is not None else None,
            required=self.required,
            help=self.help,
            metavar=self.metavar or "",
            group=self.group,
            show_in=self.show_in,
        )


def define_argument(long_name: str, short_name: str | None = None, **options: Any) -> Argument:
    """
    Validate a declaration and build its `Argument`.

    Raises:
        ArgumentDefinitionError: If the declaration is malformed.
    """
    try:
        definition = ArgumentDefinition(long_name=long_name, short_name=short_name, **options)
    except ValidationError as error:
        messages = "; ".join(
            str(detail["ctx"]["error"]) if "error" in detail.get("ctx", {}) else detail["msg"]
            for detail in error.errors()
        )
        raise ArgumentDefinitionError(f"Invalid argument '{long_name}': {messages}") from error
    return definition.build()
