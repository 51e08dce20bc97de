"""
Console command and argument definitions.

A ``ConsoleCommand`` pairs a callback with the typed arguments it accepts.
Definitions are either listed explicitly or derived from the callback's
signature, where annotations select the argument type and ``X | None`` or a
default value marks an argument as optional.
"""

import inspect
import types
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, NewType, Union, get_args, get_origin, get_type_hints

from pydantic import BaseModel, ConfigDict, field_validator

from cmdlang.core.grammar import is_identifier
from cmdlang.exceptions.core import CommandRegistrationError

# Marker annotation for ``--name`` switches; plain ``bool`` requires a value
Switch = NewType("Switch", bool)


class ArgumentType(Enum):
    """Type an argument value is converted to before the callback runs."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"
    FLAG = "flag"


ANNOTATION_TYPES: dict[Any, ArgumentType] = {
    int: ArgumentType.INT,
    float: ArgumentType.FLOAT,
    str: ArgumentType.STRING,
    bool: ArgumentType.BOOL,
    Switch: ArgumentType.FLAG,
}


class ArgumentDefinition(BaseModel):
    """A named, typed argument of a console command."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: ArgumentType
    optional: bool = False

    @field_validator("name")
    @classmethod
    def _name_is_identifier(cls, value: str) -> str:
        if not is_identifier(value):
            raise ValueError(f"argument name '{value}' is not a valid identifier")
        return value

    def usage(self) -> str:
        """Short usage text, e.g. ``count: int`` or ``[--verbose]``."""
        if self.type is ArgumentType.FLAG:
            return f"[--{self.name}]"
        text = f"{self.name}: {self.type.value}"
        return f"[{text}]" if self.optional else text


@dataclass(frozen=True)
class ConsoleCommand:
    """A registered console command."""

    name: str
    callback: Callable[..., Any]
    arguments: tuple[ArgumentDefinition, ...] = ()
    description: str = ""

    def usage(self) -> str:
        """One-line usage text for the command."""
        parts = [self.name, *(argument.usage() for argument in self.arguments)]
        return " ".join(parts)


def _unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1 and len(get_args(annotation)) == 2:
            return members[0], True
    return annotation, False


def arguments_from_signature(
    name: str, callback: Callable[..., Any]
) -> tuple[ArgumentDefinition, ...]:
    """
    Derive argument definitions from a callback's type annotations.

    Params:
        name: Command name, used in error messages
        callback: Function whose parameters become command arguments

    Returns:
        Argument definitions in parameter order

    Raises:
        CommandRegistrationError: If a parameter is unannotated, variadic,
            annotated with an unsupported type, or has an unsupported default
    """
    hints = get_type_hints(callback)
    definitions = []

    for parameter in inspect.signature(callback).parameters.values():
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            raise CommandRegistrationError(
                name, f"variadic parameter '{parameter.name}' is not supported"
            )
        if parameter.kind is parameter.POSITIONAL_ONLY:
            raise CommandRegistrationError(
                name, f"positional-only parameter '{parameter.name}' is not supported"
            )
        if parameter.name not in hints:
            raise CommandRegistrationError(
                name, f"parameter '{parameter.name}' has no type annotation"
            )

        annotation, optional = _unwrap_optional(hints[parameter.name])
        argument_type = ANNOTATION_TYPES.get(annotation)
        if argument_type is None:
            raise CommandRegistrationError(
                name,
                f"parameter '{parameter.name}' has unsupported type {annotation!r}",
            )

        has_default = parameter.default is not inspect.Parameter.empty
        # Unfilled optional arguments arrive as None and missing switches as False
        allowed_default = False if argument_type is ArgumentType.FLAG else None
        if has_default and parameter.default is not allowed_default:
            raise CommandRegistrationError(
                name,
                f"parameter '{parameter.name}' must default to {allowed_default}, "
                f"got {parameter.default!r}",
            )

        definitions.append(
            ArgumentDefinition(
                name=parameter.name,
                type=argument_type,
                optional=optional or has_default,
            )
        )

    return tuple(definitions)
