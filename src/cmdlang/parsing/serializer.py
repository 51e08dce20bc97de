"""
Serialization of parsed commands back into command-line text.

Output always parses back to an equal Command.
"""

from typing import assert_never

from cmdlang.core.grammar import (
    BACKSLASH,
    EXPLICIT_BODY,
    FLAG_PREFIX,
    IMPLICIT_BODY,
    IMPLICIT_START,
    QUOTE,
)
from cmdlang.core.types import Command, Flag, Indexed, NamedValue, Parameter
from cmdlang.exceptions.core import UnrepresentableValueError


def format_value(value: str) -> str:
    """
    Render a value, unquoted when possible and quoted otherwise.

    Params:
        value: The resolved value

    Returns:
        Text that parses back to value

    Raises:
        UnrepresentableValueError: If value holds a character no form can carry
    """
    for char in value:
        if char not in EXPLICIT_BODY and char not in (QUOTE, BACKSLASH):
            raise UnrepresentableValueError(value, char)

    if value and value[0] in IMPLICIT_START and all(c in IMPLICIT_BODY for c in value[1:]):
        return value

    escaped = "".join(BACKSLASH + c if c in (QUOTE, BACKSLASH) else c for c in value)
    return f"{QUOTE}{escaped}{QUOTE}"


def format_parameter(parameter: Parameter) -> str:
    """Render a single parameter."""
    match parameter:
        case Flag(name=name):
            return f"{FLAG_PREFIX}{name}"
        case NamedValue(name=name, value=value):
            return f"{name}: {format_value(value)}"
        case Indexed(value=value):
            return format_value(value)
        case _:
            assert_never(parameter)


def format_command(command: Command) -> str:
    """
    Render a command as a single line.

    Params:
        command: The command to render

    Returns:
        Command-line text, parameters separated by single spaces
    """
    parts = [command.name]
    parts.extend(format_parameter(parameter) for parameter in command.parameters)
    return " ".join(parts)
