"""
Binding of parsed commands to argument definitions.

Named values and flags bind by name first. Positional values then fill the
remaining arguments: every unfilled mandatory argument, followed by every
unfilled optional one, each group in definition order.
"""

import re
from collections import deque
from collections.abc import Sequence
from typing import Any, assert_never

from cmdlang.commands.definitions import ArgumentDefinition, ArgumentType
from cmdlang.core.types import Command, Flag, Indexed, NamedValue
from cmdlang.exceptions.core import (
    ArgumentConversionError,
    ArgumentCountError,
    DuplicateParameterError,
    UnknownParameterError,
)

TRUE_VALUES = frozenset({"true", "1"})
FALSE_VALUES = frozenset({"false", "0"})

# No surrounding whitespace or digit-group underscores, unlike int() and float()
INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def _parse_bool(definition: ArgumentDefinition, value: str) -> bool:
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ArgumentConversionError(definition.name, value, definition.type.value)


def convert_argument(definition: ArgumentDefinition, parameter: Flag | str) -> Any:
    """
    Convert a parameter to the type of its argument definition.

    Params:
        definition: The argument the parameter binds to
        parameter: A Flag, or the resolved value of a named or positional parameter

    Returns:
        The converted value

    Raises:
        ArgumentConversionError: If the value does not parse as the argument type
    """
    if isinstance(parameter, Flag):
        if definition.type in (ArgumentType.FLAG, ArgumentType.BOOL):
            return True
        raise ArgumentConversionError(
            definition.name, f"--{parameter.name}", definition.type.value
        )

    value = parameter
    match definition.type:
        case ArgumentType.STRING:
            return value
        case ArgumentType.INT:
            if not INT_PATTERN.fullmatch(value):
                raise ArgumentConversionError(definition.name, value, "int")
            return int(value)
        case ArgumentType.FLOAT:
            if not FLOAT_PATTERN.fullmatch(value):
                raise ArgumentConversionError(definition.name, value, "float")
            return float(value)
        case ArgumentType.BOOL | ArgumentType.FLAG:
            return _parse_bool(definition, value)
        case _:
            assert_never(definition.type)


def bind_arguments(
    command: Command, definitions: Sequence[ArgumentDefinition]
) -> dict[str, Any]:
    """
    Match a parsed command's parameters to argument definitions.

    Params:
        command: The parsed command
        definitions: Arguments the command accepts, in declaration order

    Returns:
        Mapping of every argument name to its converted value. Missing flags
        bind to False and unfilled optional arguments to None.

    Raises:
        DuplicateParameterError: If a name is supplied more than once
        UnknownParameterError: If a name matches no definition
        ArgumentCountError: If positional values do not fit the unfilled arguments
        ArgumentConversionError: If a value does not parse as its argument type
    """
    known = {definition.name for definition in definitions}
    named: dict[str, Flag | str] = {}
    indexed: deque[str] = deque()

    for parameter in command.parameters:
        match parameter:
            case Flag(name=name):
                key, value = name, parameter
            case NamedValue(name=name, value=value):
                key = name
            case Indexed(value=value):
                indexed.append(value)
                continue
            case _:
                assert_never(parameter)

        if key in named:
            raise DuplicateParameterError(command.name, key)
        if key not in known:
            raise UnknownParameterError(command.name, key)
        named[key] = value

    bound: dict[str, Any] = {}
    missed_mandatory: list[ArgumentDefinition] = []
    missed_optional: list[ArgumentDefinition] = []

    for definition in definitions:
        if definition.name in named:
            bound[definition.name] = convert_argument(definition, named[definition.name])
        elif definition.type is ArgumentType.FLAG:
            bound[definition.name] = False
        elif definition.optional:
            missed_optional.append(definition)
        else:
            missed_mandatory.append(definition)

    fillable = missed_mandatory + missed_optional
    if len(indexed) < len(missed_mandatory) or len(indexed) > len(fillable):
        raise ArgumentCountError(
            command.name, len(indexed), len(missed_mandatory), len(fillable)
        )

    for definition in fillable:
        if indexed:
            bound[definition.name] = convert_argument(definition, indexed.popleft())
        else:
            bound[definition.name] = None

    return {definition.name: bound[definition.name] for definition in definitions}
