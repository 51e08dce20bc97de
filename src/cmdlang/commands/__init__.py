"""
Console command definitions, registry and argument binding.

This package maps parsed commands onto registered callbacks with typed
arguments.
"""

from cmdlang.commands.binding import bind_arguments, convert_argument
from cmdlang.commands.definitions import (
    ArgumentDefinition,
    ArgumentType,
    ConsoleCommand,
    Switch,
    arguments_from_signature,
)
from cmdlang.commands.registry import CommandRegistry

__all__ = [
    "ArgumentDefinition",
    "ArgumentType",
    "ConsoleCommand",
    "CommandRegistry",
    "Switch",
    "arguments_from_signature",
    "bind_arguments",
    "convert_argument",
]
