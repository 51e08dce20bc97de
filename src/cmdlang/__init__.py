"""
cmdlang - Parser and console runtime for a small command-string language

A command line is a command name followed by flags (``--verbose``), named
values (``target: release``) and positional values (``main.rs``).
"""

from importlib.metadata import version

from cmdlang.commands import ArgumentDefinition, ArgumentType, CommandRegistry, Switch
from cmdlang.console import CommandConsole, ConsoleConfig
from cmdlang.core.types import Command, Flag, Indexed, NamedValue, Parameter
from cmdlang.parsing import CommandParser, format_command, parse

__version__ = version("cmdlang")

__all__ = [
    "__version__",
    "parse",
    "format_command",
    "CommandParser",
    "Command",
    "Flag",
    "Indexed",
    "NamedValue",
    "Parameter",
    "ArgumentDefinition",
    "ArgumentType",
    "CommandRegistry",
    "Switch",
    "CommandConsole",
    "ConsoleConfig",
]
