"""
Command line parsing components.

This package provides tokenizing, value parsing, parameter classification and
serialization for the console command language.
"""

from cmdlang.parsing.parser import CommandParser, parse, parse_command
from cmdlang.parsing.serializer import format_command, format_parameter, format_value
from cmdlang.parsing.tokenizer import Token, tokenize
from cmdlang.parsing.values import parse_value

__all__ = [
    "CommandParser",
    "parse",
    "parse_command",
    "parse_value",
    "tokenize",
    "Token",
    "format_command",
    "format_parameter",
    "format_value",
]
