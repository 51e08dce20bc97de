"""
Core command language components.

This package provides the parsed command data model and the lexical
definitions shared by the parser and serializer.
"""

from cmdlang.core.grammar import IDENTIFIER_PATTERN, is_identifier
from cmdlang.core.types import Command, Flag, Indexed, NamedValue, Parameter

__all__ = [
    "Command",
    "Flag",
    "Indexed",
    "NamedValue",
    "Parameter",
    "IDENTIFIER_PATTERN",
    "is_identifier",
]
