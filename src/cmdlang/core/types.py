"""
Core data model for parsed console commands.

A command line parses into a ``Command``: a name plus an ordered tuple of
parameters. ``Parameter`` is a closed union of ``Flag``, ``Indexed`` and
``NamedValue``; consumers dispatch on it with ``match`` and finish with
``assert_never`` so an unhandled variant fails type checking.
"""

from typing import TypeAlias

from attrs import field, frozen

from cmdlang.core.grammar import is_identifier
from cmdlang.exceptions.core import InvalidIdentifierError


def _validate_identifier(instance, attribute, value: str) -> None:
    if not is_identifier(value):
        raise InvalidIdentifierError(
            value, f"{type(instance).__name__}.{attribute.name} must match [A-Za-z_][A-Za-z0-9_]*"
        )


@frozen
class Flag:
    """Boolean switch written as ``--name``."""

    name: str = field(validator=_validate_identifier)


@frozen
class Indexed:
    """Positional value with no name."""

    value: str


@frozen
class NamedValue:
    """Value bound to a name, written as ``name: value``."""

    name: str = field(validator=_validate_identifier)
    value: str


Parameter: TypeAlias = Flag | Indexed | NamedValue


@frozen
class Command:
    """A parsed command line.

    Params:
        name: Command name, always a valid identifier
        parameters: Parameters in the order they appeared on the line
    """

    name: str = field(validator=_validate_identifier)
    parameters: tuple[Parameter, ...] = field(default=(), converter=tuple)

    def flags(self) -> list[str]:
        """Names of all flags, in order."""
        return [p.name for p in self.parameters if isinstance(p, Flag)]

    def indexed_values(self) -> list[str]:
        """Values of all positional parameters, in order."""
        return [p.value for p in self.parameters if isinstance(p, Indexed)]

    def named_values(self) -> dict[str, str]:
        """Named values keyed by name; a repeated name keeps its last value."""
        return {p.name: p.value for p in self.parameters if isinstance(p, NamedValue)}

    def __str__(self) -> str:
        from cmdlang.parsing.serializer import format_command

        return format_command(self)
