"""
Parser for console command lines.

This module turns a raw line such as ``build --verbose target: release main.rs``
into a ``Command``. Parameter tokens are classified in a fixed order, first
match wins:

1. ``--name``: Flag
2. ``name: value`` (whitespace allowed around the colon): NamedValue
3. anything else: Indexed, the whole token parsed as a value
"""

import re

from cmdlang.core.grammar import COLON, FLAG_PREFIX, IMPLICIT_BODY, is_identifier
from cmdlang.core.types import Command, Flag, Indexed, NamedValue, Parameter
from cmdlang.exceptions.core import ErrorContext, InvalidIdentifierError
from cmdlang.parsing.tokenizer import Token, find_unquoted, tokenize
from cmdlang.parsing.values import parse_value


class CommandParser:
    """Parser for console command lines."""

    NAMED_VALUE_PATTERN = re.compile(
        r"(?P<name>[a-zA-Z_][a-zA-Z0-9_]*)[ \t]*:[ \t]*(?P<value>.*)", re.DOTALL
    )

    def parse(self, line: str) -> Command:
        """
        Parse a command line into a Command.

        Params:
            line: The command line to parse

        Returns:
            The parsed command with parameters in input order

        Raises:
            CommandParseError: On the first failure found scanning left to right
        """
        name_token, parameter_tokens = tokenize(line)

        if not is_identifier(name_token.text):
            raise InvalidIdentifierError(
                name_token.text,
                "command name must match [A-Za-z_][A-Za-z0-9_]*",
                ErrorContext(command_text=line, position=name_token.position),
            )

        parameters = [self.parse_parameter(token, line) for token in parameter_tokens]
        return Command(name=name_token.text, parameters=parameters)

    def parse_parameter(self, token: Token, line: str) -> Parameter:
        """
        Classify a parameter token and parse it.

        Params:
            token: The raw parameter token
            line: Full command line, used for error context

        Returns:
            Flag, NamedValue or Indexed parameter

        Raises:
            CommandParseError: If the token is not a valid parameter
        """
        text = token.text

        if text.startswith(FLAG_PREFIX):
            return self._parse_flag(token, line)

        named = self.NAMED_VALUE_PATTERN.fullmatch(text)
        if named:
            value = parse_value(
                named.group("value"), line, token.position + named.start("value")
            )
            return NamedValue(name=named.group("name"), value=value)

        self._check_name_prefix(token, line)
        return Indexed(value=parse_value(text, line, token.position))

    def _parse_flag(self, token: Token, line: str) -> Flag:
        name = token.text[len(FLAG_PREFIX) :]
        if not is_identifier(name):
            raise InvalidIdentifierError(
                name,
                "flag name must match [A-Za-z_][A-Za-z0-9_]*",
                ErrorContext(
                    command_text=line, position=token.position + len(FLAG_PREFIX)
                ),
            )
        return Flag(name=name)

    def _check_name_prefix(self, token: Token, line: str) -> None:
        """
        Reject ``prefix: value`` tokens whose prefix looks like a name but is not
        an identifier, such as ``1st: value`` or ``my-name: value``.
        """
        text = token.text
        colon = find_unquoted(text, frozenset(COLON))
        if colon == 0 or colon == len(text):
            return

        prefix = text[:colon]
        if all(char in IMPLICIT_BODY for char in prefix):
            raise InvalidIdentifierError(
                prefix,
                "parameter name must match [A-Za-z_][A-Za-z0-9_]*",
                ErrorContext(command_text=line, position=token.position),
            )


def parse_command(line: str) -> Command:
    """
    Convenience function to parse a command line.

    Params:
        line: The command line to parse

    Returns:
        The parsed Command

    Raises:
        CommandParseError: If the line is not a valid command
    """
    parser = CommandParser()
    return parser.parse(line)


parse = parse_command
