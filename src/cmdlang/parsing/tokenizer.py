"""
Whitespace tokenizer for console command lines.

Splits a line into the command name token and its parameter tokens. Spaces and
tabs separate tokens except inside a quoted value, after a backslash, or
around the colon of a ``name: value`` pair.
"""

import re
from dataclasses import dataclass
from enum import Enum

from cmdlang.core.grammar import BACKSLASH, QUOTE, WHITESPACE
from cmdlang.exceptions.core import EmptyCommandError, ErrorContext

# Identifier at token start followed by a colon, whitespace allowed around it
NAMED_PREFIX_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*[ \t]*:[ \t]*")


class ScanState(Enum):
    """Lexical state of the token scanner."""

    BARE = "bare"
    QUOTED = "quoted"
    ESCAPE = "escape"


@dataclass(frozen=True)
class Token:
    """A raw token and the column where it starts in the command line."""

    text: str
    position: int


def find_unquoted(text: str, targets: frozenset[str], start: int = 0) -> int:
    """
    Find the first character from targets that is neither quoted nor escaped.

    Params:
        text: Text to scan
        targets: Characters to look for
        start: Index to start scanning from

    Returns:
        Index of the first match, or len(text) when there is none
    """
    state = ScanState.BARE
    resume = ScanState.BARE
    pos = start

    while pos < len(text):
        char = text[pos]
        if state is ScanState.ESCAPE:
            state = resume
        elif char == BACKSLASH:
            resume = state
            state = ScanState.ESCAPE
        elif state is ScanState.QUOTED:
            if char == QUOTE:
                state = ScanState.BARE
        elif char == QUOTE:
            state = ScanState.QUOTED
        elif char in targets:
            return pos
        pos += 1

    return pos


def _skip_whitespace(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] in WHITESPACE:
        pos += 1
    return pos


def tokenize(line: str) -> tuple[Token, list[Token]]:
    """
    Split a command line into its name token and parameter tokens.

    Params:
        line: The raw command line

    Returns:
        The name token and the parameter tokens in input order

    Raises:
        EmptyCommandError: If the line holds nothing but whitespace
    """
    pos = _skip_whitespace(line, 0)
    if pos == len(line):
        raise EmptyCommandError(ErrorContext(command_text=line, position=pos))

    end = find_unquoted(line, WHITESPACE, pos)
    name = Token(line[pos:end], pos)

    parameters = []
    pos = _skip_whitespace(line, end)
    while pos < len(line):
        value_start = pos
        named = NAMED_PREFIX_PATTERN.match(line, pos)
        if named:
            value_start = named.end()

        end = find_unquoted(line, WHITESPACE, value_start)
        parameters.append(Token(line[pos:end], pos))
        pos = _skip_whitespace(line, end)

    return name, parameters
