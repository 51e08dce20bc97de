"""
Value parsing for console command parameters.

A value is either implicit (unquoted, restricted character set) or explicit
(double-quoted, spaces and colons allowed). Both forms resolve backslash
escapes to the escaped character. Scanning is a small state machine:

    START -> IMPLICIT | QUOTED -> END

with an ESCAPE sub-state entered on a backslash and left after exactly one
character. Running out of input in ESCAPE or QUOTED is an error.
"""

from enum import Enum

from cmdlang.core.grammar import (
    BACKSLASH,
    COLON,
    DASH,
    ESCAPE_TARGETS,
    EXPLICIT_BODY,
    IMPLICIT_BODY,
    IMPLICIT_START,
    QUOTE,
)
from cmdlang.exceptions.core import (
    EmptyValueError,
    ErrorContext,
    InvalidEscapeError,
    MalformedParameterError,
    UnterminatedStringError,
)


class ValueState(Enum):
    """States of the value scanner."""

    START = "start"
    IMPLICIT = "implicit"
    QUOTED = "quoted"
    ESCAPE = "escape"
    END = "end"


def _implicit_char_problem(char: str, first: bool) -> str:
    if char == COLON:
        return "a bare ':' must be escaped or quoted"
    if char == QUOTE:
        return "'\"' may only open a quoted value"
    if first and char == DASH:
        return "an unquoted value cannot start with '-'"
    return f"character {char!r} is not allowed in an unquoted value"


def parse_value(text: str, line: str | None = None, offset: int = 0) -> str:
    """
    Parse an implicit or explicit value and resolve its escapes.

    Params:
        text: The raw value text
        line: Full command line, used for error context
        offset: Column of text within line

    Returns:
        The escape-resolved value

    Raises:
        EmptyValueError: If text is empty
        InvalidEscapeError: If a backslash is not followed by an escapable character
        UnterminatedStringError: If a quoted value has no closing quote
        MalformedParameterError: If a character is not allowed where it appears
    """

    def context(index: int) -> ErrorContext:
        return ErrorContext(command_text=line, position=offset + index)

    if not text:
        raise EmptyValueError(text, context(0))

    state = ValueState.START
    resume = ValueState.IMPLICIT
    resolved: list[str] = []

    for index, char in enumerate(text):
        if state is ValueState.END:
            raise MalformedParameterError(
                text, "unexpected characters after closing quote", context(index)
            )

        if state is ValueState.ESCAPE:
            if char not in ESCAPE_TARGETS:
                raise InvalidEscapeError(char, context(index))
            resolved.append(char)
            state = resume
            continue

        if char == BACKSLASH:
            resume = ValueState.IMPLICIT if state is ValueState.START else state
            state = ValueState.ESCAPE
            continue

        if state is ValueState.START:
            if char == QUOTE:
                state = ValueState.QUOTED
                continue
            if char not in IMPLICIT_START:
                raise MalformedParameterError(
                    text, _implicit_char_problem(char, first=True), context(index)
                )
            resolved.append(char)
            state = ValueState.IMPLICIT
        elif state is ValueState.IMPLICIT:
            if char not in IMPLICIT_BODY:
                raise MalformedParameterError(
                    text, _implicit_char_problem(char, first=False), context(index)
                )
            resolved.append(char)
        elif state is ValueState.QUOTED:
            if char == QUOTE:
                state = ValueState.END
            elif char in EXPLICIT_BODY:
                resolved.append(char)
            else:
                raise MalformedParameterError(
                    text,
                    f"character {char!r} is not allowed in a quoted value",
                    context(index),
                )

    if state is ValueState.ESCAPE:
        raise InvalidEscapeError(None, context(len(text)))
    if state is ValueState.QUOTED:
        raise UnterminatedStringError(context(len(text)))

    return "".join(resolved)
