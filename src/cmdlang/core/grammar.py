"""
Lexical definitions of the console command language.

Character classes shared by the tokenizer, the value parser and the serializer.
"""

import re
import string

IDENTIFIER_PATTERN = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

WHITESPACE = frozenset(" \t")
QUOTE = '"'
BACKSLASH = "\\"
COLON = ":"
DASH = "-"
FLAG_PREFIX = "--"

LETTERS = frozenset(string.ascii_letters)
DIGITS = frozenset(string.digits)
SYMBOLS = frozenset(string.punctuation)

# Any letter, digit, symbol or space may follow a backslash
ESCAPE_TARGETS = LETTERS | DIGITS | SYMBOLS | {" "}

IMPLICIT_START = (LETTERS | DIGITS | SYMBOLS) - {QUOTE, COLON, DASH, BACKSLASH}
IMPLICIT_BODY = IMPLICIT_START | {DASH}

# Backslash is absent because it always opens an escape sequence
EXPLICIT_BODY = (LETTERS | DIGITS | SYMBOLS | {" "}) - {QUOTE, BACKSLASH}


def is_identifier(text: str) -> bool:
    """Check whether text is a valid command or parameter name."""
    return IDENTIFIER_PATTERN.fullmatch(text) is not None
