"""
Command language exception classes.

This package provides all exception types used throughout the command
language for consistent error handling and reporting.
"""

from cmdlang.exceptions.core import (
    ArgumentConversionError,
    ArgumentCountError,
    CommandBindingError,
    CommandExecutionError,
    CommandLanguageError,
    CommandParseError,
    CommandRegistrationError,
    DuplicateParameterError,
    EmptyCommandError,
    EmptyValueError,
    ErrorContext,
    InvalidEscapeError,
    InvalidIdentifierError,
    MalformedParameterError,
    UnknownCommandError,
    UnknownParameterError,
    UnrepresentableValueError,
    UnterminatedStringError,
)

__all__ = [
    "CommandLanguageError",
    "ErrorContext",
    "CommandParseError",
    "EmptyCommandError",
    "InvalidIdentifierError",
    "UnterminatedStringError",
    "InvalidEscapeError",
    "MalformedParameterError",
    "EmptyValueError",
    "UnrepresentableValueError",
    "CommandRegistrationError",
    "CommandBindingError",
    "UnknownCommandError",
    "DuplicateParameterError",
    "UnknownParameterError",
    "ArgumentCountError",
    "ArgumentConversionError",
    "CommandExecutionError",
]
