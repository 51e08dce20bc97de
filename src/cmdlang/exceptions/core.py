"""
Exception classes for the console command language.

This module defines specific exception types for the error conditions that can
occur while parsing a command line, binding its parameters to a registered
command, and executing that command.
"""

from dataclasses import dataclass


@dataclass
class ErrorContext:
    """
    Location information for parse error messages.

    Params:
        command_text: The full command line that was being parsed
        position: 0-based column where the failure was detected
    """

    command_text: str | None = None
    position: int | None = None

    def format_location(self) -> str:
        """
        Format location information as an indented block.

        Returns:
            Location lines, with a caret under the failing column when both
            the command text and position are known
        """
        lines = []

        if self.position is not None:
            lines.append(f"  at column {self.position}")

        if self.command_text is not None:
            lines.append(f"  command: {self.command_text}")
            if self.position is not None:
                lines.append("           " + " " * self.position + "^")

        return "\n".join(lines)


class CommandLanguageError(Exception):
    """Base exception for all command language errors."""

    pass


class CommandParseError(CommandLanguageError):
    """Raised when a command line cannot be parsed."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            message: Description of the parse failure
            context: ErrorContext with the command text and failing column
        """
        self.reason = message
        self.context = context

        location_info = context.format_location() if context else ""
        full_message = f"{message}\n{location_info}" if location_info else message
        super().__init__(full_message)

    @property
    def position(self) -> int | None:
        """Column of the failure, if known."""
        return self.context.position if self.context else None


class EmptyCommandError(CommandParseError):
    """Raised when the command line holds no command name."""

    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Empty command", context)


class InvalidIdentifierError(CommandParseError):
    """Raised when a command or parameter name is not a valid identifier."""

    def __init__(
        self, identifier: str, reason: str, context: ErrorContext | None = None
    ):
        """
        Initialize the exception.

        Params:
            identifier: The rejected name
            reason: Why the name is invalid
            context: ErrorContext with the command text and failing column
        """
        self.identifier = identifier
        super().__init__(f"Invalid identifier '{identifier}': {reason}", context)


class UnterminatedStringError(CommandParseError):
    """Raised when a quoted value has no closing quote."""

    def __init__(self, context: ErrorContext | None = None):
        super().__init__("Unterminated string: missing closing '\"'", context)


class InvalidEscapeError(CommandParseError):
    """Raised when a backslash is not followed by an escapable character."""

    def __init__(self, escaped: str | None, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            escaped: The character following the backslash, None at end of input
            context: ErrorContext with the command text and failing column
        """
        self.escaped = escaped
        if escaped is None:
            message = "Invalid escape: backslash at end of input"
        else:
            message = f"Invalid escape sequence: \\{escaped!r}"
        super().__init__(message, context)


class MalformedParameterError(CommandParseError):
    """Raised when a parameter token matches none of the parameter forms."""

    def __init__(
        self, token: str, reason: str, context: ErrorContext | None = None
    ):
        """
        Initialize the exception.

        Params:
            token: The offending parameter token
            reason: What is wrong with it
            context: ErrorContext with the command text and failing column
        """
        self.token = token
        super().__init__(f"Malformed parameter '{token}': {reason}", context)


class EmptyValueError(MalformedParameterError):
    """Raised when a value is required but no characters were supplied."""

    def __init__(self, token: str, context: ErrorContext | None = None):
        super().__init__(token, "value must not be empty", context)


class UnrepresentableValueError(CommandLanguageError):
    """Raised when a value cannot be written in either value form."""

    def __init__(self, value: str, character: str):
        """
        Initialize the exception.

        Params:
            value: The value being serialized
            character: The first character no value form can carry
        """
        self.value = value
        self.character = character
        super().__init__(
            f"Value {value!r} cannot be serialized: character {character!r} is not allowed"
        )


class CommandRegistrationError(CommandLanguageError):
    """Raised when a command cannot be registered."""

    def __init__(self, command_name: str, reason: str):
        """
        Initialize the exception.

        Params:
            command_name: Name of the command being registered
            reason: Why registration failed
        """
        self.command_name = command_name
        self.reason = reason
        super().__init__(f"Cannot register command '{command_name}': {reason}")


class CommandBindingError(CommandLanguageError):
    """Base exception for errors matching a parsed command to its definition."""

    pass


class UnknownCommandError(CommandBindingError):
    """Raised when no command is registered under the parsed name."""

    def __init__(self, command_name: str):
        self.command_name = command_name
        super().__init__(f"command not found: {command_name}")


class DuplicateParameterError(CommandBindingError):
    """Raised when the same named parameter is supplied more than once."""

    def __init__(self, command_name: str, parameter_name: str):
        self.command_name = command_name
        self.parameter_name = parameter_name
        super().__init__(
            f"duplicate command parameter '{parameter_name}' for '{command_name}'"
        )


class UnknownParameterError(CommandBindingError):
    """Raised when a named parameter has no matching argument definition."""

    def __init__(self, command_name: str, parameter_name: str):
        self.command_name = command_name
        self.parameter_name = parameter_name
        super().__init__(
            f"unknown parameter '{parameter_name}' for command '{command_name}'"
        )


class ArgumentCountError(CommandBindingError):
    """Raised when positional values do not fit the unfilled arguments."""

    def __init__(self, command_name: str, supplied: int, required: int, accepted: int):
        """
        Initialize the exception.

        Params:
            command_name: Name of the command being bound
            supplied: Number of positional values supplied
            required: Number of mandatory arguments still unfilled
            accepted: Number of arguments positional values may fill
        """
        self.command_name = command_name
        self.supplied = supplied
        self.required = required
        self.accepted = accepted
        problem = "too few arguments" if supplied < required else "too many arguments"
        super().__init__(
            f"{problem} for '{command_name}': got {supplied} positional, "
            f"expected {required}..{accepted}"
        )


class ArgumentConversionError(CommandBindingError):
    """Raised when a parameter value cannot be converted to its argument type."""

    def __init__(self, argument_name: str, value: str, type_name: str):
        self.argument_name = argument_name
        self.value = value
        self.type_name = type_name
        super().__init__(
            f"couldn't parse argument '{argument_name}' as a valid {type_name}: {value!r}"
        )


class CommandExecutionError(CommandLanguageError):
    """Raised by command callbacks to report a failure to the console."""

    pass
