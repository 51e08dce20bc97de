"""
Registry of console commands.

Commands are registered explicitly with their argument definitions, or with
the ``command`` decorator, which derives them from the callback signature.
"""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from cmdlang.commands.definitions import (
    ArgumentDefinition,
    ConsoleCommand,
    arguments_from_signature,
)
from cmdlang.core.grammar import is_identifier
from cmdlang.exceptions.core import CommandRegistrationError, UnknownCommandError

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Registry mapping command names to console commands.

    Responsibilities:
      - Validate and store commands under their identifier names.
      - Look commands up for dispatch.
      - Offer prefix completion of command names for interactive consoles.
    """

    def __init__(self):
        self._commands: dict[str, ConsoleCommand] = {}

    def register(
        self,
        name: str,
        callback: Callable[..., Any],
        arguments: Iterable[ArgumentDefinition] = (),
        description: str = "",
    ) -> ConsoleCommand:
        """
        Register a command, replacing any command of the same name.

        Params:
            name: Command name, must be a valid identifier
            callback: Called with one keyword argument per definition
            arguments: Argument definitions in positional order
            description: Human readable summary

        Returns:
            The registered ConsoleCommand

        Raises:
            CommandRegistrationError: If the name or argument names are invalid
        """
        if not is_identifier(name):
            raise CommandRegistrationError(name, "name is not a valid identifier")

        arguments = tuple(arguments)
        seen: set[str] = set()
        for argument in arguments:
            if argument.name in seen:
                raise CommandRegistrationError(
                    name, f"argument '{argument.name}' is defined twice"
                )
            seen.add(argument.name)

        if name in self._commands:
            logger.warning("console command '%s' was overwritten.", name)

        command = ConsoleCommand(
            name=name, callback=callback, arguments=arguments, description=description
        )
        self._commands[name] = command
        return command

    def command(
        self, description: str = "", name: str | None = None
    ) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """
        Decorator registering a function as a command.

        Arguments are derived from the function's annotated parameters.

        Params:
            description: Human readable summary
            name: Command name, defaults to the function name

        Returns:
            Decorator that registers the function and returns it unchanged
        """

        def decorator(callback: Callable[..., Any]) -> Callable[..., Any]:
            command_name = name or callback.__name__
            self.register(
                command_name,
                callback,
                arguments_from_signature(command_name, callback),
                description,
            )
            return callback

        return decorator

    def get(self, name: str) -> ConsoleCommand:
        """
        Look up a command by name.

        Raises:
            UnknownCommandError: If no command has that name
        """
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommandError(name) from None

    def names(self) -> list[str]:
        """All registered command names, sorted."""
        return sorted(self._commands)

    def complete(self, prefix: str, limit: int | None = None) -> list[str]:
        """
        Command names starting with prefix, sorted.

        Params:
            prefix: Text typed so far
            limit: Maximum number of names to return

        Returns:
            Matching command names
        """
        matches = [name for name in self.names() if name.startswith(prefix)]
        return matches if limit is None else matches[:limit]

    def describe(self, name: str) -> str:
        """Usage line followed by the description, if any."""
        command = self.get(name)
        usage = command.usage()
        return f"{usage} - {command.description}" if command.description else usage

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[ConsoleCommand]:
        return iter(self._commands[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._commands)
