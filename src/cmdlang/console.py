"""
Interactive console runtime for registered commands.

``CommandConsole`` takes one line at a time: it parses the line, looks up the
command, binds the arguments and invokes the callback. ``submit`` is the entry
point for interactive input and logs failures instead of raising them.
"""

import logging
from typing import Any

from pydantic import BaseModel, Field

from cmdlang.commands.binding import bind_arguments
from cmdlang.commands.definitions import ArgumentDefinition, ArgumentType
from cmdlang.commands.registry import CommandRegistry
from cmdlang.exceptions.core import (
    CommandBindingError,
    CommandExecutionError,
    CommandLanguageError,
    CommandParseError,
)
from cmdlang.parsing.parser import CommandParser

logger = logging.getLogger(__name__)

TRACE_COMMAND = "console_trace"


def toggle_trace(value: bool) -> None:
    """Registry entry for the built-in trace command.

    Every console intercepts this callback and toggles its own config, so the
    entry is shared by all consoles on a registry.
    """
    raise CommandExecutionError(f"{TRACE_COMMAND} only runs through a CommandConsole")


class ConsoleConfig(BaseModel):
    """Configuration for console behaviour."""

    trace_commands: bool = False  # Log parse and bind steps at DEBUG
    max_completions: int | None = Field(default=None, ge=1)
    strip_input: bool = True  # Strip surrounding whitespace, newlines included

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "ConsoleConfig":
        """Factory method to create config from dict with defaults."""
        return cls.model_validate(config or {})


class CommandConsole:
    """Console dispatching command lines to a CommandRegistry."""

    def __init__(
        self, registry: CommandRegistry, config: ConsoleConfig | None = None
    ):
        self.registry = registry
        self.config = config or ConsoleConfig()
        self._parser = CommandParser()

        if TRACE_COMMAND not in registry:
            registry.register(
                TRACE_COMMAND,
                toggle_trace,
                [ArgumentDefinition(name="value", type=ArgumentType.BOOL)],
                "displays debug information about the parsing run for a console command.",
            )

    def _set_trace(self, value: bool) -> None:
        self.config.trace_commands = value

    def execute(self, line: str) -> Any:
        """
        Parse and run a command line.

        Params:
            line: The command line

        Returns:
            Whatever the command callback returns

        Raises:
            CommandParseError: If the line does not parse
            CommandBindingError: If the command is unknown or its arguments don't bind
            CommandExecutionError: If the callback reports a failure
        """
        if self.config.strip_input:
            line = line.strip()

        trace = self.config.trace_commands
        if trace:
            logger.debug("trying to parse command: %s", line)

        command = self._parser.parse(line)
        if trace:
            logger.debug("Parsed Command: %r", command)

        console_command = self.registry.get(command.name)
        arguments = bind_arguments(command, console_command.arguments)
        if trace:
            logger.debug("completed arguments => %r", arguments)

        if console_command.callback is toggle_trace:
            return self._set_trace(**arguments)
        return console_command.callback(**arguments)

    def submit(self, line: str) -> bool:
        """
        Run a command line, logging any command language error.

        Params:
            line: The command line

        Returns:
            True if the command ran, False if it failed
        """
        try:
            self.execute(line)
        except CommandParseError as e:
            logger.error("invalid console command: %s\n%s", line, e)
            return False
        except CommandBindingError as e:
            logger.error("%s", e)
            return False
        except CommandExecutionError as e:
            logger.error("command error: %s", e)
            return False
        except CommandLanguageError as e:
            logger.error("console command failed: %s", e)
            return False
        return True

    def complete(self, prefix: str) -> list[str]:
        """Command names completing prefix, capped by max_completions."""
        return self.registry.complete(prefix, self.config.max_completions)
