"""
Shared test fixtures and utilities for the cmdlang test suite.
"""

import pytest

from cmdlang.commands import ArgumentDefinition, ArgumentType, CommandRegistry, Switch
from cmdlang.console import CommandConsole
from cmdlang.parsing import CommandParser


@pytest.fixture
def parser():
    return CommandParser()


@pytest.fixture
def calls():
    """List collecting (command, kwargs) for every callback invocation."""
    return []


@pytest.fixture
def registry(calls):
    """Registry with a few representative commands.

    Usage:
        def test_something(registry, calls):
            ...
    """
    registry = CommandRegistry()

    @registry.command("spawns entities.")
    def spawn(kind: str, count: int | None = None, verbose: Switch = False):
        calls.append(("spawn", {"kind": kind, "count": count, "verbose": verbose}))
        return count

    @registry.command("sets the time scale.")
    def set_speed(scale: float):
        calls.append(("set_speed", {"scale": scale}))

    registry.register(
        "quit",
        lambda: calls.append(("quit", {})),
        description="exits the application.",
    )
    registry.register(
        "teleport",
        lambda x, y, relative: calls.append(
            ("teleport", {"x": x, "y": y, "relative": relative})
        ),
        [
            ArgumentDefinition(name="x", type=ArgumentType.INT),
            ArgumentDefinition(name="y", type=ArgumentType.INT),
            ArgumentDefinition(name="relative", type=ArgumentType.BOOL, optional=True),
        ],
    )
    return registry


@pytest.fixture
def console(registry):
    return CommandConsole(registry)
