"""
Tests for the parsed command data model.
"""

import attrs
import pytest

from cmdlang.core.grammar import is_identifier
from cmdlang.core.types import Command, Flag, Indexed, NamedValue
from cmdlang.exceptions import InvalidIdentifierError


class TestIdentifier:
    """Tests for identifier rules."""

    @pytest.mark.parametrize("text", ["a", "_", "abc_123", "CamelCase", "__x"])
    def test_valid(self, text):
        assert is_identifier(text)

    @pytest.mark.parametrize("text", ["", "1a", "a-b", "a b", "a:", "é", "abc\n"])
    def test_invalid(self, text):
        assert not is_identifier(text)


class TestConstruction:
    """Tests for validation when building values directly."""

    def test_command_requires_identifier_name(self):
        with pytest.raises(InvalidIdentifierError):
            Command("")

        with pytest.raises(InvalidIdentifierError):
            Command("not-valid")

    def test_flag_requires_identifier_name(self):
        with pytest.raises(InvalidIdentifierError):
            Flag("9")

    def test_named_value_requires_identifier_name(self):
        with pytest.raises(InvalidIdentifierError):
            NamedValue("a b", "x")

    def test_indexed_accepts_any_value(self):
        assert Indexed("").value == ""

    def test_parameters_converted_to_tuple(self):
        command = Command("cmd", [Indexed("a")])
        assert command.parameters == (Indexed("a"),)

    def test_default_parameters_empty(self):
        assert Command("cmd").parameters == ()


class TestImmutability:
    """Tests that parsed values cannot be modified."""

    def test_command_is_frozen(self):
        command = Command("cmd")
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            command.name = "other"

    def test_parameter_is_frozen(self):
        flag = Flag("x")
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            flag.name = "y"

    def test_equal_values_hash_equal(self):
        assert hash(NamedValue("a", "b")) == hash(NamedValue("a", "b"))


class TestAccessors:
    """Tests for Command read helpers."""

    @pytest.fixture
    def command(self):
        return Command(
            "cmd",
            [
                Flag("v"),
                Indexed("one"),
                NamedValue("k", "first"),
                Indexed("two"),
                NamedValue("k", "second"),
                Flag("w"),
            ],
        )

    def test_flags(self, command):
        assert command.flags() == ["v", "w"]

    def test_indexed_values(self, command):
        assert command.indexed_values() == ["one", "two"]

    def test_named_values_last_wins(self, command):
        assert command.named_values() == {"k": "second"}

    def test_variants_are_distinct(self):
        assert Flag("x") != NamedValue("x", "x")
        assert Indexed("x") != NamedValue("x", "x")
