"""
Tests for serializing commands back into command-line text.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cmdlang.core.grammar import BACKSLASH, EXPLICIT_BODY, QUOTE
from cmdlang.core.types import Command, Flag, Indexed, NamedValue
from cmdlang.exceptions import UnrepresentableValueError
from cmdlang.parsing.parser import parse
from cmdlang.parsing.serializer import format_command, format_parameter, format_value


class TestFormatValue:
    """Test choice between implicit and explicit value forms."""

    @pytest.mark.parametrize("value", ["release", "main.rs", "a-b", "42", "_"])
    def test_simple_values_stay_unquoted(self, value):
        assert format_value(value) == value

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("", '""'),
            ("hello world", '"hello world"'),
            ("a:b", '"a:b"'),
            ("-5", '"-5"'),
            ('say "hi"', r'"say \"hi\""'),
            ("C:\\dir", r'"C:\\dir"'),
        ],
    )
    def test_other_values_are_quoted(self, value, expected):
        assert format_value(value) == expected

    @pytest.mark.parametrize("value", ["a\tb", "line\n", "café"])
    def test_unrepresentable_values(self, value):
        """Test that characters no form can carry are rejected."""
        with pytest.raises(UnrepresentableValueError):
            format_value(value)


class TestFormatCommand:
    """Test rendering of whole commands."""

    def test_format_parameter_variants(self):
        assert format_parameter(Flag("verbose")) == "--verbose"
        assert format_parameter(NamedValue("target", "release")) == "target: release"
        assert format_parameter(Indexed("a b")) == '"a b"'

    def test_format_command(self):
        command = Command(
            "build",
            [Flag("verbose"), NamedValue("target", "release"), Indexed("main.rs")],
        )
        assert format_command(command) == "build --verbose target: release main.rs"

    def test_str_uses_serializer(self):
        command = Command("run", [Indexed("hello world")])
        assert str(command) == 'run "hello world"'


ROUND_TRIP_COMMANDS = [
    Command("quit"),
    Command("build", [Flag("verbose"), NamedValue("target", "release"), Indexed("main.rs")]),
    Command("echo", [Indexed(""), NamedValue("text", "")]),
    Command("say", [Indexed('she said "hi" \\ bye'), NamedValue("k", "a: b")]),
    Command("calc", [Indexed("-1"), Indexed("--x"), Indexed(":"), Indexed("x:")]),
    Command("open", [Indexed("http://host:80"), NamedValue("path", "/a b/c")]),
]


class TestRoundTrip:
    """Test that serialized commands parse back to equal commands."""

    @pytest.mark.parametrize("command", ROUND_TRIP_COMMANDS, ids=str)
    def test_round_trip(self, command):
        assert parse(format_command(command)) == command


identifiers = st.from_regex(r"\A[a-zA-Z_][a-zA-Z0-9_]*\Z")
values = st.text(alphabet=sorted(EXPLICIT_BODY | {QUOTE, BACKSLASH}), max_size=12)
parameters = st.one_of(
    st.builds(Flag, identifiers),
    st.builds(Indexed, values),
    st.builds(NamedValue, identifiers, values),
)
commands = st.builds(Command, identifiers, st.lists(parameters, max_size=6))


class TestRoundTripProperty:
    """Property-based round trip over generated commands."""

    @given(command=commands)
    @settings(max_examples=300, deadline=None)
    def test_any_command_round_trips(self, command):
        assert parse(format_command(command)) == command

    @given(value=values)
    @settings(max_examples=300, deadline=None)
    def test_any_value_round_trips_as_indexed(self, value):
        assert parse(f"cmd {format_value(value)}") == Command("cmd", [Indexed(value)])
