"""
Tests for splitting free-form argument text into a pair.
"""
import pytest

from featurebot.commands.argument_parser import ArgumentPair, parse_argument_pair
from featurebot.errors import (
    ArgumentError, EmptyFirstArgument, EmptySecondArgument, MalformedArguments
)


class TestParseArgumentPair:

    def test_splits_on_first_space(self):
        assert parse_argument_pair("bob mods") == ArgumentPair("bob", "mods")

    def test_remainder_is_verbatim(self):
        pair = parse_argument_pair("bob Senior Mods ")
        assert pair.first == "bob"
        assert pair.second == "Senior Mods "

    def test_no_space_is_malformed(self):
        with pytest.raises(MalformedArguments):
            parse_argument_pair("bobmods")

    def test_empty_text_is_malformed(self):
        with pytest.raises(MalformedArguments):
            parse_argument_pair("")

    def test_leading_space_is_empty_first(self):
        with pytest.raises(EmptyFirstArgument):
            parse_argument_pair(" bob mods")

    def test_trailing_space_is_empty_second(self):
        with pytest.raises(EmptySecondArgument):
            parse_argument_pair("bob ")

    def test_single_space_reports_first_argument(self):
        with pytest.raises(EmptyFirstArgument):
            parse_argument_pair(" ")

    def test_failures_share_a_base_class(self):
        with pytest.raises(ArgumentError):
            parse_argument_pair("bobmods")

    def test_messages_use_labels(self):
        with pytest.raises(MalformedArguments) as exc_info:
            parse_argument_pair("bobmods", "Username", "Role name")
        assert str(exc_info.value) == (
            "Invalid number of parameters. Expected parameters: {username} {role name}."
        )

        with pytest.raises(EmptyFirstArgument) as exc_info:
            parse_argument_pair(" mods", "Username", "Role name")
        assert str(exc_info.value) == "Username cannot be empty."

        with pytest.raises(EmptySecondArgument) as exc_info:
            parse_argument_pair("bob ", "Username", "Role name")
        assert str(exc_info.value) == "Role name cannot be empty."
