"""Tests for input validators (core/validators.py)."""

from __future__ import annotations

import pytest

from jotter.core.validators import (
    parse_tags_option,
    validate_id,
    validate_note_content,
    validate_port,
)
from jotter.exceptions import CommandError

RANGE_MESSAGE = "Port must be between 0 and 65535"


# ---------------------------------------------------------------------------
# validate_port
# ---------------------------------------------------------------------------

class TestValidatePort:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("3000", 3000), ("0", 0), ("65535", 65535), (" 8080 ", 8080)],
    )
    def test_valid_ports(self, raw: str, expected: int) -> None:
        port = validate_port(raw)
        assert port == expected
        assert isinstance(port, int)

    @pytest.mark.parametrize("raw", [None, ""])
    def test_missing_input_is_a_plain_error(self, raw: str | None) -> None:
        with pytest.raises(ValueError, match="Port must be a number") as exc_info:
            validate_port(raw)
        assert not isinstance(exc_info.value, CommandError)

    @pytest.mark.parametrize("raw", ["abc", "3000 4000", "12px"])
    def test_non_numeric(self, raw: str) -> None:
        with pytest.raises(CommandError, match="Port must be a number"):
            validate_port(raw)

    @pytest.mark.parametrize("raw", ["-1", "65536", "3000.5", "Infinity"])
    def test_out_of_range_or_fractional(self, raw: str) -> None:
        with pytest.raises(CommandError, match=RANGE_MESSAGE):
            validate_port(raw)

    def test_port_errors_do_not_show_usage(self) -> None:
        with pytest.raises(CommandError) as exc_info:
            validate_port("abc")
        assert exc_info.value.show_usage is False


# ---------------------------------------------------------------------------
# validate_id
# ---------------------------------------------------------------------------

class TestValidateId:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0", 0), ("42", 42), ("1700000000000", 1700000000000), ("12abc", 12), ("7.9", 7)],
    )
    def test_valid_ids(self, raw: str, expected: int) -> None:
        assert validate_id(raw) == expected

    def test_negative(self) -> None:
        with pytest.raises(CommandError, match="ID must be a positive number"):
            validate_id("-1")

    @pytest.mark.parametrize("raw", ["abc", "", "x12"])
    def test_not_a_number(self, raw: str) -> None:
        with pytest.raises(CommandError, match="ID must be a number"):
            validate_id(raw)


# ---------------------------------------------------------------------------
# parse_tags_option
# ---------------------------------------------------------------------------

class TestParseTagsOption:
    def test_no_tags_option(self) -> None:
        assert parse_tags_option(["new", "x"]) == []

    def test_splits_on_commas(self) -> None:
        assert parse_tags_option(["new", "x", "--tags", "shopping,home"]) == [
            "shopping",
            "home",
        ]

    def test_tags_are_returned_as_typed(self) -> None:
        assert parse_tags_option(["new", "x", "--tags", "a, b"]) == ["a", " b"]

    def test_trailing_tags_option(self) -> None:
        with pytest.raises(CommandError, match="--tags requires a value"):
            parse_tags_option(["new", "x", "--tags"])

    def test_trailing_short_option_names_it(self) -> None:
        with pytest.raises(CommandError, match="^-t requires a value$"):
            parse_tags_option(["new", "x", "-t"], names=("--tags", "-t"))

    @pytest.mark.parametrize("value", ["a,,b", "a, ", ""])
    def test_blank_segment(self, value: str) -> None:
        with pytest.raises(CommandError, match="Tags cannot be empty"):
            parse_tags_option(["new", "x", "--tags", value])

    def test_value_may_start_with_dash(self) -> None:
        assert parse_tags_option(["new", "x", "--tags", "-a"]) == ["-a"]

    def test_short_name_is_ignored_unless_requested(self) -> None:
        assert parse_tags_option(["new", "x", "-t", "a"]) == []
        assert parse_tags_option(["new", "x", "-t", "a"], names=("--tags", "-t")) == ["a"]


# ---------------------------------------------------------------------------
# validate_note_content
# ---------------------------------------------------------------------------

class TestValidateNoteContent:
    def test_returns_trimmed_content(self) -> None:
        assert validate_note_content("  Buy milk \n") == "Buy milk"

    @pytest.mark.parametrize("raw", [None, "", 42, ["text"]])
    def test_missing_or_not_text(self, raw: object) -> None:
        with pytest.raises(
            CommandError, match="Note content is required and must be a string"
        ) as exc_info:
            validate_note_content(raw)
        assert exc_info.value.show_usage is True

    def test_blank(self) -> None:
        with pytest.raises(CommandError, match="Note content cannot be empty") as exc_info:
            validate_note_content("   ")
        assert exc_info.value.show_usage is False
