"""Tests for string to number coercion (core/numbers.py)."""

from __future__ import annotations

import math

import pytest

from jotter.core.numbers import parse_int, to_number


class TestToNumber:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("42", 42.0),
            ("-1", -1.0),
            ("3000.5", 3000.5),
            (".5", 0.5),
            ("1e3", 1000.0),
            ("  7 ", 7.0),
            ("", 0.0),
            ("   ", 0.0),
            ("0x1F", 31.0),
            ("0b101", 5.0),
            ("0o17", 15.0),
        ],
    )
    def test_numbers(self, raw: str, expected: float) -> None:
        assert to_number(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "3000 4000", "1_000", "nan", "inf", "0b12", "--1"])
    def test_not_numbers(self, raw: str) -> None:
        assert to_number(raw) is None

    def test_infinity(self) -> None:
        assert to_number("-Infinity") == -math.inf


class TestParseInt:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("12", 12), (" 12", 12), ("12abc", 12), ("-3", -3), ("+4", 4), ("1.9", 1), ("0x10", 16)],
    )
    def test_leading_integer(self, raw: str, expected: int) -> None:
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "-", ".5"])
    def test_no_integer(self, raw: str) -> None:
        assert parse_int(raw) is None
