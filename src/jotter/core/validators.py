"""Validators for raw command-line input.

Each function takes the raw string (or ``None``), returns the coerced
value, and raises :class:`~jotter.exceptions.CommandError` when the
input is something the user should fix.
"""

from __future__ import annotations

from collections.abc import Sequence

from jotter.core.numbers import parse_int, to_number
from jotter.exceptions import CommandError

MIN_PORT: int = 0
MAX_PORT: int = 65535

TAGS_OPTION: str = "--tags"


def validate_port(raw: str | None) -> int:
    """Validate a TCP port given on the command line.

    Raises
    ------
    ValueError
        If *raw* is missing or empty.  Callers only validate a port the
        user actually typed, so this is a programming error rather than
        a usage error.
    CommandError
        If *raw* is not a number, not an integer, or out of range.
    """
    if not raw:
        raise ValueError("Port must be a number")

    number = to_number(raw)
    if number is None:
        raise CommandError("Port must be a number")
    if not number.is_integer() or not MIN_PORT <= number <= MAX_PORT:
        raise CommandError(f"Port must be between {MIN_PORT} and {MAX_PORT}")
    return int(number)


def validate_id(raw: str) -> int:
    """Read a note id.  Trailing non-digits are ignored; zero is allowed."""
    parsed = parse_int(raw)
    if parsed is None:
        raise CommandError("ID must be a number")
    if parsed < 0:
        raise CommandError("ID must be a positive number")
    return parsed


def parse_tags_option(
    args: Sequence[str],
    names: Sequence[str] = (TAGS_OPTION,),
) -> list[str]:
    """Scan *args* for the first tags option and split its value on commas.

    This is a plain scan of the raw tokens: the value is whatever token
    follows the option, even one that starts with ``-``.  Tags are
    returned exactly as typed.
    """
    index = next((i for i, token in enumerate(args) if token in names), None)
    if index is None:
        return []

    if index + 1 >= len(args):
        raise CommandError(f"{args[index]} requires a value")

    tags = args[index + 1].split(",")
    if any(not tag.strip() for tag in tags):
        raise CommandError("Tags cannot be empty")
    return tags


def validate_note_content(raw: object) -> str:
    """Return the trimmed note text."""
    if not raw or not isinstance(raw, str):
        raise CommandError(
            "Note content is required and must be a string",
            show_usage=True,
        )
    content = raw.strip()
    if not content:
        raise CommandError("Note content cannot be empty")
    return content
