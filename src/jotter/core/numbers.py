"""String to number coercion shared by the parser and validators.

Two flavours are needed:

* :func:`to_number` converts a *whole* string and rejects anything with
  trailing garbage (``"3000 4000"`` is not a number).
* :func:`parse_int` reads a leading integer and ignores whatever
  follows (``"12abc"`` is 12, ``"1.9"`` is 1).
"""

from __future__ import annotations

import math
import re

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PREFIXED_RE = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_LEADING_INT_RE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")

_INFINITIES: dict[str, float] = {
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}

_BASES: dict[str, int] = {"x": 16, "o": 8, "b": 2}


def to_number(raw: str) -> float | None:
    """Convert *raw* to a float, or return ``None`` if it is not a number.

    Surrounding whitespace is ignored and a blank string counts as zero.
    ``0x``/``0o``/``0b`` prefixed integers are accepted.
    """
    text = raw.strip()
    if not text:
        return 0.0
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if text in _INFINITIES:
        return _INFINITIES[text]

    match = _PREFIXED_RE.fullmatch(text)
    if match is None:
        return None
    try:
        return float(int(match.group(2), _BASES[match.group(1).lower()]))
    except ValueError:
        # e.g. "0b12": the digits are not valid for the base.
        return None


def parse_int(raw: str) -> int | None:
    """Read the leading integer of *raw*; ``None`` when there is none."""
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        return None
    sign, digits = match.groups()
    if digits[:2].lower() == "0x":
        value = int(digits[2:], 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value
