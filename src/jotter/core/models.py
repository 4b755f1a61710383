"""Domain models for jotter.

Both models are **frozen** dataclasses.  Collections inside them are
tuples or read-only mappings so that a value, once built, cannot be
changed by whoever holds it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Note:
    """A single stored note."""

    id: int
    """Identifier assigned at creation (epoch milliseconds)."""

    content: str
    """The note text, already trimmed."""

    tags: tuple[str, ...] = ()
    """Tags in the order the user supplied them."""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serialisable form used by the note file."""
        return {"id": self.id, "content": self.content, "tags": list(self.tags)}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Note:
        """Build a :class:`Note` from one entry of the note file."""
        raw_tags = raw.get("tags") or ()
        return cls(
            id=int(raw["id"]),
            content=str(raw.get("content", "")),
            tags=tuple(str(tag) for tag in raw_tags),
        )


# ---------------------------------------------------------------------------
# Parsed command line
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedArguments:
    """Structured view of one command line.

    ``options`` maps an option name to its value, or to ``True`` for a
    flag.  A short option that has a long alias is recorded under both
    names.
    """

    command: str | None
    positionals: tuple[str, ...] = ()
    options: Mapping[str, str | bool] = field(
        default_factory=lambda: MappingProxyType({}),
    )
