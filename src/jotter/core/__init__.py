"""Core layer — argument parsing, validation and note operations.

Rules
-----
* No console output.
* No direct filesystem or network I/O; storage goes through
  :class:`~jotter.core.protocols.NoteRepository`.
* No imports from ``cli`` or ``infra``.
"""

from jotter.core.arguments import SHORT_OPTION_ALIASES, ArgumentParser
from jotter.core.models import Note, ParsedArguments
from jotter.core.note_service import NoteService
from jotter.core.protocols import NoteRepository
from jotter.core.validators import (
    parse_tags_option,
    validate_id,
    validate_note_content,
    validate_port,
)

__all__: list[str] = [
    "SHORT_OPTION_ALIASES",
    "ArgumentParser",
    "Note",
    "NoteRepository",
    "NoteService",
    "ParsedArguments",
    "parse_tags_option",
    "validate_id",
    "validate_note_content",
    "validate_port",
]
