"""Core note service — create, list, search and remove notes.

Depends on a :class:`~jotter.core.protocols.NoteRepository` injected at
construction time so it can be driven by an in-memory fake in tests.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from typing import Any

from jotter.core.models import Note
from jotter.core.protocols import NoteRepository

logger = logging.getLogger(__name__)


def _epoch_millis() -> int:
    return int(time.time() * 1000)


class NoteService:
    """Note operations over a repository.

    Parameters
    ----------
    repository:
        Any object satisfying the :class:`NoteRepository` protocol.
    clock:
        Returns the id for a new note.  Defaults to epoch milliseconds.
    """

    def __init__(
        self,
        repository: NoteRepository,
        *,
        clock: Callable[[], int] = _epoch_millis,
    ) -> None:
        self._repository: NoteRepository = repository
        self._clock: Callable[[], int] = clock

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def new_note(self, content: str, tags: Sequence[str] = ()) -> Note:
        """Store a new note and return it."""
        taken = {note.id for note in self.get_all_notes()}
        note_id = self._clock()
        while note_id in taken:
            note_id += 1

        note = Note(id=note_id, content=content, tags=tuple(tags))
        self._repository.insert(note.to_dict())
        logger.debug("Inserted note %d with %d tag(s)", note.id, len(note.tags))
        return note

    def get_all_notes(self) -> list[Note]:
        return [Note.from_dict(entry) for entry in self._entries(self._repository.get_db())]

    def find_notes(self, query: str, *, case_sensitive: bool = False) -> list[Note]:
        """Return notes whose content contains *query*."""
        if case_sensitive:
            return [note for note in self.get_all_notes() if query in note.content]
        needle = query.lower()
        return [note for note in self.get_all_notes() if needle in note.content.lower()]

    def remove_note(self, note_id: int) -> int | None:
        """Remove the note with *note_id*.

        Returns the id when a note was removed and ``None`` when no note
        matched, in which case the store is left untouched.
        """
        db = self._repository.get_db()
        entries = self._entries(db)
        kept = [entry for entry in entries if Note.from_dict(entry).id != note_id]
        if len(kept) == len(entries):
            return None

        db["notes"] = kept
        self._repository.save_db(db)
        logger.debug("Removed note %d", note_id)
        return note_id

    def remove_all_notes(self) -> None:
        self._repository.save_db({"notes": []})
        logger.debug("Removed all notes")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _entries(db: dict[str, Any]) -> list[dict[str, Any]]:
        """Pull the ``notes`` list out of *db*, skipping malformed entries."""
        raw: object = db.get("notes")
        if not isinstance(raw, list):
            return []
        return [entry for entry in raw if isinstance(entry, dict) and "id" in entry]
