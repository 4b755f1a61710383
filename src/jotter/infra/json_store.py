"""JSON file implementation of :class:`~jotter.core.protocols.NoteRepository`.

The whole database is a single JSON document::

    {"notes": [{"id": 1700000000000, "content": "...", "tags": ["..."]}]}

It is read in full on every call and rewritten in full on every save.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jotter.exceptions import StorageError

logger = logging.getLogger(__name__)


def _empty_db() -> dict[str, Any]:
    return {"notes": []}


class JsonNoteStore:
    """Note database stored as indented JSON at *path*.

    Usage::

        store = JsonNoteStore(Path("~/.jotter/db.json").expanduser())
        store.insert({"id": 1, "content": "Buy milk", "tags": []})
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def get_db(self) -> dict[str, Any]:
        """Load the database, creating an empty one if the file is missing.

        Raises
        ------
        StorageError
            When the file cannot be read or does not hold a JSON object.
        """
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No note file at %s, creating one", self._path)
            return self.save_db(_empty_db())
        except OSError as exc:
            raise StorageError(f"Cannot read note file {self._path}: {exc}") from exc

        try:
            db = json.loads(text)
        except json.JSONDecodeError as exc:
            raise StorageError(
                f"Note file {self._path} is not valid JSON.",
                hint="Fix or delete the file; it will be recreated empty.",
            ) from exc

        if not isinstance(db, dict):
            raise StorageError(
                f"Note file {self._path} does not contain a JSON object.",
                hint="Fix or delete the file; it will be recreated empty.",
            )
        logger.debug("Loaded note file %s", self._path)
        return db

    def save_db(self, db: dict[str, Any]) -> dict[str, Any]:
        """Write *db* to disk and return it."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(db, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot write note file {self._path}: {exc}") from exc
        logger.debug("Saved note file %s", self._path)
        return db

    def insert(self, data: dict[str, Any]) -> dict[str, Any]:
        db = self.get_db()
        notes = db.get("notes")
        if not isinstance(notes, list):
            notes = []
            db["notes"] = notes
        notes.append(data)
        self.save_db(db)
        return data
