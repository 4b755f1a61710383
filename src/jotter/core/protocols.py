"""Protocols (interfaces) consumed by the core layer.

Core code depends only on these contracts; the concrete JSON file
store lives in :mod:`jotter.infra.json_store`.
"""

from __future__ import annotations

from typing import Any, Protocol


class NoteRepository(Protocol):
    """Contract for the note database backend.

    The database is a plain dict of the shape ``{"notes": [...]}`` where
    each entry is the :meth:`~jotter.core.models.Note.to_dict` form of a
    note.
    """

    def get_db(self) -> dict[str, Any]:
        """Load and return the whole database.

        Implementations create an empty ``{"notes": []}`` database when
        none exists yet.

        Raises
        ------
        StorageError
            When the backing store cannot be read or is corrupt.
        """
        ...  # pragma: no cover

    def save_db(self, db: dict[str, Any]) -> dict[str, Any]:
        """Persist *db*, replacing the previous contents, and return it."""
        ...  # pragma: no cover

    def insert(self, data: dict[str, Any]) -> dict[str, Any]:
        """Append *data* to ``notes``, persist, and return *data*."""
        ...  # pragma: no cover
