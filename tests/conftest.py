"""Shared pytest fixtures and configuration for the jotter test suite.

Guidelines
----------
* Tests never touch the user's real note file; file-backed tests use
  ``tmp_path``.
* Core tests run against :class:`InMemoryNoteStore`.
* The only network access is a loopback server bound to port 0.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

from jotter.config import JotterConfig
from jotter.core.note_service import NoteService


class InMemoryNoteStore:
    """Dict-backed :class:`~jotter.core.protocols.NoteRepository` fake."""

    def __init__(self, notes: list[dict[str, Any]] | None = None) -> None:
        self.db: dict[str, Any] = {"notes": list(notes or [])}
        self.saves: int = 0

    def get_db(self) -> dict[str, Any]:
        return copy.deepcopy(self.db)

    def save_db(self, db: dict[str, Any]) -> dict[str, Any]:
        self.db = copy.deepcopy(db)
        self.saves += 1
        return db

    def insert(self, data: dict[str, Any]) -> dict[str, Any]:
        db = self.get_db()
        db["notes"].append(data)
        self.save_db(db)
        return data


class FixedClock:
    """Returns 1000, 2000, 3000, ... on successive calls."""

    def __init__(self, start: int = 1000, step: int = 1000) -> None:
        self._next = start
        self._step = step

    def __call__(self) -> int:
        value = self._next
        self._next += self._step
        return value


@pytest.fixture()
def store() -> InMemoryNoteStore:
    return InMemoryNoteStore()


@pytest.fixture()
def service(store: InMemoryNoteStore) -> NoteService:
    return NoteService(store, clock=FixedClock())


@pytest.fixture()
def config(tmp_path: Path) -> JotterConfig:
    return JotterConfig(db_path=tmp_path / "db.json")
