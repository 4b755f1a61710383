"""Rendering of note lists for ``all`` and ``find``.

Uses a Rich table when Rich is available and falls back to one plain
line per note otherwise.  Note text is never interpreted as markup.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from jotter.cli.console import console
from jotter.core.models import Note


def _import_rich_table() -> tuple[type[Any], type[Any]] | None:
    """Import ``Table`` and ``Text`` lazily; ``None`` when Rich is missing."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        return None
    return Table, Text


def format_tags(tags: Sequence[str]) -> str:
    """Render tags as ``"a, b"`` or ``"-"`` when there are none."""
    return ", ".join(tags) if tags else "-"


def _print_plain_notes(notes: Sequence[Note]) -> None:
    for note in notes:
        print(f"{note.id}  [{format_tags(note.tags)}]  {note.content}", file=sys.stdout)


def list_notes(notes: Sequence[Note]) -> None:
    """Print *notes* to stdout."""
    rich_classes = _import_rich_table()
    if rich_classes is None:
        _print_plain_notes(notes)
        return

    table_class, text_class = rich_classes
    table = table_class(
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("ID", justify="right", style="dim", no_wrap=True)
    table.add_column("Tags", style="magenta")
    table.add_column("Note")

    for note in notes:
        table.add_row(
            text_class(str(note.id)),
            text_class(format_tags(note.tags)),
            text_class(note.content),
        )

    console.print(table)
