"""Infrastructure layer — the note file and the web view.

Every OS-level failure raised while touching the note file is caught
here and re-raised as :class:`~jotter.exceptions.StorageError`.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from jotter.infra.json_store import JsonNoteStore
from jotter.infra.web_server import NotesWebServer, render_notes_page, start

__all__: list[str] = [
    "JsonNoteStore",
    "NotesWebServer",
    "render_notes_page",
    "start",
]
