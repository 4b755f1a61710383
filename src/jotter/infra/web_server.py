"""Minimal read-only web view of the notes.

Serves a snapshot of the notes taken when the server starts:

* ``/`` and ``/index.html`` — an HTML page listing every note.
* ``/api/notes`` — the same notes as JSON.

Anything else is a 404.  The server never writes to the note file.
"""

from __future__ import annotations

import html
import json
import logging
from collections.abc import Sequence
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import urlparse

from jotter.core.models import Note

logger = logging.getLogger(__name__)

DEFAULT_HOST: str = "127.0.0.1"

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Notes</title>
  <style>
    body {{ font-family: sans-serif; max-width: 40rem; margin: 2rem auto; }}
    .note {{ border: 1px solid #ddd; border-radius: 4px; padding: 0.75rem; margin-bottom: 0.75rem; }}
    .tags {{ color: #666; font-size: 0.85rem; }}
  </style>
</head>
<body>
  <h1>Notes</h1>
{body}
</body>
</html>
"""


def render_notes_page(notes: Sequence[Note]) -> str:
    """Render *notes* as a standalone HTML page.  All user text is escaped."""
    if not notes:
        return _PAGE_TEMPLATE.format(body="  <p>No notes yet</p>")

    items: list[str] = []
    for note in notes:
        tags = ", ".join(html.escape(tag) for tag in note.tags)
        items.append(
            '  <div class="note">\n'
            f"    <p>{html.escape(note.content)}</p>\n"
            f'    <div class="tags">tags: {tags}</div>\n'
            "  </div>"
        )
    return _PAGE_TEMPLATE.format(body="\n".join(items))


class _NotesRequestHandler(BaseHTTPRequestHandler):
    server_version = "jotter"

    server: NotesWebServer

    def do_GET(self) -> None:  # noqa: N802
        path = urlparse(self.path).path
        if path in ("/", "/index.html"):
            return self._send(self.server.page, "text/html; charset=utf-8")
        if path == "/api/notes":
            payload = json.dumps({"notes": self.server.payload})
            return self._send(payload, "application/json")
        return self._send("Not found", "text/plain; charset=utf-8", HTTPStatus.NOT_FOUND)

    def _send(
        self,
        body: str,
        content_type: str,
        status: HTTPStatus = HTTPStatus.OK,
    ) -> None:
        encoded = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(encoded)))
        self.end_headers()
        self.wfile.write(encoded)

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)


class NotesWebServer(ThreadingHTTPServer):
    """HTTP server bound to a fixed snapshot of notes."""

    daemon_threads = True

    def __init__(self, notes: Sequence[Note], address: tuple[str, int]) -> None:
        self.page: str = render_notes_page(notes)
        self.payload: list[dict[str, Any]] = [note.to_dict() for note in notes]
        super().__init__(address, _NotesRequestHandler)

    @property
    def port(self) -> int:
        """The bound port (useful when started on port 0)."""
        return int(self.server_address[1])


def start(notes: Sequence[Note], port: int, host: str = DEFAULT_HOST) -> NotesWebServer:
    """Bind the web view on *host*:*port* and return the server.

    The caller drives ``serve_forever()`` and is responsible for
    ``server_close()``.

    Raises
    ------
    OSError
        When the address cannot be bound (port in use, permission
        denied, unknown host).
    """
    server = NotesWebServer(notes, (host, port))
    logger.debug("Web view bound to %s:%d with %d note(s)", host, server.port, len(notes))
    return server
