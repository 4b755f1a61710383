"""Usage text shown by ``help`` and after usage errors."""

from __future__ import annotations

from jotter.cli.console import console, escape

USAGE: str = """
Usage:
    new <note> [--tags tag1,tag2]  Create a new note
    all                            Get all notes
    find <filter>                  Find notes matching filter
    remove <id>                    Remove a note by id
    web [port]                     Launch website (default port: 5000)
    clean                          Remove all notes
    help                           Show this help message
"""


def print_usage() -> None:
    console.print(escape(USAGE))
