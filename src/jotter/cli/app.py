"""CLI application entry point and command routing for jotter.

:func:`main` parses the argument vector, routes to one handler per
command and turns :class:`~jotter.exceptions.CommandError` into exit
code 1.  :func:`cli` wraps it as the outermost error boundary for the
console script: other known errors, ``KeyboardInterrupt`` and anything
unexpected are rendered there and mapped to exit codes.

Handlers hold no note logic of their own; they validate input and call
the :class:`~jotter.core.note_service.NoteService` or the web view.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from jotter.cli import exit_codes
from jotter.cli.console import configure_logging, console, err_console, escape
from jotter.cli.listing import list_notes
from jotter.cli.usage import print_usage
from jotter.config import JotterConfig, load_config
from jotter.core.arguments import ArgumentParser
from jotter.core.note_service import NoteService
from jotter.core.validators import (
    TAGS_OPTION,
    parse_tags_option,
    validate_id,
    validate_note_content,
    validate_port,
)
from jotter.exceptions import CommandError, JotterError
from jotter.version import __version__

logger = logging.getLogger(__name__)

VERSION_FLAGS: tuple[str, ...] = ("-V", "--version")


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Everything a command handler needs for one invocation."""

    args: ArgumentParser
    argv: tuple[str, ...]
    service: NoteService
    config: JotterConfig


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _operand(ctx: CommandContext) -> str | None:
    """Return the first positional, or the raw token after the command.

    The parser reads a token such as ``-1`` as an option flag; commands
    whose operand may look like that fall back to the raw token so it is
    validated rather than dropped.
    """
    positional = ctx.args.get_positional(0)
    if positional is not None:
        return positional
    return ctx.argv[1] if len(ctx.argv) > 1 else None


def _handle_new(ctx: CommandContext) -> int:
    content = validate_note_content(ctx.args.get_positional(0))
    tags = parse_tags_option(ctx.argv, names=(TAGS_OPTION, "-t"))
    note = ctx.service.new_note(content, tags)
    console.print(f"Note added! {note.id}")
    return exit_codes.SUCCESS


def _handle_all(ctx: CommandContext) -> int:
    notes = ctx.service.get_all_notes()
    if not notes:
        console.print("No notes found")
        return exit_codes.SUCCESS
    list_notes(notes)
    return exit_codes.SUCCESS


def _handle_find(ctx: CommandContext) -> int:
    query = ctx.args.get_positional(0)
    if not query:
        raise CommandError("Search filter is required", show_usage=True)

    case_sensitive = bool(ctx.args.get_option("case-sensitive", False))
    notes = ctx.service.find_notes(query, case_sensitive=case_sensitive)
    if not notes:
        console.print("No notes found matching filter")
        return exit_codes.SUCCESS
    list_notes(notes)
    return exit_codes.SUCCESS


def _handle_remove(ctx: CommandContext) -> int:
    raw_id = _operand(ctx)
    if not raw_id:
        raise CommandError("Note ID is required", show_usage=True)

    note_id = validate_id(raw_id)
    removed_id = ctx.service.remove_note(note_id)
    if removed_id is None:
        raise CommandError(f"Note with ID {note_id} not found")
    console.print(f"Note removed: {removed_id}")
    return exit_codes.SUCCESS


def _handle_web(ctx: CommandContext) -> int:
    """Serve the web view until interrupted.

    Binding failures are reported as usage-style errors; Ctrl+C leaves
    through :func:`cli` with :data:`exit_codes.KEYBOARD_INTERRUPT`.
    """
    from jotter.infra.web_server import start

    raw_port = _operand(ctx)
    port = validate_port(raw_port) if raw_port else ctx.config.default_port
    notes = ctx.service.get_all_notes()

    try:
        server = start(notes, port, host=ctx.config.host)
    except Exception as exc:
        raise CommandError(f"Failed to start server: {exc}") from exc

    console.print(f"Server started on port {server.port}")
    try:
        server.serve_forever()
    finally:
        server.server_close()
    return exit_codes.SUCCESS


def _handle_clean(ctx: CommandContext) -> int:
    if not ctx.service.get_all_notes():
        console.print("No notes to remove")
        return exit_codes.SUCCESS
    ctx.service.remove_all_notes()
    console.print("All notes removed")
    return exit_codes.SUCCESS


def _handle_help(ctx: CommandContext) -> int:
    print_usage()
    return exit_codes.SUCCESS


COMMANDS: dict[str, Callable[[CommandContext], int]] = {
    "new": _handle_new,
    "all": _handle_all,
    "find": _handle_find,
    "remove": _handle_remove,
    "web": _handle_web,
    "clean": _handle_clean,
    "help": _handle_help,
}


def _dispatch(ctx: CommandContext) -> int:
    command = ctx.args.get_command()
    if not command:
        raise CommandError("No command provided", show_usage=True)

    if command in VERSION_FLAGS:
        console.print(f"jotter {__version__}")
        return exit_codes.SUCCESS

    handler = COMMANDS.get(command)
    if handler is None:
        raise CommandError(f"Unknown command: {command}", show_usage=True)

    logger.debug("Dispatching %r", command)
    return handler(ctx)


def _build_service(config: JotterConfig) -> NoteService:
    from jotter.infra.json_store import JsonNoteStore

    return NoteService(JsonNoteStore(config.db_path))


def _report_error(exc: JotterError) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    if exc.hint:
        err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: Sequence[str] | None = None,
    *,
    service: NoteService | None = None,
    config: JotterConfig | None = None,
) -> int:
    """Run one jotter command.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    service:
        Note service to use instead of one backed by the configured
        note file.
    config:
        Settings to use instead of reading the environment.

    Returns
    -------
    int
        OS process exit code.  Usage errors return
        :data:`exit_codes.GENERAL_ERROR`; every other exception
        propagates to the caller.
    """
    raw_args = tuple(sys.argv[1:] if argv is None else argv)
    config = config if config is not None else load_config()
    configure_logging(config.log_level)

    ctx = CommandContext(
        args=ArgumentParser(raw_args),
        argv=raw_args,
        service=service if service is not None else _build_service(config),
        config=config,
    )

    try:
        return _dispatch(ctx)
    except CommandError as exc:
        _report_error(exc)
        if exc.show_usage:
            print_usage()
        return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except JotterError as exc:
        _report_error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
