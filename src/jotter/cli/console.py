"""CLI console helpers with optional Rich support.

Rich is imported lazily on every render so that ``help`` and error
reporting keep working, as plain text, even when Rich is missing.
Regular output goes to stdout through :data:`console`; errors go to
stderr through :data:`err_console`.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from jotter.exceptions import EnvironmentError

_LOG_FORMAT = "%(name)s: %(message)s"


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = False) -> Any:
	"""Create a Rich console instance targeting stdout or stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


def escape(text: str) -> str:
	"""Escape Rich markup in user-supplied *text*."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain print."""
		try:
			rich_console = get_rich_console(stderr=self._stderr)
		except EnvironmentError:
			print(*objects, file=sys.stderr if self._stderr else sys.stdout)
			return
		rich_console.print(*objects, soft_wrap=True)


console = _ConsoleProxy(stderr=False)
err_console = _ConsoleProxy(stderr=True)


def configure_logging(level: str) -> None:
	"""Attach a stderr handler to the ``jotter`` logger at *level*.

	Uses ``rich.logging.RichHandler`` when Rich is installed.  Calling
	this more than once only updates the level.
	"""
	logger = logging.getLogger("jotter")
	logger.setLevel(level)
	if getattr(logger, "_jotter_configured", False):
		return

	handler: logging.Handler
	try:
		from rich.logging import RichHandler
	except ModuleNotFoundError:
		handler = logging.StreamHandler(sys.stderr)
		handler.setFormatter(logging.Formatter(f"%(levelname)s {_LOG_FORMAT}"))
	else:
		handler = RichHandler(
			console=get_rich_console(stderr=True),
			show_path=False,
			markup=False,
		)
		handler.setFormatter(logging.Formatter(_LOG_FORMAT))

	logger.addHandler(handler)
	logger._jotter_configured = True  # type: ignore[attr-defined]
