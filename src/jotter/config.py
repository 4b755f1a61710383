"""Runtime configuration read from environment variables.

* ``JOTTER_DB``: path of the note file (default ``~/.jotter/db.json``).
* ``JOTTER_HOST``: bind host for ``web`` (default ``127.0.0.1``).
* ``JOTTER_PORT``: default port for ``web`` (default ``5000``).
* ``JOTTER_LOG_LEVEL``: logging level name (default ``WARNING``).
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from jotter.core.validators import validate_port
from jotter.exceptions import CommandError, JotterError

DEFAULT_DB_PATH: Path = Path("~/.jotter/db.json")
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 5000
DEFAULT_LOG_LEVEL: str = "WARNING"


@dataclass(frozen=True, slots=True)
class JotterConfig:
    """Resolved settings for one process."""

    db_path: Path = field(default_factory=DEFAULT_DB_PATH.expanduser)
    host: str = DEFAULT_HOST
    default_port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(environ: Mapping[str, str] | None = None) -> JotterConfig:
    """Build a :class:`JotterConfig` from *environ* (``os.environ`` by default).

    Raises
    ------
    JotterError
        If ``JOTTER_PORT`` or ``JOTTER_LOG_LEVEL`` holds an invalid value.
    """
    env = os.environ if environ is None else environ

    raw_db = env.get("JOTTER_DB")
    db_path = Path(raw_db) if raw_db else DEFAULT_DB_PATH

    raw_port = env.get("JOTTER_PORT")
    port = DEFAULT_PORT
    if raw_port:
        try:
            port = validate_port(raw_port)
        except CommandError as exc:
            raise JotterError(
                f"Invalid JOTTER_PORT {raw_port!r}: {exc}",
                hint="Unset JOTTER_PORT or give it a port number.",
            ) from exc

    log_level = (env.get("JOTTER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise JotterError(
            f"Invalid JOTTER_LOG_LEVEL {log_level!r}",
            hint="Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL.",
        )

    return JotterConfig(
        db_path=db_path.expanduser(),
        host=env.get("JOTTER_HOST") or DEFAULT_HOST,
        default_port=port,
        log_level=log_level,
    )
