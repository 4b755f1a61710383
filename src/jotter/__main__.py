"""Allow ``python -m jotter`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m jotter`` behaves identically to the ``jotter`` console
script.
"""

from __future__ import annotations

from jotter.cli.app import cli

if __name__ == "__main__":
    cli()
