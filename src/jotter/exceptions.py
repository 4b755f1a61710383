"""Custom exception hierarchy for jotter.

Every error the application knowingly raises inherits from
:class:`JotterError`.  The CLI error boundary renders these as clean
messages; anything else is treated as an unexpected failure.

Hierarchy
---------
JotterError
├── CommandError
├── StorageError
└── EnvironmentError
"""

from __future__ import annotations


class JotterError(Exception):
    """Base exception for all jotter errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Usage -----------------------------------------------------------------

class CommandError(JotterError):
    """A user-correctable problem with the command line.

    Raised for unknown commands, missing arguments and failed
    validation.  ``show_usage`` asks the CLI to print the usage text
    after the message.
    """

    def __init__(
        self,
        message: str,
        show_usage: bool = False,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.show_usage: bool = show_usage


# --- Persistence -----------------------------------------------------------

class StorageError(JotterError):
    """Raised when the note file cannot be read or written."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(JotterError):
    """Raised when a required runtime dependency is not available."""
