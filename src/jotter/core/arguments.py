"""Command-line tokenizer producing :class:`~jotter.core.models.ParsedArguments`.

The grammar is deliberately small::

    <command> [positional | --name [value] | -x [value]]...

* The first token is the command.
* A token starting with ``-`` is an option.  It takes the next token as
  its value unless there is no next token or the next token itself
  starts with ``-``; in that case the option is a flag (``True``).
* Everything else is a positional, kept in input order.

Short options listed in :data:`SHORT_OPTION_ALIASES` are stored under
both the short and the long name, so ``-t a,b`` and ``--tags a,b`` are
interchangeable.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from jotter.core.models import ParsedArguments
from jotter.core.numbers import to_number

logger = logging.getLogger(__name__)

SHORT_OPTION_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "t": "tags",
        "p": "priority",
    }
)
"""Short option name → long option name."""


class ArgumentParser:
    """Parse an argument vector once and expose typed accessors.

    Parameters
    ----------
    args:
        The argument vector with the program name already removed.
    aliases:
        Short → long option table.  Defaults to
        :data:`SHORT_OPTION_ALIASES`.
    """

    def __init__(
        self,
        args: Sequence[str] | None = None,
        *,
        aliases: Mapping[str, str] = SHORT_OPTION_ALIASES,
    ) -> None:
        self._aliases: dict[str, str] = dict(aliases)
        self._short_names: dict[str, str] = {
            long_name: short_name for short_name, long_name in self._aliases.items()
        }
        self._parsed: ParsedArguments = self._parse(tuple(args or ()))
        logger.debug("Parsed arguments: %s", self._parsed)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def _parse(self, tokens: tuple[str, ...]) -> ParsedArguments:
        command = tokens[0] if tokens else None
        positionals: list[str] = []
        options: dict[str, str | bool] = {}

        i = 1
        while i < len(tokens):
            token = tokens[i]

            if not token.startswith("-"):
                positionals.append(token)
                i += 1
                continue

            is_long = token.startswith("--")
            name = token[2:] if is_long else token[1:]
            has_value = i + 1 < len(tokens) and not tokens[i + 1].startswith("-")

            if not has_value:
                options[name] = True
                i += 1
                continue

            value = tokens[i + 1]
            options[name] = value
            if not is_long and name in self._aliases:
                options[self._aliases[name]] = value
            i += 2

        return ParsedArguments(
            command=command,
            positionals=tuple(positionals),
            options=MappingProxyType(options),
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def parsed(self) -> ParsedArguments:
        """The immutable parse result."""
        return self._parsed

    def get_command(self) -> str | None:
        return self._parsed.command

    def get_positional(self, index: int) -> str | None:
        """Return the positional at *index*, or ``None`` when out of range."""
        if 0 <= index < len(self._parsed.positionals):
            return self._parsed.positionals[index]
        return None

    def get_option(
        self,
        name: str,
        default: str | bool | None = None,
    ) -> str | bool | None:
        """Return the raw value of option *name*.

        Lookup order is the exact name, then the short alias of *name*
        (so a bare ``-t`` flag answers for ``tags``), then *default*.
        """
        options = self._parsed.options
        if name in options:
            return options[name]
        short_name = self._short_names.get(name)
        if short_name is not None and short_name in options:
            return options[short_name]
        return default

    def get_number_option(self, name: str, default: float = 0) -> float:
        """Return option *name* as a number.

        Flags, missing options and values that are not finite numbers
        all yield *default*.
        """
        value = self.get_option(name)
        if value is None or isinstance(value, bool):
            return default
        number = to_number(value)
        if number is None or not math.isfinite(number):
            return default
        return int(number) if number.is_integer() else number

    def get_array_option(
        self,
        name: str,
        separator: str = ",",
        default: Sequence[str] | None = None,
    ) -> list[str]:
        """Return option *name* split on *separator*.

        Segments are neither trimmed nor filtered, so an empty value
        gives ``[""]``.
        """
        value = self.get_option(name)
        if value is None or isinstance(value, bool):
            return list(default) if default is not None else []
        return value.split(separator)
