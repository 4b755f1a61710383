"""jotter — a small command-line note keeper.

Notes live in a local JSON file and can be browsed through a minimal
web view.
"""

from jotter.version import __version__

__all__: list[str] = ["__version__"]
