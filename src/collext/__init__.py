"""collext — convenience helpers for Python's built-in collections.

Typed dictionary accessors, array sampling and formatting helpers, and
calendar-date arithmetic, all as plain functions over native types.
"""

from collext.version import __version__

__all__: list[str] = ["__version__"]
