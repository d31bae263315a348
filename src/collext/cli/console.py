"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help``, ``--version`` and plain
command output keep working when it is not installed.

Two proxies are exported: :data:`console` writes diagnostics to stderr,
:data:`output` writes command results to stdout.
"""

from __future__ import annotations

import sys
from typing import Any

from collext.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a Rich console instance targeting stderr (or stdout)."""
    console_class = _load_rich_console_class()
    return console_class(stderr=stderr)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def __init__(self, *, stderr: bool) -> None:
        self._stderr = stderr

    def print(self, *objects: object, markup: bool = True) -> None:
        """Render with Rich when available, else plain print.

        Pass ``markup=False`` for user data that may contain brackets.
        """
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            stream = sys.stderr if self._stderr else sys.stdout
            print(*objects, file=stream)
            return
        rich_console.print(
            *objects,
            markup=markup,
            emoji=markup,
            highlight=False,
            soft_wrap=True,
        )


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
