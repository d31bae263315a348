"""``collext inspect`` — show how each typed accessor reads a payload.

Loads a JSON object and renders one row per top-level key with the
stored value's type and the result of every dictionary accessor, so
users can see at a glance what a loosely-typed payload coerces to.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No coercion logic resides
here; it purely collects and displays accessor results.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

from collext.cli import exit_codes
from collext.cli.console import output
from collext.core import dicts
from collext.exceptions import EnvironmentError
from collext.infra.payload_loader import load_mapping

ACCESSORS: dict[str, Callable[[Mapping[Any, Any], Any], Any]] = {
    "bool": dicts.bool_for_key,
    "int": dicts.int_for_key,
    "long": dicts.long_for_key,
    "float": dicts.float_for_key,
    "double": dicts.double_for_key,
    "string": dicts.string_for_key,
    "list": dicts.list_for_key,
    "dict": dicts.dict_for_key,
    "number": dicts.number_for_key,
}
"""Accessor name (as used on the command line) → accessor function."""


def _import_rich_table() -> tuple[type[Any], type[Any]]:
    """Import rich table and text lazily for payload rendering."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table, Text


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def format_value(value: Any) -> str:
    """Render an accessor result for display.

    Strings are shown verbatim; everything else as compact JSON
    (``None`` → ``null``).
    """
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def collect_rows(payload: Mapping[str, Any]) -> list[tuple[str, ...]]:
    """Return ``(key, stored type, accessor results…)`` per payload key."""
    rows: list[tuple[str, ...]] = []
    for key, value in payload.items():
        results = [format_value(accessor(payload, key)) for accessor in ACCESSORS.values()]
        rows.append((str(key), type(value).__name__, *results))
    return rows


def _print_plain_table(rows: list[tuple[str, ...]]) -> None:
    """Render the inspection table without Rich."""
    header = ("key", "type", *ACCESSORS)
    print("\t".join(header), file=sys.stdout)
    for row in rows:
        print("\t".join(row), file=sys.stdout)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_inspect(path: str | Path) -> int:
    """Load *path* and render every accessor's view of each key.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS`; loading errors propagate as
        :class:`~collext.exceptions.PayloadError`.
    """
    payload = load_mapping(path)
    rows = collect_rows(payload)

    try:
        table_class, text_class = _import_rich_table()
    except EnvironmentError:
        _print_plain_table(rows)
        return exit_codes.SUCCESS

    table = table_class(title=f"collext inspect: {Path(path).name}", show_lines=False)
    table.add_column("Key", style="bold")
    table.add_column("Type", style="dim")
    for name in ACCESSORS:
        table.add_column(name)
    for row in rows:
        # Text cells keep brackets in payload data from being read as markup.
        table.add_row(*(text_class(cell) for cell in row))

    output.print(table, markup=False)
    return exit_codes.SUCCESS
