"""Infrastructure: read a JSON object from disk.

The typed dictionary accessors are most useful on decoded payloads;
this loader feeds ``collext get`` with one.

Rules
-----
* Only ``PayloadError`` escapes, never ``OSError`` or the decoder's
  ``ValueError``.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from collext.exceptions import PayloadError
from collext.utils.logging import get_logger

_log = get_logger("payload")


def load_mapping(path: str | Path) -> dict[str, Any]:
    """Read *path* and return its top-level JSON object.

    Raises
    ------
    PayloadError
        If the file cannot be read, is not valid JSON, or does not hold
        a JSON object at the top level.
    """
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise PayloadError(
            f"Cannot read payload file: {source}",
            hint=exc.strerror or str(exc),
        ) from exc
    except UnicodeDecodeError as exc:
        raise PayloadError(
            f"Payload is not UTF-8 text: {source}",
            hint=str(exc),
        ) from exc

    try:
        payload: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise PayloadError(
            f"Payload is not valid JSON: {source}",
            hint=f"line {exc.lineno}, column {exc.colno}: {exc.msg}",
        ) from exc
    except ValueError as exc:
        # Well-formed JSON the decoder still refuses, e.g. integer literals
        # longer than the interpreter's int-string limit.
        raise PayloadError(
            f"Payload cannot be decoded: {source}",
            hint=str(exc),
        ) from exc

    if not isinstance(payload, dict):
        raise PayloadError(
            f"Payload must be a JSON object, got {type(payload).__name__}.",
            hint="Wrap the values in {...} so they can be looked up by key.",
        )

    _log.debug("loaded %d keys from %s", len(payload), source)
    return payload
