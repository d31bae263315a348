"""Shared utilities — logging helpers and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O beyond log handlers.
* Importable by any layer.
"""

from collext.utils.logging import configure_logging, get_logger

__all__: list[str] = ["configure_logging", "get_logger"]
