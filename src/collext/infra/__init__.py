"""Infrastructure layer — filesystem access for the CLI.

Every raw OS or parser exception must be caught here and re-raised as a
:class:`~collext.exceptions.CollextError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from collext.infra.payload_loader import load_mapping

__all__: list[str] = ["load_mapping"]
