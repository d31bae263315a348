"""Custom exception hierarchy for collext.

The core accessors default instead of raising, so only a handful of
conditions ever surface as exceptions.  Every one of them inherits from
:class:`CollextError`; raw OS or parser errors must be caught at the
infrastructure boundary and re-raised as a subclass defined here.

Hierarchy
---------
CollextError
├── InvalidCountError
├── ItemFormatError
├── PayloadError
└── EnvironmentError
"""

from __future__ import annotations


class CollextError(Exception):
    """Base exception for all collext errors.

    The CLI error boundary renders the message and the optional hint
    without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Array operations ------------------------------------------------------

class InvalidCountError(CollextError):
    """Raised when a sampling operation receives a negative element count."""


class ItemFormatError(CollextError):
    """Raised when an item format cannot render an element."""


# --- Payload loading -------------------------------------------------------

class PayloadError(CollextError):
    """Raised when a JSON payload cannot be read or is not an object."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CollextError):
    """Raised when an optional runtime dependency is not available."""
