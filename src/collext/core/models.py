"""Domain models for collext.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.
"""

from __future__ import annotations

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Calendar components
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DateInformation:
    """Gregorian calendar components of a single point in time."""

    year: int
    month: int
    """1 = January … 12 = December."""

    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    weekday: int = 0
    """1 = Sunday … 7 = Saturday, or ``0`` when not computed."""
