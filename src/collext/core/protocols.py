"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols, never on a concrete random
generator, so tests can inject seeded or scripted sources.
"""

from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Contract for the random-number source of the sampling helpers.

    :class:`random.Random` satisfies this protocol structurally (no
    explicit inheritance required).
    """

    def randrange(self, stop: int) -> int:
        """Return a uniformly distributed integer in ``[0, stop)``.

        *stop* is always positive when called from collext.
        """
        ...  # pragma: no cover
