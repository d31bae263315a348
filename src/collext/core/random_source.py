"""Process-wide default random source for the sampling helpers.

Every randomized array operation accepts an explicit ``rng``; this
module only supplies the fallback used when the caller passes none.
The shared instance is not synchronised: callers sampling from several
threads must serialise access or pass their own source.
"""

from __future__ import annotations

import random

from collext.core.protocols import RandomSource
from collext.utils.logging import get_logger

_log = get_logger("random")

_default: RandomSource = random.Random()


def get_default_random() -> RandomSource:
    """Return the shared random source."""
    return _default


def set_default_random(source: RandomSource) -> RandomSource:
    """Install *source* as the shared random source.

    Returns the previously installed source so callers can restore it.
    """
    global _default
    previous = _default
    _default = source
    _log.debug("default random source replaced by %s", type(source).__name__)
    return previous


def seed_default_random(seed: int) -> RandomSource:
    """Replace the shared source with a fresh ``random.Random(seed)``."""
    return set_default_random(random.Random(int(seed)))


def resolve(rng: RandomSource | None) -> RandomSource:
    """Return *rng*, or the shared source when it is ``None``."""
    return rng if rng is not None else _default
