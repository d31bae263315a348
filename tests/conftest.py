"""Shared pytest fixtures and configuration for the collext test suite.

Guidelines
----------
* No network access in any test.
* Core tests must be pure — no side effects.
* Randomized helpers are tested with seeded or scripted sources; the
  shared default source is restored after every test.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import pytest

from collext.core import random_source


class ScriptedRandom:
    """Random source that replays a fixed list of draws.

    Every call is recorded as ``(stop, value)`` so tests can check the
    ranges the helpers ask for.
    """

    def __init__(self, draws: Sequence[int]) -> None:
        self._draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def randrange(self, stop: int) -> int:
        value = self._draws.pop(0)
        assert 0 <= value < stop, f"scripted draw {value} outside [0, {stop})"
        self.calls.append((stop, value))
        return value


@pytest.fixture(autouse=True)
def _restore_default_random() -> Iterator[None]:
    previous = random_source.get_default_random()
    yield
    random_source.set_default_random(previous)


@pytest.fixture
def scripted() -> type[ScriptedRandom]:
    """Factory for :class:`ScriptedRandom` instances."""
    return ScriptedRandom
