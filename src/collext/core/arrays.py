"""Array helpers — construction, inspection, formatting and sampling.

Every function takes a native Python sequence (or set) and returns a
**new** list; inputs are never mutated.  Not-found conditions return
``None`` rather than raising.

Randomized helpers draw from a :class:`~collext.core.protocols.RandomSource`.
Pass ``rng`` for reproducible results; otherwise the shared default
source from :mod:`collext.core.random_source` is used.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence, Set, Sized
from typing import Any, TypeVar

from collext.core import random_source
from collext.core.protocols import RandomSource
from collext.exceptions import InvalidCountError
from collext.utils.logging import get_logger

T = TypeVar("T")

_log = get_logger("arrays")


# ---------------------------------------------------------------------------
# Construction & tests
# ---------------------------------------------------------------------------

def array_with_set(items: Set[T]) -> list[T]:
    """Return a new list with every element of *items*, in set order."""
    return list(items)


def has_elements(seq: Sized | None) -> bool:
    """Return ``True`` if *seq* is not ``None`` and holds any element."""
    return seq is not None and len(seq) > 0


def first_passing_test(
    seq: Sequence[T] | None,
    predicate: Callable[[T], bool],
) -> T | None:
    """Return the first element for which *predicate* is true.

    The predicate is not evaluated past the first match.  Returns
    ``None`` when nothing matches or *seq* is empty.
    """
    if seq is None:
        return None
    return next((item for item in seq if predicate(item)), None)


# ---------------------------------------------------------------------------
# Printing
# ---------------------------------------------------------------------------

def description_with(
    seq: Sequence[Any],
    start: str,
    element_format: str,
    last_element_format: str,
    end: str,
) -> str:
    """Render *seq* with caller-supplied fragments.

    *element_format* is applied to every element but the last and
    *last_element_format* to the last one; each must contain exactly one
    ``%s`` placeholder.  *start* and *end* wrap the result once::

        >>> description_with(["a", "b", "c"], "(", "%s,", "%s", ")")
        '(a,b,c)'
    """
    parts: list[str] = [start]
    last_index = len(seq) - 1
    for index, item in enumerate(seq):
        template = last_element_format if index == last_index else element_format
        # One-tuple so tuple elements fill the single placeholder.
        parts.append(template % (item,))
    parts.append(end)
    return "".join(parts)


# ---------------------------------------------------------------------------
# Order manipulation
# ---------------------------------------------------------------------------

def reversed_copy(seq: Sequence[T]) -> list[T]:
    """Return a new list with the elements of *seq* in reverse order."""
    return list(reversed(seq))


def _value_for_key_path(item: Any, key: str) -> Any:
    """Resolve a dotted *key* path on *item*.

    Mappings are indexed, everything else is read by attribute.  A
    missing segment raises ``KeyError`` / ``AttributeError`` unchanged.
    """
    value = item
    for segment in key.split("."):
        if isinstance(value, Mapping):
            value = value[segment]
        else:
            value = getattr(value, segment)
    return value


def sorted_by_key(
    seq: Sequence[T],
    key: str,
    ascending: bool = True,
) -> list[T]:
    """Return *seq* sorted by the value each element holds under *key*.

    *key* names an attribute, a mapping key, or a dotted path through
    both (``"owner.name"``).  The sort is stable in either direction.
    Every element must provide *key*; that is the caller's
    responsibility.
    """
    return sorted(
        seq,
        key=lambda item: _value_for_key_path(item, key),
        reverse=not ascending,
    )


# ---------------------------------------------------------------------------
# Randomizing
# ---------------------------------------------------------------------------

def _check_count(count: int) -> None:
    if count < 0:
        raise InvalidCountError(
            f"Element count must not be negative (got {count}).",
            hint="Pass 0 to keep the sequence unchanged.",
        )


def _random_positions(length: int, count: int, rng: RandomSource) -> set[int]:
    """Pick *count* distinct positions out of ``range(length)``.

    Partial Fisher–Yates: only the first *count* slots are shuffled.
    """
    positions = list(range(length))
    for i in range(count):
        j = i + rng.randrange(length - i)
        positions[i], positions[j] = positions[j], positions[i]
    return set(positions[:count])


def with_random_elements_removed(
    seq: Sequence[T],
    count: int,
    rng: RandomSource | None = None,
) -> list[T]:
    """Return *seq* with *count* randomly chosen elements removed.

    The surviving elements keep their relative order.  When *count* is
    equal to or larger than ``len(seq)`` the result is empty.

    Raises
    ------
    InvalidCountError
        If *count* is negative.
    """
    _check_count(count)
    length = len(seq)
    if count >= length:
        return []
    if count == 0:
        return list(seq)
    removed = _random_positions(length, count, random_source.resolve(rng))
    _log.debug("removing positions %s of %d", sorted(removed), length)
    return [item for index, item in enumerate(seq) if index not in removed]


def with_random_elements_chosen(
    seq: Sequence[T],
    count: int,
    rng: RandomSource | None = None,
) -> list[T]:
    """Return *count* randomly chosen elements of *seq*.

    Elements are chosen without replacement and keep their relative
    order.  When *count* is equal to or larger than ``len(seq)`` a copy
    of *seq* is returned.

    Raises
    ------
    InvalidCountError
        If *count* is negative.
    """
    _check_count(count)
    length = len(seq)
    if count >= length:
        return list(seq)
    chosen = _random_positions(length, count, random_source.resolve(rng))
    _log.debug("choosing positions %s of %d", sorted(chosen), length)
    return [item for index, item in enumerate(seq) if index in chosen]


def with_randomized_order(
    seq: Sequence[T],
    rng: RandomSource | None = None,
) -> list[T]:
    """Return a uniformly random permutation of *seq* (Fisher–Yates)."""
    source = random_source.resolve(rng)
    result = list(seq)
    for i in range(len(result) - 1, 0, -1):
        j = source.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def random_object(
    seq: Sequence[T],
    rng: RandomSource | None = None,
) -> T | None:
    """Return a uniformly chosen element, or ``None`` if *seq* is empty."""
    if not seq:
        return None
    return seq[random_source.resolve(rng).randrange(len(seq))]
