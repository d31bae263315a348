"""Typed accessors for loosely-typed dictionaries.

Decoded JSON, configuration blobs and similar payloads rarely promise
the type stored under a key.  Each accessor here reads one key and
returns a value of the requested type, falling back to a fixed default
when the key is absent, the stored value is ``None``, or the value
cannot be coerced.  No accessor raises for such input.

Coercion table
--------------
================  ==========================================  =========
Accessor          Accepted values                             Default
================  ==========================================  =========
bool_for_key      bool, real numbers (``!= 0``), flag strings  ``False``
int_for_key       bool, real numbers, numeric-prefix strings   ``0``
long_for_key      same as ``int_for_key``, 64-bit range        ``0``
float_for_key     bool, real numbers, numeric-prefix strings   ``0.0``
double_for_key    same as ``float_for_key``                    ``0.0``
string_for_key    str, int/float rendered as text              ``None``
list_for_key      list, tuple                                  ``None``
dict_for_key      any Mapping                                  ``None``
number_for_key    any real number (bool included)              ``None``
================  ==========================================  =========

Strings are read like C's ``strtol``/``strtod``: leading whitespace is
skipped and the longest numeric prefix is used, so ``"42px"`` reads as
``42``.  Integer results saturate at the bounds of their width.
"""

from __future__ import annotations

import math
import numbers
import re
import struct
from collections.abc import Hashable, Mapping
from typing import Any, Final

from collext.utils.logging import get_logger

_log = get_logger("dicts")

INT32_MIN: Final = -(2**31)
INT32_MAX: Final = 2**31 - 1
INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1

_INT_PREFIX: Final = re.compile(r"\s*([+-]?)0*(\d+)")
# Digit strings longer than this are beyond every supported width.
_MAX_INT_DIGITS: Final = 20
_FLOAT_PREFIX: Final = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_TRUE_FLAG: Final = re.compile(r"\s*[+-]?0*[YyTt1-9]")


# ---------------------------------------------------------------------------
# Coercion helpers (pure)
# ---------------------------------------------------------------------------

def _lookup(mapping: Mapping[Any, Any] | None, key: Hashable) -> Any:
    """Return the value under *key*, or ``None`` when absent."""
    if mapping is None:
        return None
    return mapping.get(key)


def _fallback(key: Hashable, value: Any, accessor: str) -> None:
    if value is not None:
        _log.debug(
            "%s: value under %r has type %s; using default",
            accessor,
            key,
            type(value).__name__,
        )


def _saturate(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def _to_integer(value: Any) -> int | None:
    """Integer interpretation of *value*, or ``None`` if it has none."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if not match:
            return None
        sign, digits = match.groups()
        if len(digits) > _MAX_INT_DIGITS:
            return INT64_MIN - 1 if sign == "-" else INT64_MAX + 1
        return int(sign + digits)
    return None


def _to_real(value: Any) -> float | None:
    """Floating-point interpretation of *value*, or ``None``."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, numbers.Real):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return None
        return float(match.group(1))
    return None


def _narrow_to_single(value: float) -> float:
    """Round *value* to the nearest IEEE-754 single-precision float."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


# ---------------------------------------------------------------------------
# Primitive accessors
# ---------------------------------------------------------------------------

def bool_for_key(mapping: Mapping[Any, Any] | None, key: Hashable) -> bool:
    """Return the boolean stored under *key*, defaulting to ``False``.

    Numbers are true when non-zero; NaN is not a truth value and gives
    the default.  Strings are true when, after whitespace, an optional
    sign and leading zeros, they start with ``Y``, ``T`` (any case) or a
    digit ``1``–``9``.
    """
    value = _lookup(mapping, key)
    if isinstance(value, (bool, numbers.Real)):
        if value != value:  # NaN
            _fallback(key, value, "bool_for_key")
            return False
        return bool(value)
    if isinstance(value, str):
        return _TRUE_FLAG.match(value) is not None
    _fallback(key, value, "bool_for_key")
    return False


def int_for_key(mapping: Mapping[Any, Any] | None, key: Hashable) -> int:
    """Return the 32-bit integer stored under *key*, defaulting to ``0``."""
    value = _lookup(mapping, key)
    result = _to_integer(value)
    if result is None:
        _fallback(key, value, "int_for_key")
        return 0
    return _saturate(result, INT32_MIN, INT32_MAX)


def long_for_key(mapping: Mapping[Any, Any] | None, key: Hashable) -> int:
    """Return the 64-bit integer stored under *key*, defaulting to ``0``."""
    value = _lookup(mapping, key)
    result = _to_integer(value)
    if result is None:
        _fallback(key, value, "long_for_key")
        return 0
    return _saturate(result, INT64_MIN, INT64_MAX)


def float_for_key(mapping: Mapping[Any, Any] | None, key: Hashable) -> float:
    """Return the value under *key* narrowed to single precision."""
    value = _lookup(mapping, key)
    result = _to_real(value)
    if result is None:
        _fallback(key, value, "float_for_key")
        return 0.0
    return _narrow_to_single(result)


def double_for_key(mapping: Mapping[Any, Any] | None, key: Hashable) -> float:
    """Return the value under *key* as a ``float``, defaulting to ``0.0``."""
    value = _lookup(mapping, key)
    result = _to_real(value)
    if result is None:
        _fallback(key, value, "double_for_key")
        return 0.0
    return result


# ---------------------------------------------------------------------------
# Object accessors
# ---------------------------------------------------------------------------

def string_for_key(mapping: Mapping[Any, Any] | None, key: Hashable) -> str | None:
    """Return the string under *key*.

    Integers and floats are rendered with ``str()``; booleans and every
    other type give ``None``.
    """
    value = _lookup(mapping, key)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    _fallback(key, value, "string_for_key")
    return None


def list_for_key(
    mapping: Mapping[Any, Any] | None,
    key: Hashable,
) -> list[Any] | tuple[Any, ...] | None:
    """Return the list or tuple stored under *key*, else ``None``."""
    value = _lookup(mapping, key)
    if isinstance(value, (list, tuple)):
        return value
    _fallback(key, value, "list_for_key")
    return None


def dict_for_key(
    mapping: Mapping[Any, Any] | None,
    key: Hashable,
) -> Mapping[Any, Any] | None:
    """Return the mapping stored under *key*, else ``None``."""
    value = _lookup(mapping, key)
    if isinstance(value, Mapping):
        return value
    _fallback(key, value, "dict_for_key")
    return None


def number_for_key(
    mapping: Mapping[Any, Any] | None,
    key: Hashable,
) -> numbers.Real | None:
    """Return the real number stored under *key*, else ``None``."""
    value = _lookup(mapping, key)
    if isinstance(value, numbers.Real):
        return value
    _fallback(key, value, "number_for_key")
    return None
