"""Core layer — pure helpers over native collections and datetimes.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* Inputs are never mutated; producers return new objects.
"""

from collext.core import dates
from collext.core.arrays import (
    array_with_set,
    description_with,
    first_passing_test,
    has_elements,
    random_object,
    reversed_copy,
    sorted_by_key,
    with_random_elements_chosen,
    with_random_elements_removed,
    with_randomized_order,
)
from collext.core.dicts import (
    bool_for_key,
    dict_for_key,
    double_for_key,
    float_for_key,
    int_for_key,
    list_for_key,
    long_for_key,
    number_for_key,
    string_for_key,
)
from collext.core.models import DateInformation
from collext.core.protocols import RandomSource
from collext.core.random_source import (
    get_default_random,
    seed_default_random,
    set_default_random,
)

__all__: list[str] = [
    "DateInformation",
    "RandomSource",
    "array_with_set",
    "bool_for_key",
    "dates",
    "description_with",
    "dict_for_key",
    "double_for_key",
    "first_passing_test",
    "float_for_key",
    "get_default_random",
    "has_elements",
    "int_for_key",
    "list_for_key",
    "long_for_key",
    "number_for_key",
    "random_object",
    "reversed_copy",
    "seed_default_random",
    "set_default_random",
    "sorted_by_key",
    "string_for_key",
    "with_random_elements_chosen",
    "with_random_elements_removed",
    "with_randomized_order",
]
