"""Collection helpers comparing elements by value through an explicit predicate."""

import operator
from collections.abc import Callable, Collection, Iterable, Mapping
from typing import Any

Eq = Callable[[Any, Any], bool]


def _match(a, b, eq: Eq) -> bool:
    if a is None or b is None:
        return a is b

    return eq(a, b)


def contains(items: Iterable, item, *, eq: Eq = operator.eq) -> bool:
    """
    Whether `items` holds an element equal to `item` under `eq`.

    `None` only matches `None`; `eq` is never called with it.
    """
    return any(_match(x, item, eq) for x in items)


def are_equal(first: Collection, second: Collection, *, eq: Eq = operator.eq) -> bool:
    """Same size, and every element of each side is contained in the other."""
    if len(first) != len(second):
        return False

    return all(contains(second, x, eq=eq) for x in first) and all(
        contains(first, x, eq=eq) for x in second
    )


def get_keys(mapping: Mapping) -> set:
    return set(mapping.keys())
