"""Predicate algorithms for UnderbarLib.

Searching and truth-testing operations built directly on each() and
reduce(). Membership tests use strict equality: values must have the
same type as well as compare equal, so 1, 1.0 and True are distinct,
also when nested inside sequences and mappings. NaN equals nothing,
itself included.
"""

import math
from typing import Any, Callable, Hashable, List, Optional

from .core.adapter import is_mapping, is_sequence
from .core.reduction import reduce
from .core.traversal import each


Predicate = Callable[[Any], Any]

NOT_FOUND = -1


def strict_equal(a: Any, b: Any) -> bool:
    """Compare without cross-type coercion, element by element for containers."""
    if type(a) is not type(b):
        return False
    if isinstance(a, float) and math.isnan(a):
        return False
    if a is b:
        return True
    if is_sequence(a):
        return len(a) == len(b) and all(strict_equal(x, y) for x, y in zip(a, b))
    if is_mapping(a):
        return (len(a) == len(b)
                and all(key in b and strict_equal(a[key], b[key]) for key in a))
    return a == b


def _truthy(value: Any) -> bool:
    return bool(value)


def index_of(collection: Any, target: Any) -> Hashable:
    """Return the position of the first element strictly equal to target.

    For a mapping the matching key is returned. Returns -1 when absent.

    Raises:
        InvalidCollection: If collection is neither a sequence nor a mapping
    """
    found = NOT_FOUND
    matched = False

    def visit(value, index, _collection):
        nonlocal found, matched
        if not matched and strict_equal(value, target):
            found = index
            matched = True

    each(collection, visit)
    return found


def filter(collection: Any, predicate: Predicate) -> List[Any]:
    """Return a new list of the elements for which predicate is truthy.

    Order follows traversal order. Mappings contribute their values.
    """
    results: List[Any] = []

    def visit(value, _index, _collection):
        if predicate(value):
            results.append(value)

    each(collection, visit)
    return results


def reject(collection: Any, predicate: Predicate) -> List[Any]:
    """Return a new list of the elements for which predicate is falsy."""
    return filter(collection, lambda value: not predicate(value))


def contains(collection: Any, target: Any) -> bool:
    """Check if any element is strictly equal to target."""
    return reduce(
        collection,
        lambda was_found, item: was_found or strict_equal(item, target),
        False,
    )


def every(collection: Any, predicate: Optional[Predicate] = None) -> bool:
    """Check if all elements pass predicate (default: their own truthiness).

    True for an empty collection. The predicate is not called again once
    an element has failed.
    """
    test = predicate or _truthy
    return reduce(
        collection,
        lambda all_passed, item: bool(all_passed and test(item)),
        True,
    )


def some(collection: Any, predicate: Optional[Predicate] = None) -> bool:
    """Check if at least one element passes predicate (default: truthiness).

    False for an empty collection.
    """
    test = predicate or _truthy
    return not every(collection, lambda item: not test(item))


__all__ = [
    'strict_equal',
    'index_of',
    'filter',
    'reject',
    'contains',
    'every',
    'some',
    'NOT_FOUND',
]
