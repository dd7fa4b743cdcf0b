"""Reduction primitive for UnderbarLib.

reduce() folds a collection to one value and is the substrate for the
predicate and aggregate operations.
"""

from typing import Any, Callable

from .traversal import each


class _Omitted:
    """Marks a seed argument that was not supplied."""

    def __repr__(self) -> str:
        return "<omitted>"


_OMITTED = _Omitted()

# Seed used when the caller doesn't supply one. Non-numeric folds must
# pass their own seed or the accumulator starts at 0.
DEFAULT_SEED = 0


def reduce(collection: Any, combiner: Callable[[Any, Any], Any], seed: Any = _OMITTED) -> Any:
    """Fold collection left to right with combiner(accumulator, value).

    Args:
        collection: Sequence or mapping to fold (mappings fold their values)
        combiner: Function(accumulator, value) -> new accumulator
        seed: Initial accumulator; defaults to 0 when omitted

    Returns:
        The final accumulator (the seed itself for an empty collection)

    Raises:
        InvalidCollection: If collection is neither a sequence nor a mapping

    Example:
        >>> reduce([1, 2, 3], lambda total, n: total + n)
        6
    """
    accumulator = DEFAULT_SEED if seed is _OMITTED else seed

    def fold(value, _key, _collection):
        nonlocal accumulator
        accumulator = combiner(accumulator, value)

    each(collection, fold)
    return accumulator
