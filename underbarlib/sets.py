"""Set and array algorithms for UnderbarLib.

flatten, zip, intersection, difference and sort_by. These carry the
library's trickier semantics: unbounded nesting, multi-sequence arity,
duplicate suppression and a stable numeric sort.
"""

import logging
import math
import numbers
import re
from collections.abc import MutableSequence
from typing import Any, Callable, List, Optional, Sequence, Union

from .config import NaNPosition, get_config
from .core.adapter import get_field, is_sequence, require_sequence
from .core.reduction import reduce
from .core.traversal import each, iter_items
from .exceptions import InvalidArity, InvalidCollection, TypeMismatch
from .predicates import contains, every, filter, reject
from .transforms import map, uniq

logger = logging.getLogger(__name__)


class _Missing:
    """Placeholder for a position that has no element."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def flatten(nested: Any, accumulator: Optional[List[Any]] = None) -> List[Any]:
    """Flatten arbitrarily nested sequences into one list.

    Non-sequence values are appended to accumulator in left-to-right,
    depth-first order. Nesting depth is limited only by memory: an
    explicit stack of iterators is used instead of recursion.

    Args:
        nested: Sequence (possibly containing sequences) to flatten
        accumulator: List to append to; a new list when omitted

    Returns:
        The accumulator

    Raises:
        InvalidCollection: If nested is not a collection, or a sequence
            contains itself
    """
    if accumulator is None:
        accumulator = []

    # Each frame pairs an open iterator with the id of the sequence it walks
    stack = [(iter_items(nested, "flatten"), id(nested))]
    active = {id(nested)}

    while stack:
        for value, _index in stack[-1][0]:
            if is_sequence(value):
                if id(value) in active:
                    raise InvalidCollection(value, "flatten", expected="an acyclic sequence")
                stack.append((iter_items(value, "flatten"), id(value)))
                active.add(id(value))
                break
            accumulator.append(value)
        else:
            _items, finished = stack.pop()
            active.discard(finished)

    return accumulator


def zip(*sequences: Sequence) -> List[List[Any]]:
    """Transpose sequences into rows of positionally matched elements.

    The result is as long as the longest input. Positions past the end
    of a shorter input hold MISSING.

    Example:
        >>> zip(['a', 'b'], [1])
        [['a', 1], ['b', <missing>]]

    Raises:
        InvalidArity: If called with no sequences
        InvalidCollection: If any argument is not a sequence
    """
    if not sequences:
        raise InvalidArity("zip")
    for sequence in sequences:
        require_sequence(sequence, "zip")

    width = len(sequences)
    length = reduce(sequences, lambda longest, sequence: max(longest, len(sequence)), 0)
    rows = [[MISSING] * width for _ in range(length)]

    def place_column(sequence, column, _sequences):
        def place(value, index, _sequence):
            rows[index][column] = value
        each(sequence, place)

    each(sequences, place_column)
    return rows


def intersection(*sequences: Sequence) -> List[Any]:
    """Return the values present in every input sequence.

    Each input is flattened before membership is tested. Values appear
    once, in order of first occurrence across the inputs taken in order.
    Quadratic in the total number of elements.

    Raises:
        InvalidArity: If called with no sequences
        InvalidCollection: If any argument is not a sequence
    """
    if not sequences:
        raise InvalidArity("intersection")
    for sequence in sequences:
        require_sequence(sequence, "intersection")

    members = map(sequences, flatten)
    candidates = uniq(flatten(members))

    def in_every_input(value):
        return every(members, lambda flattened: contains(flattened, value))

    return filter(candidates, in_every_input)


def difference(*sequences: Sequence) -> List[Any]:
    """Return the elements of the first sequence not shared with the rest.

    The remaining sequences are flattened into one pool, the pool is
    intersected with the first sequence, and every element of the first
    sequence found in that intersection is dropped. Order follows the
    first sequence; duplicates in it are kept.

    Raises:
        InvalidArity: If called with no sequences
        InvalidCollection: If any argument is not a sequence
    """
    if not sequences:
        raise InvalidArity("difference")
    first, rest = sequences[0], sequences[1:]
    require_sequence(first, "difference")
    for sequence in rest:
        require_sequence(sequence, "difference")

    shared = intersection(first, flatten(rest))
    logger.debug("difference: first=%r shared=%r", first, shared)
    return reject(first, lambda value: contains(shared, value))


_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_float(value: Any) -> float:
    """Interpret value as a number the way a lenient float parser would.

    Real numbers convert directly (booleans are not numbers). Strings are
    read up to the end of their longest leading decimal literal, so
    " 3.5kg" is 3.5 and "Infinity" is inf. Anything else is NaN.
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, numbers.Real):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        match = _FLOAT_PREFIX.match(value.lstrip())
        if match:
            return float(match.group(0).replace("Infinity", "inf"))
    return math.nan


def _nan_position(value: Union[NaNPosition, str]) -> NaNPosition:
    """Resolve a NaNPosition member or its name/value, ignoring case."""
    if isinstance(value, NaNPosition):
        return value
    if isinstance(value, str):
        try:
            return NaNPosition(value.lower())
        except ValueError:
            pass
    choices = ', '.join(p.value for p in NaNPosition)
    raise TypeMismatch(
        f"sort_by() nan_position must be a NaNPosition or one of {choices}, got {value!r}"
    )


def sort_by(collection: MutableSequence,
            key: Union[str, Callable[[Any], Any]],
            nan_position: Optional[Union[NaNPosition, str]] = None) -> MutableSequence:
    """Sort collection in place, ascending by the numeric value of a key.

    The key is a field name (looked up as a mapping key or an attribute)
    or a function of the element. Key values are read with parse_float().
    Keys that are not numbers sort together after every number, or before
    them with NaNPosition.FIRST. The sort is stable, so equal keys (and
    all NaN keys) keep their input order.

    Args:
        collection: Mutable sequence to sort; it is modified and returned
        key: Field name or key function
        nan_position: Override for the configured NaN placement

    Returns:
        The same collection object, now sorted

    Raises:
        TypeMismatch: If key is neither a string nor callable, or
            nan_position names no NaNPosition
        InvalidCollection: If collection is not a mutable sequence
    """
    if isinstance(key, str):
        field_name = key

        def extract(item):
            return get_field(item, field_name)
    elif callable(key):
        extract = key
    else:
        raise TypeMismatch(
            f"sort_by() key must be a field name or callable, got {type(key).__name__}"
        )

    if not (is_sequence(collection) and isinstance(collection, MutableSequence)):
        raise InvalidCollection(collection, "sort_by", expected="a mutable sequence")

    position = _nan_position(nan_position or get_config().sort.nan_position)
    nan_rank = 0 if position is NaNPosition.FIRST else 1

    def sort_key(item):
        number = parse_float(extract(item))
        if math.isnan(number):
            return (nan_rank, 0.0)
        return (1 - nan_rank, number)

    if isinstance(collection, list):
        collection.sort(key=sort_key)
    else:
        ordered = sorted(collection, key=sort_key)
        for index, value in enumerate(ordered):
            collection[index] = value
    return collection


__all__ = [
    'MISSING',
    'flatten',
    'zip',
    'intersection',
    'difference',
    'parse_float',
    'sort_by',
]
