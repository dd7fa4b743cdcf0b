"""Transform algorithms for UnderbarLib.

Element-wise projection and duplicate removal. Every function returns a
newly allocated list and leaves its input untouched.
"""

import random
from typing import Any, Callable, List, Optional

from .core.adapter import require_sequence
from .core.traversal import each
from .predicates import NOT_FOUND, index_of


def map(collection: Any, projector: Callable[[Any], Any]) -> List[Any]:
    """Return a new list of projector(value) for every element.

    The result has the same length and order as the input. Mappings
    contribute their values.
    """
    results: List[Any] = []
    each(collection, lambda value, _index, _collection: results.append(projector(value)))
    return results


def uniq(collection: Any) -> List[Any]:
    """Return each distinct value once, in order of first occurrence.

    Distinctness is strict equality, checked against the result built so
    far. This is O(n^2) and meant for small inputs; it works for
    unhashable values where a set-based approach would not.
    """
    results: List[Any] = []

    def visit(value, _index, _collection):
        if index_of(results, value) == NOT_FOUND:
            results.append(value)

    each(collection, visit)
    return results


def shuffle(sequence: Any, rng: Optional[random.Random] = None) -> List[Any]:
    """Return a new list holding the elements of sequence in random order.

    Uses a Fisher-Yates shuffle, so every permutation is equally likely.

    Args:
        sequence: Sequence to shuffle (not modified)
        rng: Optional random.Random instance for reproducible results

    Raises:
        InvalidCollection: If sequence is not a sequence
    """
    require_sequence(sequence, "shuffle")
    rng = rng or random

    results = map(sequence, lambda value: value)
    for i in range(len(results) - 1, 0, -1):
        j = rng.randint(0, i)
        results[i], results[j] = results[j], results[i]
    return results


__all__ = [
    'map',
    'uniq',
    'shuffle',
]
