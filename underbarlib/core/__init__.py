"""Core abstractions for UnderbarLib.

This package contains the traversal and reduction primitives every
other operation is built from.
"""

from .adapter import (
    CollectionAdapter,
    SequenceAdapter,
    MappingAdapter,
    adapter_for,
    is_sequence,
    is_mapping,
)
from .traversal import each, iter_items
from .reduction import reduce

__all__ = [
    "CollectionAdapter",
    "SequenceAdapter",
    "MappingAdapter",
    "adapter_for",
    "is_sequence",
    "is_mapping",
    "each",
    "iter_items",
    "reduce",
]
