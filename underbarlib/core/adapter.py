"""CollectionAdapter abstraction for UnderbarLib.

An adapter knows HOW to walk one collection shape. Every algorithm in the
library reaches the underlying collection only through an adapter, so
sequences and mappings behave the same everywhere.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Hashable, Iterator, Tuple

from ..exceptions import InvalidCollection


# Text and binary types are sequences to Python but atoms to this library
_ATOMIC_SEQUENCES = (str, bytes, bytearray)


def is_sequence(obj: Any) -> bool:
    """Check if obj is an ordered, indexable collection of elements."""
    return isinstance(obj, Sequence) and not isinstance(obj, _ATOMIC_SEQUENCES)


def is_mapping(obj: Any) -> bool:
    """Check if obj is a key/value collection."""
    return isinstance(obj, Mapping)


class CollectionAdapter(ABC):
    """Abstract adapter for visiting the members of one collection shape.

    Adapters are stateless; the module-level instances below are shared.
    """

    shape = "collection"

    @abstractmethod
    def items(self, collection: Any) -> Iterator[Tuple[Any, Hashable]]:
        """Yield (value, index_or_key) for every member of collection.

        Implementations must visit each member exactly once and must not
        modify the collection.
        """
        pass

    def size(self, collection: Any) -> int:
        """Number of members the adapter will visit."""
        return len(collection)


class SequenceAdapter(CollectionAdapter):
    """Visits a sequence in index order."""

    shape = "sequence"

    def items(self, collection: Sequence) -> Iterator[Tuple[Any, int]]:
        for index in range(len(collection)):
            yield collection[index], index


class MappingAdapter(CollectionAdapter):
    """Visits a mapping in its own iteration order.

    Keys are snapshotted before the first visit so a visitor that adds
    keys to the mapping doesn't break iteration.
    """

    shape = "mapping"

    def items(self, collection: Mapping) -> Iterator[Tuple[Any, Hashable]]:
        for key in list(collection):
            yield collection[key], key


SEQUENCE_ADAPTER = SequenceAdapter()
MAPPING_ADAPTER = MappingAdapter()


def adapter_for(collection: Any, operation: str = "each") -> CollectionAdapter:
    """Select the adapter for a collection.

    This is the single place where the library branches on collection shape.

    Args:
        collection: Sequence or mapping to adapt
        operation: Name of the calling operation, used in error messages

    Returns:
        CollectionAdapter instance

    Raises:
        InvalidCollection: If collection is neither a sequence nor a mapping
    """
    if is_sequence(collection):
        return SEQUENCE_ADAPTER
    if is_mapping(collection):
        return MAPPING_ADAPTER
    raise InvalidCollection(collection, operation)


def get_field(obj: Any, name: str, default: Any = None) -> Any:
    """Look up a named field: a key on mappings, an attribute otherwise."""
    if is_mapping(obj):
        return obj.get(name, default)
    return getattr(obj, name, default)


def require_sequence(obj: Any, operation: str) -> Sequence:
    """Return obj unchanged if it is a sequence, else raise InvalidCollection."""
    if not is_sequence(obj):
        raise InvalidCollection(obj, operation, expected="a sequence")
    return obj
