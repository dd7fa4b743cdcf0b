"""Traversal primitive for UnderbarLib.

each() is the one iteration primitive: it hands every element of a
sequence, or every value of a mapping, to a visitor together with its
index or key and the collection itself.
"""

from typing import Any, Callable, Hashable, Iterator, Tuple

from .adapter import adapter_for


Visitor = Callable[[Any, Hashable, Any], Any]


def iter_items(collection: Any, operation: str = "each") -> Iterator[Tuple[Any, Hashable]]:
    """Lazily yield (value, index_or_key) pairs of a collection.

    The shape check happens eagerly, so an InvalidCollection is raised
    when iter_items() is called, not when the iterator is first advanced.

    Raises:
        InvalidCollection: If collection is neither a sequence nor a mapping
    """
    adapter = adapter_for(collection, operation)
    return adapter.items(collection)


def each(collection: Any, visitor: Visitor) -> None:
    """Call visitor(value, index_or_key, collection) for every member.

    Sequences are visited in index order; mappings in their iteration
    order. An empty collection results in zero calls.

    Args:
        collection: Sequence or mapping to visit
        visitor: Callback receiving (value, index_or_key, collection)

    Raises:
        InvalidCollection: If collection is neither a sequence nor a mapping

    Example:
        >>> seen = []
        >>> each({'a': 1}, lambda value, key, coll: seen.append((key, value)))
        >>> seen
        [('a', 1)]
    """
    for value, key in iter_items(collection):
        visitor(value, key, collection)
