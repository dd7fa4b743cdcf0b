"""Object-merging helpers for UnderbarLib.

Both helpers write into a mutable mapping and return it. Sources can be
any collection; a sequence source contributes its indices as keys.
"""

from collections.abc import MutableMapping
from typing import Any

from .core.traversal import each
from .exceptions import InvalidCollection


def _require_target(target: Any, operation: str) -> MutableMapping:
    if not isinstance(target, MutableMapping):
        raise InvalidCollection(target, operation, expected="a mutable mapping")
    return target


def extend(target: MutableMapping, *sources: Any) -> MutableMapping:
    """Copy every key of each source into target.

    Later sources overwrite earlier ones.

    Example:
        >>> extend({'a': 1}, {'b': 2}, {'a': 3})
        {'a': 3, 'b': 2}
    """
    _require_target(target, "extend")

    def copy_into(value, key, _source):
        target[key] = value

    for source in sources:
        each(source, copy_into)
    return target


def defaults(target: MutableMapping, *sources: Any) -> MutableMapping:
    """Copy keys from each source only where target doesn't have them.

    The first source to supply a missing key wins.
    """
    _require_target(target, "defaults")

    def fill(value, key, _source):
        if key not in target:
            target[key] = value

    for source in sources:
        each(source, fill)
    return target


__all__ = [
    'extend',
    'defaults',
]
