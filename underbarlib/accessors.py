"""Accessor helpers for UnderbarLib."""

from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from .core.adapter import get_field, require_sequence
from .exceptions import TypeMismatch
from .transforms import map


def first(sequence: Sequence, n: Optional[int] = None) -> Any:
    """Return the first element, or a new list of the first n elements.

    An empty sequence yields None when n is omitted.
    """
    require_sequence(sequence, "first")
    if n is None:
        return sequence[0] if len(sequence) else None
    return list(sequence[:max(n, 0)])


def last(sequence: Sequence, n: Optional[int] = None) -> Any:
    """Return the last element, or a new list of the last n elements.

    last(seq, 0) is []. The sequence is never modified.
    """
    require_sequence(sequence, "last")
    if n is None:
        return sequence[-1] if len(sequence) else None
    if n <= 0:
        return []
    return list(sequence[-n:])


def pluck(collection: Any, name: str) -> List[Any]:
    """Return the named field of every element (None where absent)."""
    return map(collection, lambda value: get_field(value, name))


def invoke(collection: Any,
           method: Union[str, Callable[..., Any]],
           args: Iterable[Any] = ()) -> List[Any]:
    """Call a method on every element and return the results.

    method is either the name of a method looked up on each element, or
    a function called as method(element, *args).

    Raises:
        TypeMismatch: If method is neither a string nor callable
        AttributeError: If an element has no method of the given name
    """
    args = tuple(args)

    if isinstance(method, str):
        method_name = method
        return map(collection, lambda value: getattr(value, method_name)(*args))
    if callable(method):
        return map(collection, lambda value: method(value, *args))
    raise TypeMismatch(
        f"invoke() method must be a name or callable, got {type(method).__name__}"
    )


__all__ = [
    'first',
    'last',
    'pluck',
    'invoke',
]
