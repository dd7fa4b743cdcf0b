"""Sample collections for tests.

Every builder returns fresh objects, so tests may mutate what they get
(sort_by sorts in place) without affecting each other.
"""

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class Record:
    """Attribute-style element for field lookups."""
    name: str
    age: Any


def people() -> List[Dict[str, Any]]:
    """Mapping-style records with numeric and numeric-string ages."""
    return [
        {'name': 'curly', 'age': 50},
        {'name': 'moe', 'age': '30'},
        {'name': 'larry', 'age': 40.5},
    ]


def sample_mapping() -> Dict[str, int]:
    """Small mapping with string keys."""
    return {'a': 1, 'b': 2, 'c': 3}


def nested_sequence(depth: int, leaf: Any = 'leaf') -> List[Any]:
    """Build [[...[leaf]...]] nested depth levels deep, without recursion."""
    nested: List[Any] = [leaf]
    for _ in range(depth - 1):
        nested = [nested]
    return nested
