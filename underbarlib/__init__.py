"""UnderbarLib - Collection and Function Utilities.

UnderbarLib provides polymorphic operations over sequences and mappings,
built on a single traversal primitive, plus a handful of function
decorators.

    from underbarlib import each, reduce, flatten, intersection, sort_by

Every operation is eager and returns a new list, except sort_by, which
sorts its input in place.
"""

__version__ = "0.1.0"

from .core import each, iter_items, reduce, is_sequence, is_mapping
from .predicates import index_of, filter, reject, contains, every, some
from .transforms import map, uniq, shuffle
from .sets import MISSING, flatten, zip, intersection, difference, sort_by, parse_float
from .accessors import first, last, pluck, invoke
from .objects import extend, defaults
from .decorators import once, memoize, delay, throttle
from .config import (
    NaNPosition,
    SortConfig,
    DecoratorConfig,
    UnderbarConfig,
    get_config,
    set_config,
    reset_config,
)
from .exceptions import (
    UnderbarError,
    InvalidCollection,
    InvalidArity,
    TypeMismatch,
    ConfigurationError,
)
from .logger import setup_logger

__all__ = [
    "__version__",
    # Core
    "each",
    "iter_items",
    "reduce",
    "is_sequence",
    "is_mapping",
    # Predicates
    "index_of",
    "filter",
    "reject",
    "contains",
    "every",
    "some",
    # Transforms
    "map",
    "uniq",
    "shuffle",
    # Set algorithms
    "MISSING",
    "flatten",
    "zip",
    "intersection",
    "difference",
    "sort_by",
    "parse_float",
    # Accessors and merging
    "first",
    "last",
    "pluck",
    "invoke",
    "extend",
    "defaults",
    # Decorators
    "once",
    "memoize",
    "delay",
    "throttle",
    # Config
    "NaNPosition",
    "SortConfig",
    "DecoratorConfig",
    "UnderbarConfig",
    "get_config",
    "set_config",
    "reset_config",
    # Errors
    "UnderbarError",
    "InvalidCollection",
    "InvalidArity",
    "TypeMismatch",
    "ConfigurationError",
    # Logging
    "setup_logger",
]
