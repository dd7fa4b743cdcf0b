"""Error taxonomy for UnderbarLib.

All errors are raised synchronously at the point of detection. Errors
raised by caller-supplied callbacks (visitors, predicates, key
extractors) are never wrapped and propagate unchanged.
"""


class UnderbarError(Exception):
    """Base class for every error raised by UnderbarLib itself."""
    pass


class InvalidCollection(UnderbarError, TypeError):
    """Raised when an argument is neither a Sequence nor a Mapping,
    or is the wrong shape for the operation (e.g. sorting a tuple in place).
    """

    def __init__(self, obj, operation: str = "each", expected: str = "a sequence or mapping"):
        self.obj = obj
        self.operation = operation
        super().__init__(
            f"{operation}() expected {expected}, got {type(obj).__name__}"
        )


class InvalidArity(UnderbarError, TypeError):
    """Raised when a variadic algorithm receives too few sequences."""

    def __init__(self, operation: str, minimum: int = 1, received: int = 0):
        self.operation = operation
        self.minimum = minimum
        self.received = received
        super().__init__(
            f"{operation}() requires at least {minimum} sequence(s), got {received}"
        )


class TypeMismatch(UnderbarError, TypeError):
    """Raised when a key or method argument has an unsupported type."""
    pass


class ConfigurationError(UnderbarError, ValueError):
    """Raised when a configuration fails validation."""
    pass


__all__ = [
    'UnderbarError',
    'InvalidCollection',
    'InvalidArity',
    'TypeMismatch',
    'ConfigurationError',
]
