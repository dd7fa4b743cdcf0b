"""Function decorators for UnderbarLib.

Each decorator owns a small state object, created per decorated function
and exposed on the wrapper as ``wrapper.state`` for inspection. Nothing
is shared between two wrappers of the same function.
"""

import functools
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Optional, Tuple

from .config import get_config

logger = logging.getLogger(__name__)


@dataclass
class OnceState:
    """Whether the wrapped function has run, and what it returned."""
    called: bool = False
    result: Any = None


@dataclass
class MemoState:
    """Results cached by argument, plus hit/miss counters."""
    cache: Dict[Hashable, Any] = field(default_factory=dict)
    hits: int = 0
    misses: int = 0


@dataclass
class ThrottleState:
    """Time of the last real call and its result."""
    last_called: Optional[float] = None
    result: Any = None


def once(func: Callable) -> Callable:
    """Return a wrapper that calls func at most once.

    Every later call returns the first call's result. If the first call
    raises, nothing is recorded and the next call tries again.
    """
    state = OnceState()

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if not state.called:
            state.result = func(*args, **kwargs)
            state.called = True
        return state.result

    wrapper.state = state
    return wrapper


_KWARGS_MARK = object()


def _memo_key(args: Tuple, kwargs: Dict[str, Any]) -> Hashable:
    # Types are part of the key so 1, 1.0 and True are cached separately
    key = tuple((type(arg), arg) for arg in args)
    if kwargs:
        key += (_KWARGS_MARK,) + tuple(
            (name, type(value), value) for name, value in sorted(kwargs.items())
        )
    return key


def memoize(func: Callable) -> Callable:
    """Return a wrapper that caches func's result for each distinct argument list.

    Calls with unhashable arguments are passed straight through to func
    and not cached. The wrapper exposes ``cache`` and ``cache_clear()``.

    Example:
        >>> square = memoize(lambda n: n * n)
        >>> square(4), square(4), square.state.hits
        (16, 16, 1)
    """
    state = MemoState()

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        key = _memo_key(args, kwargs)
        try:
            if key in state.cache:
                state.hits += 1
                return state.cache[key]
        except TypeError:
            logger.debug("memoize: unhashable arguments for %s, not caching",
                         getattr(func, '__name__', func))
            return func(*args, **kwargs)

        result = func(*args, **kwargs)
        state.cache[key] = result
        state.misses += 1
        return result

    def cache_clear():
        state.cache.clear()
        state.hits = 0
        state.misses = 0

    wrapper.state = state
    wrapper.cache = state.cache
    wrapper.cache_clear = cache_clear
    return wrapper


def delay(func: Callable, wait: float, *args, **kwargs) -> threading.Timer:
    """Call func(*args, **kwargs) after wait milliseconds.

    Returns the started timer; call ``cancel()`` on it to drop the call
    if it hasn't run yet. Negative waits run as soon as possible.
    """
    seconds = max(wait, 0) / 1000.0
    timer = threading.Timer(seconds, func, args=args, kwargs=kwargs)
    timer.daemon = get_config().decorators.daemon_timers
    logger.debug("delay: scheduling %s in %sms",
                 getattr(func, '__name__', func), wait)
    timer.start()
    return timer


def throttle(func: Callable, wait: float,
             clock: Callable[[], float] = time.monotonic) -> Callable:
    """Return a wrapper that calls func at most once per wait milliseconds.

    The first call in a window runs func; calls inside the window return
    that call's result without running func again.

    Args:
        func: Function to rate-limit
        wait: Window length in milliseconds
        clock: Source of the current time in seconds
    """
    state = ThrottleState()
    window = max(wait, 0) / 1000.0

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        now = clock()
        if state.last_called is None or now - state.last_called >= window:
            state.last_called = now
            state.result = func(*args, **kwargs)
        else:
            logger.debug("throttle: suppressed call to %s",
                         getattr(func, '__name__', func))
        return state.result

    wrapper.state = state
    return wrapper


__all__ = [
    'once',
    'memoize',
    'delay',
    'throttle',
    'OnceState',
    'MemoState',
    'ThrottleState',
]
