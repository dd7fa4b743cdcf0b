"""Configuration system for UnderbarLib.

This module defines the few knobs the library exposes: how sort_by
orders keys that are not numbers, how delayed calls are scheduled,
and the default log level.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .exceptions import ConfigurationError


LOG_LEVEL_ENV = "UNDERBAR_LOG_LEVEL"
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class NaNPosition(Enum):
    """Where sort_by places elements whose key is not a number."""
    FIRST = "first"     # Before every numeric key
    LAST = "last"       # After every numeric key (default)


@dataclass
class SortConfig:
    """Configuration for sort_by."""

    nan_position: NaNPosition = NaNPosition.LAST


@dataclass
class DecoratorConfig:
    """Configuration for the timed decorators (delay, throttle)."""

    daemon_timers: bool = True  # Delayed calls don't keep the interpreter alive


def _default_log_level() -> Optional[str]:
    return os.getenv(LOG_LEVEL_ENV)


@dataclass
class UnderbarConfig:
    """Complete library configuration.

    Operations read the active configuration through get_config();
    per-call keyword arguments take precedence over it.
    """

    sort: SortConfig = field(default_factory=SortConfig)
    decorators: DecoratorConfig = field(default_factory=DecoratorConfig)
    log_level: Optional[str] = field(default_factory=_default_log_level)

    @classmethod
    def nan_first(cls) -> 'UnderbarConfig':
        """Create config that sorts not-a-number keys ahead of numbers."""
        return cls(sort=SortConfig(nan_position=NaNPosition.FIRST))

    @classmethod
    def debug(cls) -> 'UnderbarConfig':
        """Create config with debug logging enabled."""
        return cls(log_level="DEBUG")

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.sort.nan_position, NaNPosition):
            errors.append(
                f"sort.nan_position must be a NaNPosition, got {self.sort.nan_position!r}"
            )

        if self.log_level is not None and self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(_VALID_LOG_LEVELS)}, got {self.log_level!r}"
            )

        return errors


_active_config = UnderbarConfig()


def get_config() -> UnderbarConfig:
    """Return the active configuration."""
    return _active_config


def set_config(config: UnderbarConfig) -> UnderbarConfig:
    """Replace the active configuration.

    Raises:
        ConfigurationError: If the configuration does not validate
    """
    global _active_config

    errors = config.validate()
    if errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

    previous = _active_config
    _active_config = config
    return previous


def reset_config() -> None:
    """Restore the default configuration."""
    global _active_config
    _active_config = UnderbarConfig()


__all__ = [
    'NaNPosition',
    'SortConfig',
    'DecoratorConfig',
    'UnderbarConfig',
    'get_config',
    'set_config',
    'reset_config',
    'LOG_LEVEL_ENV',
]
