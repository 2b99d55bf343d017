"""Construction-time checks for producer and config options."""

import math
import numbers
from typing import Any

from .exceptions import ConfigurationError


def require_int(name: str, value: Any) -> int:
    """Return ``value`` if it is an integer, otherwise raise ConfigurationError."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    return int(value)


def require_non_negative_int(name: str, value: Any) -> int:
    """Return ``value`` if it is an integer >= 0."""
    value = require_int(name, value)
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return value


def require_non_negative_number(name: str, value: Any) -> float:
    """Return ``value`` as a float if it is a finite real number >= 0."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigurationError(f"{name} must be finite, got {value}")
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative, got {value}")
    return float(value)
