"""Diagnostics and debugging utilities for bayeskit."""

from .core import (
    assert_normalized,
    is_normalized,
    probability_mass,
)
from .debug_mode import (
    check_normalized,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "probability_mass",
    "is_normalized",
    "assert_normalized",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "check_normalized",
]
