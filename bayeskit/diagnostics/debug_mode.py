"""Debug switch for the normalization checks run inside inference routines.

With debug mode off (the default), results are returned unchecked. With it
on, every posterior Distribution, HMM message and smoothed vector is passed
through :func:`check_normalized` before it is returned.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

from .core import ProbabilityLike, assert_normalized

_DEBUG_ENV_VAR = "BAYESKIT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(_DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return True if normalization checks are active.

    The initial value comes from ``BAYESKIT_DEBUG`` (``1``, ``true``,
    ``yes`` or ``on``, case-insensitive).
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn normalization checks on or off for the whole process."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous setting on exit.

    Parameters
    ----------
    enabled:
        Debug mode inside the block.

    Example
    -------
    >>> from bayeskit import burglary_network, elimination_ask
    >>> with debug_context(True):
    ...     posterior = elimination_ask("Burglary", {"JohnCalls": True}, burglary_network())
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def check_normalized(probs: ProbabilityLike, atol: float = 1e-9) -> None:
    """
    Run :func:`assert_normalized` on ``probs`` if debug mode is on.

    Parameters
    ----------
    probs:
        A value -> probability mapping or a 1D probability vector.
    atol:
        Absolute tolerance for |mass - 1|.

    Raises
    ------
    ValueError
        In debug mode, if ``probs`` does not sum to 1 within ``atol``.
    """
    if _debug_enabled:
        assert_normalized(probs, atol=atol)
