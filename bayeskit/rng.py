"""Process-wide random source used when callers do not inject a generator.

Every sampling routine in bayeskit takes an optional ``rng`` argument of type
``numpy.random.Generator``. When it is omitted, :func:`resolve_rng` hands out
the generator managed here. The default generator is created lazily and is
seeded from the ``BAYESKIT_SEED`` environment variable when it is set.
"""

from __future__ import annotations

import os
from typing import Optional, Union

import numpy as np

_SEED_ENV_VAR = "BAYESKIT_SEED"
_default_rng: Optional[np.random.Generator] = None


def _seed_from_env() -> Optional[int]:
    raw = os.getenv(_SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{_SEED_ENV_VAR} must be an integer, got {raw!r}") from exc


def get_default_rng() -> np.random.Generator:
    """
    Return the process-wide default generator, creating it on first use.

    Returns
    -------
    numpy.random.Generator
        The shared generator. Seeded from ``BAYESKIT_SEED`` if set,
        otherwise from OS entropy.
    """
    global _default_rng
    if _default_rng is None:
        _default_rng = np.random.default_rng(_seed_from_env())
    return _default_rng


def set_default_rng(seed: Union[int, np.random.Generator, None] = None) -> np.random.Generator:
    """
    Replace the process-wide default generator.

    Parameters
    ----------
    seed:
        An integer seed, an existing generator to adopt, or None for a
        freshly entropy-seeded generator.

    Returns
    -------
    numpy.random.Generator
        The new default generator.
    """
    global _default_rng
    if isinstance(seed, np.random.Generator):
        _default_rng = seed
    else:
        _default_rng = np.random.default_rng(seed)
    return _default_rng


def resolve_rng(rng: Optional[np.random.Generator] = None) -> np.random.Generator:
    """Return ``rng`` if given, else the process-wide default generator."""
    if rng is None:
        return get_default_rng()
    return rng


def bernoulli(p: float, rng: Optional[np.random.Generator] = None) -> bool:
    """Draw True with probability ``p``."""
    return bool(resolve_rng(rng).random() < p)
