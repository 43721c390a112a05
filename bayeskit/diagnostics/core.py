"""Normalization checks for probability vectors and tables."""

from __future__ import annotations

from typing import Mapping, Sequence, Union

import numpy as np

ProbabilityLike = Union[Mapping[object, float], Sequence[float], np.ndarray]


def probability_mass(probs: ProbabilityLike) -> float:
    """
    Return the total mass of a probability vector or value->probability mapping.

    Parameters
    ----------
    probs:
        A mapping (its values are summed) or a 1D array-like.

    Returns
    -------
    float
        Sum of the entries.

    Raises
    ------
    ValueError
        If an array-like input is not 1D.
    """
    if isinstance(probs, Mapping):
        return float(sum(probs.values()))
    arr = np.asarray(probs, dtype=float)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1D probability vector, got shape {arr.shape}")
    return float(arr.sum())


def is_normalized(probs: ProbabilityLike, atol: float = 1e-9) -> bool:
    """
    Check whether entries are non-negative and sum to 1 within ``atol``.

    Parameters
    ----------
    probs:
        A mapping or 1D array-like of probabilities.
    atol:
        Absolute tolerance for |mass - 1|.

    Returns
    -------
    bool
        True if the input is a valid normalized distribution.
    """
    values = list(probs.values()) if isinstance(probs, Mapping) else probs
    arr = np.asarray(values, dtype=float)
    if arr.size and (not np.all(np.isfinite(arr)) or np.any(arr < 0.0)):
        return False
    return abs(probability_mass(probs) - 1.0) <= atol


def assert_normalized(probs: ProbabilityLike, atol: float = 1e-9) -> None:
    """
    Assert that a probability vector or table sums to ~1.

    Parameters
    ----------
    probs:
        A mapping or 1D array-like of probabilities.
    atol:
        Absolute tolerance for |mass - 1|.

    Raises
    ------
    ValueError
        If the input is not normalized within the tolerance.
    """
    if not is_normalized(probs, atol=atol):
        raise ValueError(
            f"Probabilities are not normalized within tolerance {atol}. "
            f"Total mass found: {probability_mass(probs)}"
        )
