"""Numerical utilities shared by the HMM, particle filter and localization code.

Provides vector normalization, weighted resampling with replacement and the
effective sample size of a weight vector.
"""

from typing import Optional, Sequence, TypeVar, Union

import numpy as np

from ..rng import resolve_rng

T = TypeVar("T")


def normalize_vector(v: np.ndarray) -> np.ndarray:
    """Scale a non-negative vector so that it sums to 1.

    Args:
        v: Vector of non-negative masses, shape (n,).

    Returns:
        Normalized copy of ``v`` as a float array.

    Raises:
        ValueError: If the entries do not have a positive total.

    Examples:
        >>> normalize_vector(np.array([1.0, 3.0]))
        array([0.25, 0.75])
    """
    v = np.asarray(v, dtype=float)
    total = np.sum(v)
    if not total > 0:
        raise ValueError(f"Cannot normalize a vector with total mass {total}")
    return v / total


def systematic_resample(weights: np.ndarray, n: int, rng: np.random.Generator) -> np.ndarray:
    """Systematic resampling of ``n`` indices from weights.

    Deterministic given the RNG state: a single uniform offset, then ``n``
    evenly spaced pointers into the cumulative weights.

    Args:
        weights: Non-negative weights, shape (m,).
        n: Number of indices to draw.
        rng: Random number generator.

    Returns:
        Array of indices, shape (n,), where index i appears approximately
        weights[i] * n times.
    """
    weights = normalize_vector(weights)
    cumsum = np.cumsum(weights)
    u = (rng.random() + np.arange(n)) / n
    indices = np.searchsorted(cumsum, u, side="left")
    # Round-off can leave cumsum[-1] marginally below 1
    return np.clip(indices, 0, len(weights) - 1)


def weighted_resample(
    items: Union[Sequence[T], np.ndarray],
    weights: Sequence[float],
    n: int,
    rng: Optional[np.random.Generator] = None,
    method: str = "multinomial",
) -> Union[list, np.ndarray]:
    """Draw ``n`` items with replacement, with probability proportional to weight.

    Args:
        items: Population to draw from.
        weights: Non-negative weight per item; need not be normalized.
        n: Number of draws.
        rng: Random number generator. If None, uses the process-wide default.
        method: ``"multinomial"`` for independent draws, or ``"systematic"``
            for low-variance systematic resampling.

    Returns:
        A numpy array if ``items`` is one, otherwise a list.

    Raises:
        ValueError: If lengths differ, the weights sum to zero, or
            ``method`` is unknown.
    """
    rng = resolve_rng(rng)
    if len(items) != len(weights):
        raise ValueError(f"Got {len(items)} items but {len(weights)} weights")
    p = normalize_vector(np.asarray(weights, dtype=float))
    if method == "multinomial":
        indices = rng.choice(len(p), size=n, replace=True, p=p)
    elif method == "systematic":
        indices = systematic_resample(p, n, rng)
    else:
        raise ValueError(f"Unknown resampling method {method!r}")
    if isinstance(items, np.ndarray):
        return items[indices]
    return [items[i] for i in indices]


def effective_sample_size(weights: np.ndarray) -> float:
    """Compute effective sample size (ESS) from weights.

    ESS = 1 / sum(w^2) once weights are normalized. Lower ESS indicates
    that a few particles carry most of the mass.

    Examples:
        >>> effective_sample_size(np.array([1.0, 1.0, 1.0, 1.0]))
        4.0
    """
    weights = normalize_vector(weights)
    return float(1.0 / np.sum(weights**2))
