"""Pytest configuration and shared fixtures for bayeskit tests.

This module provides:
- A deterministic numpy RNG fixture
- An autouse fixture that reseeds the library's default random source
"""

import os

import numpy as np
import pytest

from bayeskit.rng import set_default_rng


def _test_seed() -> int:
    return int(os.environ.get("TEST_RNG_SEED", "0"))


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    return np.random.default_rng(_test_seed())


@pytest.fixture(scope="function", autouse=True)
def reset_default_rng() -> None:
    """Auto-use fixture reseeding bayeskit's process-wide generator.

    Code paths that fall back to the default random source are then as
    reproducible as those given an explicit generator.
    """
    set_default_rng(_test_seed())
