"""Tests for debug mode and normalization diagnostics."""

import numpy as np
import pytest

from bayeskit.diagnostics import (
    assert_normalized,
    check_normalized,
    debug_context,
    is_debug_enabled,
    is_normalized,
    probability_mass,
    set_debug_enabled,
)
from bayeskit.diagnostics.debug_mode import _flag_from_env
from bayeskit.distributions import Distribution


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        assert not is_debug_enabled()

        set_debug_enabled(True)
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_probability_mass_of_mapping_and_vector() -> None:
    assert probability_mass({True: 0.25, False: 0.5}) == pytest.approx(0.75)
    assert probability_mass(np.array([0.1, 0.2, 0.7])) == pytest.approx(1.0)
    with pytest.raises(ValueError):
        probability_mass(np.ones((2, 2)))


def test_is_normalized() -> None:
    assert is_normalized([0.3, 0.7])
    assert is_normalized({"a": 1.0})
    assert not is_normalized([0.3, 0.6])
    assert not is_normalized([1.5, -0.5])
    assert not is_normalized([np.nan, 1.0])


def test_assert_normalized_raises() -> None:
    assert_normalized(np.array([0.5, 0.5]))
    with pytest.raises(ValueError, match="not normalized"):
        assert_normalized(np.array([0.5, 0.6]))


def test_debug_mode_checks_normalized_results() -> None:
    """With debug enabled, normalize() verifies its own output."""
    with debug_context(True):
        dist = Distribution("X", frequencies={True: 2, False: 6})
    assert dist[True] == pytest.approx(0.25)


def test_check_normalized_only_raises_in_debug_mode() -> None:
    unnormalized = np.array([0.5, 0.6])
    with debug_context(False):
        check_normalized(unnormalized)
    with debug_context(True):
        check_normalized(np.array([0.5, 0.5]))
        with pytest.raises(ValueError, match="not normalized"):
            check_normalized(unnormalized)


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), (" yes ", True), ("on", True), ("0", False), ("off", False), ("", False)],
)
def test_debug_flag_from_environment(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("BAYESKIT_DEBUG", raw)
    assert _flag_from_env("BAYESKIT_DEBUG") is expected


def test_debug_flag_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BAYESKIT_DEBUG", raising=False)
    assert _flag_from_env("BAYESKIT_DEBUG") is False


def test_debug_mode_checks_hmm_messages() -> None:
    """HMM steps pass their normalized output through the debug check."""
    from bayeskit import forward, forward_backward, umbrella_hmm

    hmm = umbrella_hmm()
    with debug_context(True):
        f1 = forward(hmm, hmm.prior, True)
        sv = forward_backward(hmm, [True, False])
    np.testing.assert_allclose(f1.sum(), 1.0)
    np.testing.assert_allclose(sv.sum(axis=1), 1.0)
