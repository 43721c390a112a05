"""Tests for the two-state Hidden Markov Model."""

import numpy as np
import pytest

from bayeskit.exceptions import ConstructionError, ShapeError
from bayeskit.models import umbrella_hmm
from bayeskit.probabilistic import (
    HiddenMarkovModel,
    backward,
    forward,
    forward_backward,
    forward_filter,
    sensor_distribution,
)


def test_hmm_construction_defaults_to_uniform_prior():
    hmm = umbrella_hmm()
    np.testing.assert_allclose(hmm.prior, [0.5, 0.5])
    assert hmm.transition_model.shape == (2, 2)


def test_hmm_prior_is_normalized():
    hmm = HiddenMarkovModel([[0.7, 0.3], [0.3, 0.7]], [[0.9, 0.1], [0.2, 0.8]], prior=[2.0, 6.0])
    np.testing.assert_allclose(hmm.prior, [0.25, 0.75])


@pytest.mark.parametrize(
    "transition, sensor, prior, error",
    [
        (np.eye(3), [[0.9, 0.1], [0.2, 0.8]], None, ShapeError),
        ([[0.7, 0.3], [0.3, 0.7]], [0.9, 0.1], None, ShapeError),
        ([[0.7, 0.3], [0.3, 0.7]], [[0.9, 0.1], [0.2, 0.8]], [1.0, 0.0, 0.0], ShapeError),
        ([[0.7, 0.2], [0.3, 0.7]], [[0.9, 0.1], [0.2, 0.8]], None, ConstructionError),
        ([[1.5, -0.5], [0.3, 0.7]], [[0.9, 0.1], [0.2, 0.8]], None, ConstructionError),
        ([[0.7, 0.3], [0.3, 0.7]], [[0.9, 0.1], [0.2, 0.8]], [0.0, 0.0], ConstructionError),
    ],
)
def test_hmm_construction_errors(transition, sensor, prior, error):
    with pytest.raises(error):
        HiddenMarkovModel(transition, sensor, prior=prior)


def test_sensor_distribution_selects_column():
    hmm = umbrella_hmm()
    np.testing.assert_allclose(sensor_distribution(hmm, True), [0.9, 0.2])
    np.testing.assert_allclose(sensor_distribution(hmm, False), [0.1, 0.8])


def test_forward_single_step():
    hmm = umbrella_hmm()
    f1 = forward(hmm, hmm.prior, True)
    np.testing.assert_allclose(f1, [0.8182, 0.1818], atol=1e-4)
    f2 = forward(hmm, f1, True)
    np.testing.assert_allclose(f2, [0.8834, 0.1166], atol=1e-4)


def test_backward_single_step():
    hmm = umbrella_hmm()
    b = backward(hmm, np.ones(2), True)
    np.testing.assert_allclose(b, np.array([0.69, 0.41]) / 1.1, atol=1e-9)
    # Missing evidence is treated as false
    np.testing.assert_allclose(backward(hmm, np.ones(2)), backward(hmm, np.ones(2), False))


def test_forward_filter_shape_and_rows():
    hmm = umbrella_hmm()
    fv = forward_filter(hmm, [True, True, False])
    assert fv.shape == (4, 2)
    np.testing.assert_allclose(fv[0], hmm.prior)
    np.testing.assert_allclose(fv.sum(axis=1), 1.0)


def test_forward_backward_umbrella_reference():
    hmm = umbrella_hmm()
    sv = forward_backward(hmm, [True, True])
    expected = np.array([[0.6533, 0.3467], [0.8834, 0.1166], [0.8834, 0.1166]])
    np.testing.assert_allclose(sv, expected, atol=1e-4)


def test_forward_backward_last_row_matches_filtering():
    hmm = umbrella_hmm()
    evidence = [True, False, True, True, False]
    np.testing.assert_allclose(forward_backward(hmm, evidence)[-1], forward_filter(hmm, evidence)[-1])


def test_forward_backward_empty_evidence_returns_prior():
    hmm = umbrella_hmm()
    sv = forward_backward(hmm, [])
    assert sv.shape == (1, 2)
    np.testing.assert_allclose(sv[0], hmm.prior)


def test_explicit_prior_overrides_model_prior():
    hmm = umbrella_hmm()
    fv = forward_filter(hmm, [True], prior=np.array([1.0, 0.0]))
    np.testing.assert_allclose(fv[0], [1.0, 0.0])
    np.testing.assert_allclose(fv[1], forward(hmm, [1.0, 0.0], True))


def test_hmm_sample_shapes(rng):
    states, evidence = umbrella_hmm().sample(20, rng)
    assert states.shape == (20,)
    assert evidence.shape == (20,)
    assert evidence.dtype == bool
    assert set(np.unique(states)) <= {0, 1}


def test_hmm_sample_with_noiseless_sensor(rng):
    hmm = HiddenMarkovModel([[0.7, 0.3], [0.3, 0.7]], np.eye(2))
    states, evidence = hmm.sample(50, rng)
    np.testing.assert_array_equal(evidence, states == 0)
