"""Tests for the HMM particle filter."""

import numpy as np
import pytest

from bayeskit.exceptions import SampleCountError
from bayeskit.models import umbrella_hmm
from bayeskit.probabilistic import HiddenMarkovModel, particle_filtering


def test_particles_are_state_indices(rng):
    particles = particle_filtering(True, 100, umbrella_hmm(), rng)
    assert particles.shape == (100,)
    assert set(np.unique(particles)) <= {0, 1}


def test_particle_frequencies_match_one_step_filter(rng):
    n = 10_000
    particles = particle_filtering(True, n, umbrella_hmm(), rng)
    # Uniform prediction weighted by [0.9, 0.2]
    assert np.mean(particles == 0) == pytest.approx(0.9 / 1.1, abs=0.05)

    particles = particle_filtering(False, n, umbrella_hmm(), rng)
    assert np.mean(particles == 0) == pytest.approx(0.1 / 0.9, abs=0.05)


def test_noiseless_sensor_collapses_particles(rng):
    hmm = HiddenMarkovModel([[0.7, 0.3], [0.3, 0.7]], np.eye(2))
    particles = particle_filtering(False, 500, hmm, rng)
    assert np.all(particles == 1)


def test_zero_particles(rng):
    particles = particle_filtering(True, 0, umbrella_hmm(), rng)
    assert particles.shape == (0,)


def test_negative_particle_count_is_rejected(rng):
    with pytest.raises(SampleCountError):
        particle_filtering(True, -1, umbrella_hmm(), rng)
