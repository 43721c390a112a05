"""Particle filtering for the two-state HMM.

References:
    Russell, S., & Norvig, P. (2010). Artificial Intelligence: A Modern
    Approach (3rd ed.), section 15.5.3.
"""

from typing import Optional

import numpy as np

from ..exceptions import SampleCountError
from ..rng import resolve_rng
from .hmm import N_STATES, HiddenMarkovModel
from .utils import weighted_resample


def particle_filtering(
    ev: bool,
    n_particles: int,
    hmm: HiddenMarkovModel,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """One particle-filter update from a uniform prior.

    The uniform prior is pushed through one transition step, ``n_particles``
    state labels are drawn from the prediction, each is weighted by the
    sensor likelihood of ``ev`` in its state, and the population is resampled
    with replacement.

    Args:
        ev: The boolean observation.
        n_particles: Number of particles N.
        hmm: The model.
        rng: Random number generator. If None, uses the process-wide default.

    Returns:
        Array of shape (N,) of state indices (0 or 1).

    Raises:
        SampleCountError: If ``n_particles`` is negative.
    """
    if n_particles < 0:
        raise SampleCountError(f"{n_particles} is not a valid number of particles")
    rng = resolve_rng(rng)
    if n_particles == 0:
        return np.zeros(0, dtype=int)

    prediction = (np.ones(N_STATES) / N_STATES) @ hmm.transition_model
    particles = np.where(rng.random(n_particles) < prediction[0], 0, 1)
    weights = hmm.sensor_distribution(ev)[particles]
    return weighted_resample(particles, weights, n_particles, rng)
