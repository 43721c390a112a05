"""Temporal models and particle methods.

This module provides:
- A two-state Hidden Markov Model with forward filtering, forward-backward
  smoothing and online fixed-lag smoothing
- Particle filtering for the HMM
- Monte Carlo localization on an occupancy grid
- Shared normalization and weighted resampling helpers
"""

from .hmm import (
    HiddenMarkovModel,
    backward,
    forward,
    forward_backward,
    forward_filter,
    sensor_distribution,
)
from .localization import (
    KinematicState,
    LocalizationMap,
    MotionModel,
    SensorModel,
    monte_carlo_localization,
    ray_cast,
    sensor_direction,
)
from .particle import particle_filtering
from .smoothing import FixedLagSmoother, fixed_lag_smoothing
from .utils import effective_sample_size, normalize_vector, systematic_resample, weighted_resample

__all__ = [
    "HiddenMarkovModel",
    "sensor_distribution",
    "forward",
    "backward",
    "forward_filter",
    "forward_backward",
    "FixedLagSmoother",
    "fixed_lag_smoothing",
    "particle_filtering",
    "KinematicState",
    "LocalizationMap",
    "MotionModel",
    "SensorModel",
    "ray_cast",
    "sensor_direction",
    "monte_carlo_localization",
    "normalize_vector",
    "weighted_resample",
    "systematic_resample",
    "effective_sample_size",
]
