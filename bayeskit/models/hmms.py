"""Canonical textbook hidden Markov models."""

from __future__ import annotations

from ..probabilistic import HiddenMarkovModel


def umbrella_hmm() -> HiddenMarkovModel:
    """
    Construct the rain/umbrella model.

    State 0 is "rain", state 1 is "no rain"; the evidence is whether the
    director carries an umbrella. The prior is uniform.

    Returns
    -------
    HiddenMarkovModel
        A fresh model instance.
    """
    return HiddenMarkovModel(
        transition_model=[[0.7, 0.3], [0.3, 0.7]],
        sensor_model=[[0.9, 0.1], [0.2, 0.8]],
    )
