"""Two-state Hidden Markov Model with boolean evidence.

Provides forward filtering and forward-backward smoothing over a sequence of
boolean observations.

References:
    Russell, S., & Norvig, P. (2010). Artificial Intelligence: A Modern
    Approach (3rd ed.), chapter 15.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from ..diagnostics import check_normalized
from ..exceptions import ConstructionError, ShapeError
from ..rng import resolve_rng
from .utils import normalize_vector

N_STATES = 2


def _as_stochastic(matrix, name: str) -> np.ndarray:
    arr = np.asarray(matrix, dtype=float)
    if arr.shape != (N_STATES, N_STATES):
        raise ShapeError(f"{name} shape {arr.shape} != ({N_STATES}, {N_STATES})")
    if np.any(arr < 0.0) or np.any(arr > 1.0):
        raise ConstructionError(f"{name} entries must lie in [0, 1]")
    if not np.allclose(arr.sum(axis=1), 1.0, atol=1e-9):
        raise ConstructionError(f"Rows of {name} must sum to 1, got {arr.sum(axis=1)}")
    return arr


class HiddenMarkovModel:
    """Hidden Markov Model with two hidden states and boolean evidence.

    Attributes:
        transition_model: Transition matrix, shape (2, 2); row i holds
            P(X_{t+1} | X_t = i).
        sensor_model: Sensor matrix, shape (2, 2); row i holds
            [P(e = true | X = i), P(e = false | X = i)].
        prior: Initial state distribution, shape (2,).
    """

    def __init__(
        self,
        transition_model: Sequence[Sequence[float]],
        sensor_model: Sequence[Sequence[float]],
        prior: Optional[Sequence[float]] = None,
    ):
        """Initialize HMM.

        Args:
            transition_model: Two transition rows.
            sensor_model: Two sensor rows, one per state.
            prior: Initial state probabilities, shape (2,). If None, uniform.

        Raises:
            ShapeError: If a matrix or the prior has the wrong shape.
            ConstructionError: If a row is not a probability distribution.
        """
        self.transition_model = _as_stochastic(transition_model, "transition_model")
        self.sensor_model = _as_stochastic(sensor_model, "sensor_model")

        if prior is not None:
            prior = np.asarray(prior, dtype=float)
            if prior.shape != (N_STATES,):
                raise ShapeError(f"prior shape {prior.shape} != ({N_STATES},)")
            if np.any(prior < 0.0) or prior.sum() <= 0.0:
                raise ConstructionError("prior must be non-negative with positive mass")
            self.prior = prior / np.sum(prior)
        else:
            self.prior = np.ones(N_STATES) / N_STATES

    def sensor_distribution(self, ev: bool) -> np.ndarray:
        """Return P(ev | X = i) for each state i."""
        return self.sensor_model[:, 0] if ev else self.sensor_model[:, 1]

    def sample(self, length: int, rng: Optional[np.random.Generator] = None) -> Tuple[np.ndarray, np.ndarray]:
        """Sample state and evidence sequences from the model.

        X_0 is drawn from the prior and not returned; states X_1..X_T follow the
        transition model and each emits one boolean observation.

        Args:
            length: Sequence length T.
            rng: Random number generator. If None, uses the process-wide default.

        Returns:
            Tuple of (states, evidence), shapes (T,) with int and bool dtype.
        """
        rng = resolve_rng(rng)
        states = np.zeros(length, dtype=int)
        evidence = np.zeros(length, dtype=bool)
        state = rng.choice(N_STATES, p=self.prior)
        for t in range(length):
            state = rng.choice(N_STATES, p=self.transition_model[state, :])
            states[t] = state
            evidence[t] = rng.random() < self.sensor_model[states[t], 0]
        return states, evidence

    def __repr__(self) -> str:
        return (
            f"HiddenMarkovModel(transition_model={self.transition_model.tolist()}, "
            f"sensor_model={self.sensor_model.tolist()}, prior={self.prior.tolist()})"
        )


def sensor_distribution(hmm: HiddenMarkovModel, ev: bool) -> np.ndarray:
    """Return the sensor likelihood vector for the observed boolean ``ev``."""
    return hmm.sensor_distribution(ev)


def forward(hmm: HiddenMarkovModel, fv: np.ndarray, ev: bool) -> np.ndarray:
    """One filtering step: predict with the transition model, then weight by the evidence."""
    prediction = np.asarray(fv, dtype=float) @ hmm.transition_model
    result = normalize_vector(hmm.sensor_distribution(ev) * prediction)
    check_normalized(result)
    return result


def backward(hmm: HiddenMarkovModel, b: np.ndarray, ev: bool = False) -> np.ndarray:
    """One backward step: fold the evidence into ``b`` and map it back one time step.

    With no evidence given, the step assumes ``ev`` is false.
    """
    result = normalize_vector(hmm.transition_model @ (hmm.sensor_distribution(ev) * np.asarray(b, dtype=float)))
    check_normalized(result)
    return result


def forward_filter(
    hmm: HiddenMarkovModel, evidence: Sequence[bool], prior: Optional[np.ndarray] = None
) -> np.ndarray:
    """Run the forward pass over ``evidence``.

    Args:
        hmm: The model.
        evidence: Boolean observations e_1..e_t.
        prior: Distribution of X_0. If None, uses ``hmm.prior``.

    Returns:
        Array of shape (t + 1, 2); row 0 is the prior and row i is
        P(X_i | e_1..e_i).
    """
    t = len(evidence)
    fv = np.zeros((t + 1, N_STATES))
    fv[0, :] = hmm.prior if prior is None else np.asarray(prior, dtype=float)
    for i in range(1, t + 1):
        fv[i, :] = forward(hmm, fv[i - 1, :], evidence[i - 1])
    return fv


def forward_backward(
    hmm: HiddenMarkovModel, evidence: Sequence[bool], prior: Optional[np.ndarray] = None
) -> np.ndarray:
    """Forward-backward algorithm: smoothed state estimates for every time step.

    Args:
        hmm: The model.
        evidence: Boolean observations e_1..e_t.
        prior: Distribution of X_0. If None, uses ``hmm.prior``.

    Returns:
        Array of shape (t + 1, 2); row i is P(X_i | e_1..e_t).
    """
    fv = forward_filter(hmm, evidence, prior)
    t = len(evidence)
    sv = np.zeros((t + 1, N_STATES))
    b = np.ones(N_STATES)
    for i in range(t, -1, -1):
        sv[i, :] = normalize_vector(fv[i, :] * b)
        if i > 0:
            b = backward(hmm, b, evidence[i - 1])
    return sv
