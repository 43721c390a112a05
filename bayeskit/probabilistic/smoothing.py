"""Online fixed-lag smoothing for the two-state HMM.

The smoother keeps a forward message for X_{t-d} and a 2x2 matrix B that maps
the all-ones vector to the backward message b_{t-d+1:t}. Each new observation
advances both by one step; B is updated by removing the oldest
transition-sensor product from its left and appending the newest on its right.
"""

from collections import deque
from typing import Deque, Optional

import numpy as np

from ..diagnostics import check_normalized
from ..logging import get_logger
from .hmm import N_STATES, HiddenMarkovModel, forward
from .utils import normalize_vector

logger = get_logger(__name__)


class FixedLagSmoother:
    """Stateful fixed-lag smoother reporting P(X_{t-lag} | e_1..e_t).

    Attributes:
        hmm: The model being smoothed.
        lag: Number of steps the estimate trails the newest observation.
    """

    def __init__(self, hmm: HiddenMarkovModel, lag: int):
        """Initialize the smoother.

        Args:
            hmm: The model.
            lag: Non-negative lag d.

        Raises:
            ValueError: If ``lag`` is negative.
        """
        if lag < 0:
            raise ValueError(f"lag must be >= 0, got {lag}")
        self.hmm = hmm
        self.lag = lag
        self.reset()

    def reset(self) -> None:
        """Forget all observations and return to time step 1."""
        self._t = 1
        self._f = self.hmm.prior.copy()
        self._B = np.eye(N_STATES)
        self._evidence: Deque[bool] = deque()

    @property
    def t(self) -> int:
        """Index of the next observation (1-based)."""
        return self._t

    @property
    def evidence(self) -> tuple:
        """Observations not yet folded into the forward message, oldest first."""
        return tuple(self._evidence)

    def step(self, ev: bool) -> Optional[np.ndarray]:
        """Consume observation e_t.

        Args:
            ev: The new boolean observation.

        Returns:
            The smoothed 2-vector P(X_{t-lag} | e_1..e_t), or None while
            fewer than ``lag + 1`` observations have been seen.

        Raises:
            numpy.linalg.LinAlgError: If the transition matrix or an old
                sensor matrix is singular.
        """
        transition = self.hmm.transition_model
        self._evidence.append(ev)
        sensor_t = np.diag(self.hmm.sensor_distribution(ev))
        if self._t > self.lag:
            oldest = self._evidence.popleft()
            self._f = forward(self.hmm, self._f, oldest)
            sensor_old = np.diag(self.hmm.sensor_distribution(oldest))
            self._B = np.linalg.inv(sensor_old) @ np.linalg.inv(transition) @ self._B @ transition @ sensor_t
        else:
            self._B = self._B @ transition @ sensor_t
            logger.debug("Fixed-lag smoother warming up: %d of %d observations", self._t, self.lag + 1)
        self._t += 1

        if self._t > self.lag + 1:
            result = normalize_vector(self._f * (self._B @ np.ones(N_STATES)))
            check_normalized(result)
            return result
        return None


def fixed_lag_smoothing(ev: bool, smoother: FixedLagSmoother) -> Optional[np.ndarray]:
    """Advance ``smoother`` by one observation; see :meth:`FixedLagSmoother.step`."""
    return smoother.step(ev)
