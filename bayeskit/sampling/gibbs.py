"""Gibbs sampling by resampling variables from their Markov blankets."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import numpy as np

from ..distributions import Distribution, extend
from ..logging import get_logger
from ..network import BayesianNetwork
from ..rng import bernoulli, resolve_rng
from ._checks import check_query, check_sample_count

logger = get_logger(__name__)


def markov_blanket_sample(var: str, event: Mapping[str, Any], network: BayesianNetwork) -> float:
    """Return P(var = true | Markov blanket of var) under ``event``.

    For each candidate value x, the local term P(x | parents) is multiplied
    by P(child value | child's parents) for every child of ``var``, with
    ``var`` set to x. The two products are then normalized.

    Note:
        This returns the probability, not a drawn boolean. Callers that need
        a sample must draw it themselves (see :func:`gibbs_ask`).
    """
    node = network.variable_node(var)
    children = network.children(var)
    posterior = Distribution(var)
    for value in network.variable_values(var):
        candidate = extend(event, var, value)
        mass = node.probability(value, event)
        for child in children:
            mass *= child.probability(candidate[child.variable], candidate)
        posterior[value] = mass
    return posterior.normalize()[True]


def gibbs_ask(
    query: str,
    evidence: Mapping[str, Any],
    network: BayesianNetwork,
    n_samples: int,
    rng: Optional[np.random.Generator] = None,
) -> Distribution:
    """Estimate P(query | evidence) with Gibbs sampling.

    Non-evidence variables start at uniformly random booleans. Each of the
    ``n_samples`` sweeps resamples every non-evidence variable in declaration
    order from its Markov blanket, tallying the query's value after each
    resample.

    Raises:
        SampleCountError: If ``n_samples`` is negative.
        QueryError: If ``query`` is one of the evidence variables.
    """
    check_sample_count(n_samples)
    check_query(query, evidence)
    rng = resolve_rng(rng)
    counts = {value: 0 for value in network.variable_values(query)}
    hidden = [var for var in network.variables if var not in evidence]
    state: Dict[str, Any] = dict(evidence)
    for var in hidden:
        state[var] = bool(rng.integers(2))
    for _ in range(n_samples):
        for var in hidden:
            state[var] = bernoulli(markov_blanket_sample(var, state, network), rng)
            counts[state[query]] += 1
    logger.debug("gibbs_ask(%s): %d sweeps over %d hidden variables", query, n_samples, len(hidden))
    return Distribution(query, frequencies=counts)
