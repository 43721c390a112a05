"""Likelihood weighting."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np

from ..distributions import Distribution
from ..logging import get_logger
from ..network import BayesianNetwork
from ..rng import resolve_rng
from ._checks import check_query, check_sample_count

logger = get_logger(__name__)


def weighted_sample(
    network: BayesianNetwork,
    evidence: Mapping[str, Any],
    rng: Optional[np.random.Generator] = None,
) -> Tuple[Dict[str, Any], float]:
    """Sample the non-evidence variables and weight by the evidence likelihood.

    Args:
        network: The Bayesian network.
        evidence: Observed variable values; they are fixed in the sample.
        rng: Random number generator. If None, uses the process-wide default.

    Returns:
        Tuple of (sample, weight) where weight is the product of
        P(e_i | parents) over the evidence variables.
    """
    rng = resolve_rng(rng)
    weight = 1.0
    event: Dict[str, Any] = dict(evidence)
    for node in network.nodes:
        if node.variable in evidence:
            weight *= node.probability(evidence[node.variable], event)
        else:
            event[node.variable] = node.sample(event, rng)
    return event, weight


def likelihood_weighting(
    query: str,
    evidence: Mapping[str, Any],
    network: BayesianNetwork,
    n_samples: int,
    rng: Optional[np.random.Generator] = None,
) -> Distribution:
    """Estimate P(query | evidence) by accumulating sample weights per query value.

    Raises:
        SampleCountError: If ``n_samples`` is negative.
        QueryError: If ``query`` is one of the evidence variables.
    """
    check_sample_count(n_samples)
    check_query(query, evidence)
    rng = resolve_rng(rng)
    weights = {value: 0.0 for value in network.variable_values(query)}
    for _ in range(n_samples):
        sample, weight = weighted_sample(network, evidence, rng)
        weights[sample[query]] += weight
    logger.debug("likelihood_weighting(%s): total weight %.6g over %d samples", query, sum(weights.values()), n_samples)
    return Distribution(query, frequencies=weights)
