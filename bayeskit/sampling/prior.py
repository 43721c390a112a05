"""Ancestral sampling and rejection sampling."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import numpy as np

from ..distributions import Distribution, consistent_with
from ..logging import get_logger
from ..network import BayesianNetwork
from ..rng import resolve_rng
from ._checks import check_query, check_sample_count

logger = get_logger(__name__)


def prior_sample(network: BayesianNetwork, rng: Optional[np.random.Generator] = None) -> Dict[str, bool]:
    """Draw a full assignment by sampling each node after its parents.

    Declaration order is a topological order, so nodes are sampled in the
    order they were added.

    Args:
        network: The Bayesian network.
        rng: Random number generator. If None, uses the process-wide default.

    Returns:
        Mapping from every variable to a sampled boolean.
    """
    rng = resolve_rng(rng)
    event: Dict[str, bool] = {}
    for node in network.nodes:
        event[node.variable] = node.sample(event, rng)
    return event


def rejection_sampling(
    query: str,
    evidence: Mapping[str, Any],
    network: BayesianNetwork,
    n_samples: int,
    rng: Optional[np.random.Generator] = None,
) -> Distribution:
    """Estimate P(query | evidence) from prior samples that agree with the evidence.

    Args:
        query: Query variable.
        evidence: Observed variable values.
        network: The Bayesian network.
        n_samples: Number of prior samples to draw.
        rng: Random number generator. If None, uses the process-wide default.

    Returns:
        Normalized distribution of the query variable over accepted samples.
        If no sample is accepted, every entry is 0.

    Raises:
        SampleCountError: If ``n_samples`` is negative.
        QueryError: If ``query`` is one of the evidence variables.
    """
    check_sample_count(n_samples)
    check_query(query, evidence)
    rng = resolve_rng(rng)
    counts = {value: 0 for value in network.variable_values(query)}
    for _ in range(n_samples):
        sample = prior_sample(network, rng)
        if consistent_with(sample, evidence):
            counts[sample[query]] += 1
    logger.debug("rejection_sampling(%s): accepted %d of %d samples", query, sum(counts.values()), n_samples)
    return Distribution(query, frequencies=counts)
