"""Exact inference by variable elimination."""

from __future__ import annotations

from typing import Any, List, Mapping

from ..distributions import Distribution
from ..exceptions import QueryError
from ..logging import get_logger
from ..network import BayesianNetwork
from .factor import Factor, is_hidden, make_factor, pointwise_product, sum_out

logger = get_logger(__name__)


def elimination_ask(query: str, evidence: Mapping[str, Any], network: BayesianNetwork) -> Distribution:
    """Return P(query | evidence) by variable elimination.

    Variables are visited in reverse declaration order. Each hidden variable
    is summed out as soon as its own factor has been added.

    Raises:
        QueryError: If ``query`` is one of the evidence variables.
        KeyError: If ``query`` is not in the network.
    """
    if query in evidence:
        raise QueryError(f"Query variable {query!r} must not appear in the evidence")
    network.variable_node(query)
    factors: List[Factor] = []
    for var in reversed(network.variables):
        factors.append(make_factor(var, evidence, network))
        if is_hidden(var, query, evidence):
            factors = sum_out(var, factors, network)
            logger.debug(
                "Summed out %s; %d factors remain (largest has %d entries)",
                var,
                len(factors),
                max(len(factor) for factor in factors),
            )
    return pointwise_product(factors, network).normalize()
