"""Exact inference by enumeration over a Bayesian network."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..distributions import Distribution, extend
from ..exceptions import QueryError
from ..network import BayesianNetwork


def enumerate_all(variables: Sequence[str], event: Mapping[str, Any], network: BayesianNetwork) -> float:
    """Sum the product of CPT entries over all completions of ``event``.

    ``variables`` must be in topological order so that every parent is
    assigned before its child is looked up.
    """
    if not variables:
        return 1.0
    first, rest = variables[0], variables[1:]
    node = network.variable_node(first)
    if first in event:
        return node.probability(event[first], event) * enumerate_all(rest, event, network)
    return sum(
        node.probability(value, event) * enumerate_all(rest, extend(event, first, value), network)
        for value in network.variable_values(first)
    )


def enumeration_ask(query: str, evidence: Mapping[str, Any], network: BayesianNetwork) -> Distribution:
    """Return P(query | evidence) by full enumeration.

    Raises:
        QueryError: If ``query`` is one of the evidence variables.
        KeyError: If ``query`` is not in the network.
    """
    if query in evidence:
        raise QueryError(f"Query variable {query!r} must not appear in the evidence")
    network.variable_node(query)
    posterior = Distribution(query)
    for value in network.variable_values(query):
        posterior[value] = enumerate_all(network.variables, extend(evidence, query, value), network)
    return posterior.normalize()
