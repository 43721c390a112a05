"""Factor algebra for variable elimination.

Factors are dense tables over a subset of boolean variables. Pointwise
products and sum-outs enumerate the full boolean cross-product of their
variable set, so every table holds ``2 ** len(variables)`` entries.
"""

from __future__ import annotations

import itertools
from functools import reduce
from typing import Any, Dict, Iterator, List, Mapping, Sequence, Tuple

from ..distributions import Distribution, event_values, extend
from ..exceptions import FactorShapeError
from ..network import BayesianNetwork


class Factor:
    """A table over ``variables`` mapping tuples of their values to a number.

    Attributes:
        variables: Ordered variable names indexing the table.
        cpt: Mapping from value tuples (ordered like ``variables``) to mass.
    """

    def __init__(self, variables: Sequence[str], cpt: Mapping[Tuple[Any, ...], float]):
        self.variables: List[str] = list(variables)
        self.cpt: Dict[Tuple[Any, ...], float] = dict(cpt)

    def probability(self, event: Mapping[str, Any]) -> float:
        """Look up the entry for the values ``event`` assigns to this factor's variables."""
        return self.cpt[event_values(event, self.variables)]

    def pointwise_product(self, other: "Factor", network: BayesianNetwork) -> "Factor":
        """Multiply two factors over the union of their variables."""
        variables = self.variables + [var for var in other.variables if var not in self.variables]
        cpt = {
            event_values(event, variables): self.probability(event) * other.probability(event)
            for event in all_events(variables, network, {})
        }
        return Factor(variables, cpt)

    def sum_out(self, var: str, network: BayesianNetwork) -> "Factor":
        """Marginalize ``var`` out of this factor."""
        variables = [name for name in self.variables if name != var]
        cpt = {
            event_values(event, variables): sum(
                self.probability(extend(event, var, value)) for value in network.variable_values(var)
            )
            for event in all_events(variables, network, {})
        }
        return Factor(variables, cpt)

    def normalize(self) -> Distribution:
        """Convert a single-variable factor into a normalized distribution.

        Raises:
            FactorShapeError: If the factor does not span exactly one variable.
        """
        if len(self.variables) != 1:
            raise FactorShapeError(
                f"Only a factor over one variable can be normalized, got {self.variables!r}"
            )
        return Distribution(
            self.variables[0],
            frequencies={key[0]: value for key, value in self.cpt.items()},
        )

    def __len__(self) -> int:
        return len(self.cpt)

    def __repr__(self) -> str:
        return f"Factor({self.variables!r}, {len(self.cpt)} entries)"


def all_events(
    variables: Sequence[str], network: BayesianNetwork, event: Mapping[str, Any]
) -> Iterator[Dict[str, Any]]:
    """Yield every extension of ``event`` with a full assignment to ``variables``."""
    domains = [network.variable_values(var) for var in variables]
    for values in itertools.product(*domains):
        extended = dict(event)
        extended.update(zip(variables, values))
        yield extended


def is_hidden(var: str, query: str, evidence: Mapping[str, Any]) -> bool:
    """A variable is hidden if it is neither the query nor observed."""
    return var != query and var not in evidence


def make_factor(var: str, evidence: Mapping[str, Any], network: BayesianNetwork) -> Factor:
    """Build the factor for ``var``'s CPT restricted by ``evidence``.

    The factor spans ``var`` and its parents, minus any that are observed.
    """
    node = network.variable_node(var)
    variables = [name for name in (var,) + node.parents if name not in evidence]
    cpt = {
        event_values(event, variables): node.probability(event[var], event)
        for event in all_events(variables, network, evidence)
    }
    return Factor(variables, cpt)


def pointwise_product(factors: Sequence[Factor], network: BayesianNetwork) -> Factor:
    """Multiply a non-empty sequence of factors together."""
    return reduce(lambda f, g: f.pointwise_product(g, network), factors)


def sum_out(var: str, factors: Sequence[Factor], network: BayesianNetwork) -> List[Factor]:
    """Eliminate ``var``: multiply the factors mentioning it and sum it out.

    Returns:
        The factors that do not mention ``var``, followed by the reduced factor.
    """
    result: List[Factor] = []
    mentioning: List[Factor] = []
    for factor in factors:
        (mentioning if var in factor.variables else result).append(factor)
    result.append(pointwise_product(mentioning, network).sum_out(var, network))
    return result
