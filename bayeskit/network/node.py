"""Boolean random variable nodes of a Bayesian network."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..distributions.events import event_values
from ..exceptions import ConstructionError
from ..rng import bernoulli
from .cpt import CPTSpec, CPTTable, canonicalize_cpt


def parse_parents(parents: Union[str, Sequence[str], None]) -> Tuple[str, ...]:
    """Accept space-separated names or a sequence of names."""
    if parents is None:
        return ()
    if isinstance(parents, str):
        return tuple(parents.split())
    return tuple(parents)


class BayesianNode:
    """A boolean variable together with its conditional probability table.

    Attributes:
        variable: Variable name.
        parents: Ordered parent names.
        cpt: Table mapping tuples of parent values to P(variable = true).
    """

    def __init__(self, variable: str, parents: Union[str, Sequence[str], None], cpt: CPTSpec):
        """Initialize a node.

        Args:
            variable: Variable name.
            parents: Space-separated parent names, or a sequence of names.
            cpt: A bare probability (no parents) or a mapping from parent
                values to P(true). Single-parent mappings may use bare
                boolean keys.

        Raises:
            ConstructionError: If the CPT is malformed or a parent is repeated.
        """
        if not variable:
            raise ConstructionError("Node variable name must be a non-empty string")
        self.variable = variable
        self.parents: Tuple[str, ...] = parse_parents(parents)
        if len(set(self.parents)) != len(self.parents):
            raise ConstructionError(f"Node {variable!r} lists a parent more than once: {self.parents!r}")
        self.cpt: CPTTable = canonicalize_cpt(variable, self.parents, cpt)

    def probability(self, value: bool, event: Mapping[str, Any]) -> float:
        """Return P(variable = value | parent values in ``event``).

        Raises:
            KeyError: If ``event`` lacks a parent, or the CPT has no row for
                the parent values.
        """
        p_true = self.cpt[event_values(event, self.parents)]
        return p_true if value else 1.0 - p_true

    def sample(self, event: Mapping[str, Any], rng: Optional[np.random.Generator] = None) -> bool:
        """Draw a value for the variable given the parent values in ``event``."""
        return bernoulli(self.probability(True, event), rng)

    def __repr__(self) -> str:
        return f"BayesianNode({self.variable!r}, parents={list(self.parents)!r})"


NodeSpec = Union[BayesianNode, Tuple[str, Union[str, Sequence[str], None], CPTSpec]]


def as_node(spec: NodeSpec) -> BayesianNode:
    """Build a node from a ``(variable, parents, cpt)`` triple, or pass a node through."""
    if isinstance(spec, BayesianNode):
        return spec
    try:
        variable, parents, cpt = spec
    except (TypeError, ValueError) as exc:
        raise ConstructionError(
            f"Node specification must be a (variable, parents, cpt) triple, got {spec!r}"
        ) from exc
    return BayesianNode(variable, parents, cpt)
