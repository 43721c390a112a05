"""Joint distributions over an ordered list of variables, and inference by enumeration."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from ..exceptions import QueryError
from ..logging import get_logger
from .discrete import Distribution
from .events import Event, event_values, extend

logger = get_logger(__name__)


class JointDistribution:
    """Discrete joint distribution keyed by tuples of values.

    Keys are built by projecting an event (mapping or ordered tuple) onto
    ``variables``. The domain of each variable is discovered incrementally
    from the keys that are assigned.

    Attributes:
        variables: Ordered variable names.
        probabilities: Tuple-of-values -> probability table.
    """

    def __init__(self, variables: Sequence[str]):
        self.variables: List[str] = list(variables)
        self.probabilities: Dict[Tuple[Any, ...], float] = {}
        self._domains: Dict[str, List[Any]] = {}

    def __getitem__(self, key: Union[Event, Tuple[Any, ...]]) -> float:
        return self.probabilities.get(event_values(key, self.variables), 0)

    def __setitem__(self, key: Union[Event, Tuple[Any, ...]], probability: float) -> None:
        values = event_values(key, self.variables)
        self.probabilities[values] = probability
        for var, value in zip(self.variables, values):
            domain = self._domains.setdefault(var, [])
            if value not in domain:
                domain.append(value)

    def values(self, var: str) -> List[Any]:
        """Return the values of ``var`` seen so far.

        Raises:
            KeyError: If no entry mentioning ``var`` has been assigned.
        """
        return self._domains[var]

    def __repr__(self) -> str:
        return f"JointDistribution({self.variables!r}, {len(self.probabilities)} entries)"


def enumerate_joint(variables: Sequence[str], evidence: Event, joint: JointDistribution) -> float:
    """Sum the entries of ``joint`` consistent with ``evidence``, marginalizing ``variables``.

    Args:
        variables: Variables not fixed by ``evidence`` that are summed out.
        evidence: Assignment to every other variable of ``joint``.
        joint: The joint distribution.

    Returns:
        The marginal mass.
    """
    if not variables:
        return joint[evidence]
    first, rest = variables[0], variables[1:]
    return sum(enumerate_joint(rest, extend(evidence, first, value), joint) for value in joint.values(first))


def enumerate_joint_ask(query: str, evidence: Mapping[str, Any], joint: JointDistribution) -> Distribution:
    """Return the posterior of ``query`` given ``evidence`` by summing the full joint.

    Raises:
        QueryError: If ``query`` is one of the evidence variables.
    """
    if query in evidence:
        raise QueryError(f"Query variable {query!r} must not appear in the evidence")
    hidden = [var for var in joint.variables if var != query and var not in evidence]
    posterior = Distribution(query)
    for value in joint.values(query):
        posterior[value] = enumerate_joint(hidden, extend(evidence, query, value), joint)
    logger.debug("enumerate_joint_ask(%s): summed over %d hidden variables", query, len(hidden))
    return posterior.normalize()
