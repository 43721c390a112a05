"""Bayesian networks over boolean variables."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..exceptions import ConstructionError, CycleError
from ..logging import get_logger
from .node import BayesianNode, NodeSpec, as_node

logger = get_logger(__name__)

BOOLEAN_VALUES: Tuple[bool, bool] = (True, False)


class BayesianNetwork:
    """A DAG of boolean variables, each owning a conditional probability table.

    Nodes are kept in declaration order. Because every parent must already be
    in the network when its child is added, declaration order is always a
    topological order.

    The children of each variable are not stored on the nodes; they are
    derived from the parent lists once, the first time they are requested
    after the last :meth:`add_node`.

    Attributes:
        variables: Variable names in declaration order.
        nodes: Nodes in declaration order.
    """

    def __init__(self, node_specs: Optional[Iterable[NodeSpec]] = None):
        """Initialize a network.

        Args:
            node_specs: Optional ordered ``(variable, parents, cpt)`` triples
                (or ready-made nodes) added with :meth:`add_node`.
        """
        self.variables: List[str] = []
        self.nodes: List[BayesianNode] = []
        self._by_name: Dict[str, BayesianNode] = {}
        self._children: Optional[Dict[str, Tuple[BayesianNode, ...]]] = None
        if node_specs is not None:
            for spec in node_specs:
                self.add_node(spec)
            self.validate_acyclic()

    def add_node(self, spec: NodeSpec) -> BayesianNode:
        """Append a node to the network.

        Args:
            spec: A ``(variable, parents, cpt)`` triple or a :class:`BayesianNode`.

        Returns:
            The added node.

        Raises:
            ConstructionError: If the variable already exists, a parent is not
                yet in the network, or the CPT is malformed.
            CycleError: If the node lists itself as a parent.
        """
        node = as_node(spec)
        if node.variable in self._by_name:
            raise ConstructionError(f"Variable {node.variable!r} already exists in the network")
        if node.variable in node.parents:
            raise CycleError(f"Variable {node.variable!r} cannot be its own parent")
        missing = [parent for parent in node.parents if parent not in self._by_name]
        if missing:
            raise ConstructionError(
                f"Parents {missing!r} of {node.variable!r} must be added before the node"
            )
        self.nodes.append(node)
        self.variables.append(node.variable)
        self._by_name[node.variable] = node
        self._children = None
        logger.debug("Added node %s with parents %s", node.variable, list(node.parents))
        return node

    def variable_node(self, variable: str) -> BayesianNode:
        """Return the node for ``variable``.

        Raises:
            KeyError: If the variable is not in the network.
        """
        try:
            return self._by_name[variable]
        except KeyError:
            raise KeyError(f"No node for variable {variable!r}") from None

    def variable_values(self, variable: str) -> Tuple[bool, bool]:
        """Return the domain of ``variable``; always ``(True, False)``."""
        return BOOLEAN_VALUES

    def children(self, variable: str) -> Tuple[BayesianNode, ...]:
        """Return the nodes that list ``variable`` as a parent, in declaration order."""
        if variable not in self._by_name:
            raise KeyError(f"No node for variable {variable!r}")
        if self._children is None:
            index: Dict[str, List[BayesianNode]] = {name: [] for name in self.variables}
            for node in self.nodes:
                for parent in node.parents:
                    index[parent].append(node)
            self._children = {name: tuple(kids) for name, kids in index.items()}
        return self._children[variable]

    def markov_blanket(self, variable: str) -> Set[str]:
        """Return the parents, children and children's other parents of ``variable``."""
        node = self.variable_node(variable)
        blanket: Set[str] = set(node.parents)
        for child in self.children(variable):
            blanket.add(child.variable)
            blanket.update(child.parents)
        blanket.discard(variable)
        return blanket

    def validate_acyclic(self) -> None:
        """Check that parent links form a DAG.

        Raises:
            CycleError: If a directed cycle is found.
        """
        state: Dict[str, int] = {}  # 1 = on stack, 2 = done

        def visit(name: str, path: List[str]) -> None:
            mark = state.get(name)
            if mark == 2:
                return
            if mark == 1:
                cycle = path[path.index(name):] + [name]
                raise CycleError(f"Directed cycle in network: {' -> '.join(cycle)}")
            state[name] = 1
            for parent in self._by_name[name].parents:
                visit(parent, path + [name])
            state[name] = 2

        for name in self.variables:
            visit(name, [])

    def __contains__(self, variable: str) -> bool:
        return variable in self._by_name

    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        return f"BayesianNetwork({self.variables!r})"


def variable_values(network: BayesianNetwork, variable: str) -> Tuple[bool, bool]:
    """Return the domain of ``variable`` in ``network``; always ``(True, False)``."""
    return network.variable_values(variable)
