"""Bayesian network model over boolean variables."""

from .cpt import ConditionalTable, UnconditionalProbability, canonicalize_cpt
from .network import BayesianNetwork, variable_values
from .node import BayesianNode

__all__ = [
    "BayesianNode",
    "BayesianNetwork",
    "UnconditionalProbability",
    "ConditionalTable",
    "canonicalize_cpt",
    "variable_values",
]
