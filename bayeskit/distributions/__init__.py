"""Discrete and joint probability distributions."""

from .discrete import Distribution, show_approximation
from .events import consistent_with, event_values, extend
from .joint import JointDistribution, enumerate_joint, enumerate_joint_ask

__all__ = [
    "Distribution",
    "JointDistribution",
    "show_approximation",
    "event_values",
    "extend",
    "consistent_with",
    "enumerate_joint",
    "enumerate_joint_ask",
]
