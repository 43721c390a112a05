"""Canonical example models used in documentation, demos and tests."""

from .hmms import umbrella_hmm
from .networks import burglary_network, sprinkler_network

__all__ = [
    "burglary_network",
    "sprinkler_network",
    "umbrella_hmm",
]
