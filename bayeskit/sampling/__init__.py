"""Approximate inference in Bayesian networks by Monte Carlo sampling."""

from .gibbs import gibbs_ask, markov_blanket_sample
from .likelihood import likelihood_weighting, weighted_sample
from .prior import prior_sample, rejection_sampling

__all__ = [
    "prior_sample",
    "rejection_sampling",
    "weighted_sample",
    "likelihood_weighting",
    "markov_blanket_sample",
    "gibbs_ask",
]
