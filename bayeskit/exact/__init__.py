"""Exact inference: enumeration and variable elimination."""

from .elimination import elimination_ask
from .enumeration import enumerate_all, enumeration_ask
from .factor import Factor, all_events, is_hidden, make_factor, pointwise_product, sum_out

__all__ = [
    "enumeration_ask",
    "enumerate_all",
    "elimination_ask",
    "Factor",
    "all_events",
    "is_hidden",
    "make_factor",
    "pointwise_product",
    "sum_out",
]
