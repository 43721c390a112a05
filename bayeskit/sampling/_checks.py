"""Argument checks shared by the sampling routines."""

from __future__ import annotations

from typing import Any, Mapping

from ..exceptions import QueryError, SampleCountError


def check_sample_count(n_samples: int) -> None:
    if n_samples < 0:
        raise SampleCountError(f"{n_samples} is not a valid number of samples")


def check_query(query: str, evidence: Mapping[str, Any]) -> None:
    if query in evidence:
        raise QueryError(f"Query variable {query!r} must not appear in the evidence")
