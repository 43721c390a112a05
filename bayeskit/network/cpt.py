"""Conditional probability tables for boolean variables.

A CPT may be written in three literal forms:

- a bare probability, for a node without parents (``0.001``);
- a mapping keyed by bare booleans, for a node with a single parent
  (``{True: 0.9, False: 0.05}``);
- a mapping keyed by boolean tuples, one component per parent
  (``{(True, False): 0.94, ...}``).

All of them are wrapped in :class:`UnconditionalProbability` or
:class:`ConditionalTable` and normalized into one table keyed by
fixed-arity boolean tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Dict, Mapping, Sequence, Tuple, Union

import numpy as np

from ..exceptions import ConstructionError

CPTKey = Tuple[bool, ...]
CPTTable = Dict[CPTKey, float]


@dataclass(frozen=True)
class UnconditionalProbability:
    """P(X = true) for a node with no parents."""

    p_true: float


@dataclass(frozen=True)
class ConditionalTable:
    """P(X = true | parents) keyed by parent values."""

    table: Mapping[object, float]


CPTSpec = Union[float, Mapping[object, float], UnconditionalProbability, ConditionalTable]


def _is_bool(value: object) -> bool:
    return isinstance(value, (bool, np.bool_))


def as_cpt_form(cpt: CPTSpec) -> Union[UnconditionalProbability, ConditionalTable]:
    """Wrap a CPT literal in its tagged form.

    Raises:
        ConstructionError: If ``cpt`` is neither a real number nor a mapping.
    """
    if isinstance(cpt, (UnconditionalProbability, ConditionalTable)):
        return cpt
    if isinstance(cpt, Mapping):
        return ConditionalTable(cpt)
    if isinstance(cpt, Real) and not _is_bool(cpt):
        return UnconditionalProbability(float(cpt))
    raise ConstructionError(
        f"CPT must be a probability or a mapping of parent values, got {type(cpt).__name__}"
    )


def canonicalize_cpt(variable: str, parents: Sequence[str], cpt: CPTSpec) -> CPTTable:
    """Validate a CPT literal and return its boolean-tuple keyed table.

    Args:
        variable: Name of the node, used in error messages.
        parents: Ordered parent names of the node.
        cpt: CPT in any of the accepted literal forms.

    Returns:
        Table mapping tuples of parent values to P(variable = true).

    Raises:
        ConstructionError: On key arity mismatch, non-boolean key components,
            or a probability outside [0, 1].
    """
    form = as_cpt_form(cpt)
    if isinstance(form, UnconditionalProbability):
        raw: Dict[object, float] = {(): form.p_true}
    else:
        raw = dict(form.table)
        # single-parent shorthand: {True: p, False: q}
        if raw and all(_is_bool(key) for key in raw):
            raw = {(key,): value for key, value in raw.items()}

    table: CPTTable = {}
    for key, value in raw.items():
        if not isinstance(key, tuple) or len(key) != len(parents):
            raise ConstructionError(
                f"CPT key {key!r} of {variable!r} does not match parents {list(parents)!r}"
            )
        if not all(_is_bool(component) for component in key):
            raise ConstructionError(f"CPT key {key!r} of {variable!r} must contain only booleans")
        if not isinstance(value, Real) or _is_bool(value) or not 0.0 <= float(value) <= 1.0:
            raise ConstructionError(
                f"CPT value {value!r} of {variable!r} at {key!r} is not a valid probability"
            )
        table[tuple(bool(component) for component in key)] = float(value)
    return table
