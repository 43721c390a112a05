"""Helpers for events: partial assignments of values to variable names."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence, Tuple, Union

from ..exceptions import ShapeError

Event = Mapping[str, Any]


def event_values(event: Union[Event, Tuple[Any, ...]], variables: Sequence[str]) -> Tuple[Any, ...]:
    """Project an event onto an ordered list of variables.

    Args:
        event: Either a mapping from variable name to value, or a tuple that is
            already ordered like ``variables``.
        variables: Variable order of the resulting key.

    Returns:
        Tuple of values, one per entry of ``variables``.

    Raises:
        ShapeError: If ``event`` is a tuple whose length differs from ``variables``.
        KeyError: If ``event`` is a mapping missing one of ``variables``.
    """
    if isinstance(event, tuple):
        if len(event) != len(variables):
            raise ShapeError(
                f"Event {event!r} has length {len(event)} but variables "
                f"{list(variables)!r} have length {len(variables)}"
            )
        return event
    return tuple(event[var] for var in variables)


def extend(event: Event, var: str, value: Any) -> Dict[str, Any]:
    """Return a copy of ``event`` with ``var`` set to ``value``."""
    extended = dict(event)
    extended[var] = value
    return extended


def consistent_with(event: Event, evidence: Event) -> bool:
    """Return True if ``event`` agrees with ``evidence`` on every shared variable."""
    return all(evidence.get(var, value) == value for var, value in event.items())
