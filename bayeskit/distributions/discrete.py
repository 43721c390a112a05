"""Discrete probability distribution over the values of one variable."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Mapping, Optional

from ..diagnostics import check_normalized

NORMALIZE_EPSILON = 1e-9


class Distribution:
    """Mapping from a variable's values to probability mass.

    Lookups of values that were never assigned return 0 rather than raising.
    Entries need not sum to 1 until :meth:`normalize` is called.

    Attributes:
        variable_name: Name of the variable this distribution describes.
        probabilities: Underlying value -> mass table.
        values: Distinct values assigned so far, in first-seen order.
    """

    def __init__(
        self,
        variable_name: str = "?",
        frequencies: Optional[Mapping[Any, float]] = None,
    ):
        """Initialize a distribution.

        Args:
            variable_name: Name of the described variable.
            frequencies: Optional raw value -> count/weight table. When given,
                the entries are copied in and the result is normalized.
        """
        self.variable_name = variable_name
        self.probabilities: Dict[Any, float] = {}
        self.values: List[Any] = []
        if frequencies is not None:
            for value, mass in frequencies.items():
                self[value] = float(mass)
            self.normalize()

    def __getitem__(self, value: Any) -> float:
        return self.probabilities.get(value, 0)

    def __setitem__(self, value: Any, mass: float) -> None:
        if value not in self.values:
            self.values.append(value)
        self.probabilities[value] = mass

    def __contains__(self, value: Any) -> bool:
        return value in self.probabilities

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.probabilities)

    def __repr__(self) -> str:
        return f"Distribution({self.variable_name!r}, {self.show_approximation()})"

    def total(self) -> float:
        """Return the current sum of the table's entries."""
        return float(sum(self.probabilities.values()))

    def normalize(self, epsilon: float = NORMALIZE_EPSILON) -> "Distribution":
        """Rescale entries in place so that they sum to 1.

        Nothing is changed when the total is already within ``epsilon`` of 1,
        or when the total is 0 (there is no mass to rescale).

        Returns:
            self, to allow chaining.
        """
        total = self.total()
        if total != 0 and not (1.0 - epsilon < total < 1.0 + epsilon):
            for value in self.probabilities:
                self.probabilities[value] = self.probabilities[value] / total
        if total != 0:
            check_normalized(self.probabilities, atol=max(epsilon, 1e-9))
        return self

    def show_approximation(self) -> str:
        """Render sorted ``value: probability`` pairs to 4 significant digits."""
        return show_approximation(self)


def show_approximation(dist: Distribution) -> str:
    """Return a string with the sorted, approximate values of ``dist``.

    Example:
        >>> d = Distribution("Rain", frequencies={True: 1, False: 2})
        >>> show_approximation(d)
        'False: 0.6667, True: 0.3333'
    """
    return ", ".join(
        f"{value}: {dist.probabilities[value]:.4g}" for value in sorted(dist.probabilities)
    )
