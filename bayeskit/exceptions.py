"""Exception types raised by bayeskit."""


class BayeskitError(ValueError):
    """Base class for all bayeskit validation errors."""


class ConstructionError(BayeskitError):
    """Raised when a node or network is built from an invalid description."""


class CycleError(ConstructionError):
    """Raised when a network's parent links would form a directed cycle."""


class QueryError(BayeskitError):
    """Raised when the query variable also appears in the evidence."""


class SampleCountError(BayeskitError):
    """Raised when a sampling routine is asked for a negative sample count."""


class ShapeError(BayeskitError):
    """Raised when an event does not match the arity of a variable list."""


class FactorShapeError(ShapeError):
    """Raised when a factor is not reduced to exactly one variable."""
