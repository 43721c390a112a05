"""bayeskit - probabilistic reasoning over discrete distributions and boolean Bayesian networks."""

__version__ = "0.1.0"

# Distributions
from .distributions import (
    Distribution,
    JointDistribution,
    consistent_with,
    enumerate_joint,
    enumerate_joint_ask,
    event_values,
    extend,
    show_approximation,
)

# Errors
from .exceptions import (
    BayeskitError,
    ConstructionError,
    CycleError,
    FactorShapeError,
    QueryError,
    SampleCountError,
    ShapeError,
)

# Exact inference
from .exact import (
    Factor,
    elimination_ask,
    enumeration_ask,
    make_factor,
    pointwise_product,
    sum_out,
)

# Canonical models
from .models import burglary_network, sprinkler_network, umbrella_hmm

# Network model
from .network import (
    BayesianNetwork,
    BayesianNode,
    ConditionalTable,
    UnconditionalProbability,
    variable_values,
)

# Temporal models, particle methods and localization
from .probabilistic import (
    FixedLagSmoother,
    HiddenMarkovModel,
    KinematicState,
    LocalizationMap,
    backward,
    fixed_lag_smoothing,
    forward,
    forward_backward,
    forward_filter,
    monte_carlo_localization,
    particle_filtering,
    ray_cast,
    sensor_distribution,
    weighted_resample,
)

# Random source
from .rng import get_default_rng, resolve_rng, set_default_rng

# Approximate inference
from .sampling import (
    gibbs_ask,
    likelihood_weighting,
    markov_blanket_sample,
    prior_sample,
    rejection_sampling,
    weighted_sample,
)

__all__ = [
    "__version__",
    "Distribution",
    "JointDistribution",
    "show_approximation",
    "event_values",
    "extend",
    "consistent_with",
    "enumerate_joint",
    "enumerate_joint_ask",
    "BayeskitError",
    "ConstructionError",
    "CycleError",
    "QueryError",
    "SampleCountError",
    "ShapeError",
    "FactorShapeError",
    "BayesianNode",
    "BayesianNetwork",
    "UnconditionalProbability",
    "ConditionalTable",
    "variable_values",
    "Factor",
    "make_factor",
    "pointwise_product",
    "sum_out",
    "enumeration_ask",
    "elimination_ask",
    "prior_sample",
    "rejection_sampling",
    "weighted_sample",
    "likelihood_weighting",
    "markov_blanket_sample",
    "gibbs_ask",
    "HiddenMarkovModel",
    "sensor_distribution",
    "forward",
    "backward",
    "forward_filter",
    "forward_backward",
    "FixedLagSmoother",
    "fixed_lag_smoothing",
    "particle_filtering",
    "KinematicState",
    "LocalizationMap",
    "ray_cast",
    "monte_carlo_localization",
    "weighted_resample",
    "burglary_network",
    "sprinkler_network",
    "umbrella_hmm",
    "get_default_rng",
    "set_default_rng",
    "resolve_rng",
]
