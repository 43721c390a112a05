"""Integration tests exercising bayeskit through its top-level namespace."""

import numpy as np
import pytest

import bayeskit as bk


def test_public_names_are_exported():
    for name in bk.__all__:
        assert hasattr(bk, name), name
    assert bk.__version__ == "0.1.0"


def test_error_hierarchy_is_catchable_as_value_error():
    for error in (
        bk.ConstructionError,
        bk.CycleError,
        bk.QueryError,
        bk.SampleCountError,
        bk.ShapeError,
        bk.FactorShapeError,
    ):
        assert issubclass(error, bk.BayeskitError)
        assert issubclass(error, ValueError)


def test_network_built_from_tagged_cpts():
    network = bk.BayesianNetwork(
        [
            bk.BayesianNode("Cause", "", bk.UnconditionalProbability(0.2)),
            bk.BayesianNode("Effect", "Cause", bk.ConditionalTable({(True,): 0.9, (False,): 0.1})),
        ]
    )
    posterior = bk.elimination_ask("Cause", {"Effect": True}, network)
    assert posterior[True] == pytest.approx(0.18 / (0.18 + 0.08))


def test_exact_and_sampled_posteriors_agree():
    network = bk.sprinkler_network()
    evidence = {"WetGrass": True}
    exact = bk.enumeration_ask("Cloudy", evidence, network)
    bk.set_default_rng(11)
    estimate = bk.likelihood_weighting("Cloudy", evidence, network, 10_000)
    assert estimate[True] == pytest.approx(exact[True], abs=0.05)


def test_default_rng_makes_samplers_reproducible():
    network = bk.burglary_network()
    bk.set_default_rng(5)
    first = [bk.prior_sample(network) for _ in range(20)]
    bk.set_default_rng(5)
    second = [bk.prior_sample(network) for _ in range(20)]
    assert first == second


def test_hmm_sample_then_smooth():
    hmm = bk.umbrella_hmm()
    _, evidence = hmm.sample(15, rng=np.random.default_rng(2))
    smoothed = bk.forward_backward(hmm, evidence)
    filtered = bk.forward_filter(hmm, evidence)
    assert smoothed.shape == filtered.shape == (16, 2)
    np.testing.assert_allclose(smoothed.sum(axis=1), 1.0)
    np.testing.assert_allclose(smoothed[-1], filtered[-1])
