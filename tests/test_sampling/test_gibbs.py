"""Tests for Gibbs sampling and the Markov blanket conditional."""

import pytest

from bayeskit import enumeration_ask, sprinkler_network
from bayeskit.exceptions import QueryError, SampleCountError
from bayeskit.sampling import gibbs_ask, markov_blanket_sample

N_SAMPLES = 10_000


def test_markov_blanket_sample_returns_probability():
    network = sprinkler_network()
    event = {"Cloudy": True, "Sprinkler": True, "WetGrass": True, "Rain": False}
    p_rain = markov_blanket_sample("Rain", event, network)
    assert isinstance(p_rain, float)
    assert p_rain == pytest.approx(0.8 * 0.99 / (0.8 * 0.99 + 0.2 * 0.90))


def test_markov_blanket_sample_ignores_current_value_of_var():
    network = sprinkler_network()
    event = {"Cloudy": False, "Sprinkler": True, "WetGrass": True}
    assert markov_blanket_sample("Rain", {**event, "Rain": True}, network) == pytest.approx(
        markov_blanket_sample("Rain", {**event, "Rain": False}, network)
    )


def test_markov_blanket_sample_root_variable():
    network = sprinkler_network()
    event = {"Sprinkler": True, "Rain": True, "WetGrass": True}
    expected = 0.5 * 0.1 * 0.8 / (0.5 * 0.1 * 0.8 + 0.5 * 0.5 * 0.2)
    assert markov_blanket_sample("Cloudy", event, network) == pytest.approx(expected)


def test_gibbs_ask_converges(rng):
    network = sprinkler_network()
    evidence = {"Sprinkler": True, "WetGrass": True}
    exact = enumeration_ask("Rain", evidence, network)
    estimate = gibbs_ask("Rain", evidence, network, N_SAMPLES, rng)
    assert estimate[True] == pytest.approx(exact[True], abs=0.05)
    assert estimate[True] + estimate[False] == pytest.approx(1.0)


def test_gibbs_ask_zero_sweeps(rng):
    estimate = gibbs_ask("Rain", {}, sprinkler_network(), 0, rng)
    assert estimate[True] == 0 and estimate[False] == 0


def test_gibbs_ask_argument_errors(rng):
    network = sprinkler_network()
    with pytest.raises(SampleCountError):
        gibbs_ask("Rain", {}, network, -1, rng)
    with pytest.raises(QueryError):
        gibbs_ask("Rain", {"Rain": True}, network, 10, rng)
