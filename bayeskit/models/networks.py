"""Canonical textbook Bayesian networks."""

from __future__ import annotations

from ..network import BayesianNetwork


def burglary_network() -> BayesianNetwork:
    """
    Construct the five-node burglary alarm network.

    Burglary and Earthquake both cause Alarm; JohnCalls and MaryCalls each
    depend on Alarm only.

    Returns
    -------
    BayesianNetwork
        A fresh network instance.
    """
    return BayesianNetwork(
        [
            ("Burglary", "", 0.001),
            ("Earthquake", "", 0.002),
            (
                "Alarm",
                "Burglary Earthquake",
                {
                    (True, True): 0.95,
                    (True, False): 0.94,
                    (False, True): 0.29,
                    (False, False): 0.001,
                },
            ),
            ("JohnCalls", "Alarm", {True: 0.90, False: 0.05}),
            ("MaryCalls", "Alarm", {True: 0.70, False: 0.01}),
        ]
    )


def sprinkler_network() -> BayesianNetwork:
    """
    Construct the four-node cloudy/sprinkler/rain/wet-grass network.

    Returns
    -------
    BayesianNetwork
        A fresh network instance.
    """
    return BayesianNetwork(
        [
            ("Cloudy", "", 0.5),
            ("Sprinkler", "Cloudy", {True: 0.10, False: 0.50}),
            ("Rain", "Cloudy", {True: 0.80, False: 0.20}),
            (
                "WetGrass",
                "Sprinkler Rain",
                {
                    (True, True): 0.99,
                    (True, False): 0.90,
                    (False, True): 0.90,
                    (False, False): 0.00,
                },
            ),
        ]
    )
