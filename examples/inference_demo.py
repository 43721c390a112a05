"""Example: Probabilistic Reasoning with bayeskit

Demonstrates exact and approximate inference on the burglary and sprinkler
networks, temporal inference on the umbrella HMM, and one step of Monte Carlo
localization on a small grid.
"""

import numpy as np

import bayeskit as bk
from bayeskit import (
    FixedLagSmoother,
    KinematicState,
    LocalizationMap,
    burglary_network,
    sprinkler_network,
    umbrella_hmm,
)


def example_exact_inference():
    """Example: Enumeration and variable elimination on the burglary network."""
    print("=" * 60)
    print("Example 1: Exact Inference")
    print("=" * 60)

    network = burglary_network()
    evidence = {"JohnCalls": True, "MaryCalls": True}

    enumerated = bk.enumeration_ask("Burglary", evidence, network)
    eliminated = bk.elimination_ask("Burglary", evidence, network)
    print(f"Network: {network}")
    print(f"P(Burglary | JohnCalls, MaryCalls) by enumeration: {enumerated.show_approximation()}")
    print(f"P(Burglary | JohnCalls, MaryCalls) by elimination: {eliminated.show_approximation()}")
    print(f"Markov blanket of Alarm: {sorted(network.markov_blanket('Alarm'))}")

    print()


def example_approximate_inference():
    """Example: Sampling estimates against the exact posterior."""
    print("=" * 60)
    print("Example 2: Approximate Inference")
    print("=" * 60)

    rng = np.random.default_rng(42)
    network = sprinkler_network()
    evidence = {"Sprinkler": True, "WetGrass": True}
    n_samples = 2000

    exact = bk.enumeration_ask("Rain", evidence, network)
    print(f"Exact:                {exact.show_approximation()}")
    for name, routine in [
        ("Rejection sampling", bk.rejection_sampling),
        ("Likelihood weighting", bk.likelihood_weighting),
        ("Gibbs sampling", bk.gibbs_ask),
    ]:
        estimate = routine("Rain", evidence, network, n_samples, rng)
        print(f"{name + ':':<22}{estimate.show_approximation()}")

    print()


def example_temporal_inference():
    """Example: Filtering, smoothing and particle filtering on the umbrella world."""
    print("=" * 60)
    print("Example 3: Temporal Inference")
    print("=" * 60)

    rng = np.random.default_rng(42)
    hmm = umbrella_hmm()
    _, umbrellas = hmm.sample(6, rng=rng)
    print(f"Umbrella observations: {umbrellas.astype(int)}")

    filtered = bk.forward_filter(hmm, umbrellas)
    smoothed = bk.forward_backward(hmm, umbrellas)
    for t in range(1, len(umbrellas) + 1):
        print(f"  t={t}: filtered P(rain)={filtered[t, 0]:.3f}, smoothed P(rain)={smoothed[t, 0]:.3f}")

    smoother = FixedLagSmoother(hmm, lag=2)
    lagged = [smoother.step(ev) for ev in umbrellas]
    print(f"Fixed-lag (d=2) P(rain): {[None if m is None else round(float(m[0]), 3) for m in lagged]}")

    particles = bk.particle_filtering(True, 1000, hmm, rng)
    print(f"Particle filter P(rain | umbrella) ~ {np.mean(particles == 0):.3f}")

    print()


def example_localization():
    """Example: One Monte Carlo localization update on a walled grid."""
    print("=" * 60)
    print("Example 4: Monte Carlo Localization")
    print("=" * 60)

    rng = np.random.default_rng(42)
    grid = np.zeros((5, 7), dtype=int)
    grid[1:4, 4] = 1
    grid_map = LocalizationMap(grid)

    true_state = KinematicState(2, 2, 4)
    readings = [bk.ray_cast(grid_map, j, true_state) for j in range(4)]
    print(f"Range readings at {tuple(true_state)}: {readings}")

    def motion_sample(state, v, w):
        return state

    def sensor_likelihood(observed, predicted):
        return float(np.exp(-0.5 * (observed - predicted) ** 2))

    particles = bk.monte_carlo_localization(
        {"v": 0, "w": 0}, readings, 500, motion_sample, sensor_likelihood, grid_map, rng=rng
    )
    hits = sum(1 for p in particles if (p.row, p.col) == (true_state.row, true_state.col))
    print(f"Particles at the true cell after one update: {hits} of {len(particles)}")

    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Probabilistic Reasoning - bayeskit Examples")
    print("=" * 60 + "\n")

    example_exact_inference()
    example_approximate_inference()
    example_temporal_inference()
    example_localization()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
