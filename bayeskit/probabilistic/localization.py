"""Monte Carlo localization of a robot on a 2D occupancy grid.

The robot's kinematic state is a grid cell plus one of four orientations.
Range readings are predicted by casting rays through free cells, and the
particle set is updated with caller-supplied motion and sensor models.

References:
    Russell, S., & Norvig, P. (2010). Artificial Intelligence: A Modern
    Approach (3rd ed.), section 25.3.
"""

from typing import Callable, List, Mapping, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from ..exceptions import ConstructionError, SampleCountError, ShapeError
from ..logging import get_logger
from ..rng import resolve_rng
from .utils import effective_sample_size, weighted_resample

logger = get_logger(__name__)

N_ORIENTATIONS = 4
N_SENSORS = 4


class KinematicState(NamedTuple):
    """Grid position (0-based) and orientation in {1, 2, 3, 4}."""

    row: int
    col: int
    orientation: int


# (state, v, w) -> proposed state
MotionModel = Callable[[KinematicState, object, object], KinematicState]
# (observed range, predicted range) -> likelihood
SensorModel = Callable[[float, int], float]


class LocalizationMap:
    """Occupancy grid with a precomputed list of free cells.

    Attributes:
        grid: 2D integer array; 0 marks a free cell, anything else an obstacle.
        free_cells: (row, col) of every free cell in row-major order.
    """

    def __init__(self, grid: Sequence[Sequence[int]]):
        """Initialize the map.

        Raises:
            ShapeError: If ``grid`` is not two-dimensional.
            ConstructionError: If the grid has no free cell.
        """
        self.grid = np.asarray(grid)
        if self.grid.ndim != 2:
            raise ShapeError(f"Expected a 2D grid, got shape {self.grid.shape}")
        self.free_cells: List[Tuple[int, int]] = [
            (int(row), int(col)) for row, col in np.argwhere(self.grid == 0)
        ]
        if not self.free_cells:
            raise ConstructionError("Localization map has no free cells")

    @property
    def shape(self) -> Tuple[int, int]:
        return self.grid.shape

    def is_free(self, row: int, col: int) -> bool:
        """True if (row, col) lies inside the grid and is not an obstacle."""
        n_rows, n_cols = self.grid.shape
        return 0 <= row < n_rows and 0 <= col < n_cols and self.grid[row, col] == 0

    def sample(self, rng: Optional[np.random.Generator] = None) -> KinematicState:
        """Draw a uniformly random free cell and orientation."""
        rng = resolve_rng(rng)
        row, col = self.free_cells[int(rng.integers(len(self.free_cells)))]
        orientation = int(rng.integers(1, N_ORIENTATIONS + 1))
        return KinematicState(row, col, orientation)


def sample(grid_map: LocalizationMap, rng: Optional[np.random.Generator] = None) -> KinematicState:
    """Draw a random kinematic state on ``grid_map``."""
    return grid_map.sample(rng)


def sensor_direction(sensor_index: int, orientation: int) -> Tuple[int, int]:
    """Unit (row, col) step of a range sensor for a robot with ``orientation``.

    Before rotation, sensor 0 points up (row - 1), 1 right, 2 down and 3 left.
    Each orientation unit rotates the step by 90 degrees clockwise.

    Raises:
        ValueError: If ``sensor_index`` is not in 0..3.
    """
    if not 0 <= sensor_index < N_SENSORS:
        raise ValueError(f"sensor_index must be in 0..{N_SENSORS - 1}, got {sensor_index}")
    d_row = int(sensor_index % 2 == 0) * (sensor_index - 1)
    d_col = int(sensor_index % 2 == 1) * (2 - sensor_index)
    for _ in range(orientation):
        d_row, d_col = d_col, -d_row
    return d_row, d_col


def ray_cast(grid_map: LocalizationMap, sensor_index: int, state: Sequence[int]) -> int:
    """Count free cells from the robot's cell to the nearest obstacle or edge.

    The robot's own cell is included in the count, so a robot standing in a
    free cell next to a wall reads 1.
    """
    row, col, orientation = state
    d_row, d_col = sensor_direction(sensor_index, orientation)
    count = 0
    while grid_map.is_free(row, col):
        row, col = row + d_row, col + d_col
        count += 1
    return count


def monte_carlo_localization(
    controls: Mapping[str, object],
    readings: Sequence[float],
    n_particles: int,
    motion_sample: MotionModel,
    sensor_likelihood: SensorModel,
    grid_map: LocalizationMap,
    particles: Optional[Sequence[KinematicState]] = None,
    rng: Optional[np.random.Generator] = None,
) -> list:
    """One Monte Carlo localization update.

    Args:
        controls: Control input with keys ``"v"`` (velocity) and ``"w"``
            (angular velocity), passed unchanged to ``motion_sample``.
        readings: Observed range per sensor; reading j is compared with
            :func:`ray_cast` for sensor j.
        n_particles: Size N of the returned particle set.
        motion_sample: Motion model ``(state, v, w) -> state``.
        sensor_likelihood: Sensor model ``(observed, predicted) -> likelihood``.
        grid_map: The map.
        particles: Particle set from the previous step. If None, N particles
            are drawn uniformly over the free cells.
        rng: Random number generator. If None, uses the process-wide default.

    Returns:
        N particles resampled in proportion to their sensor weights. Feed
        them back as ``particles`` on the next step. An empty list
        when N is 0.

    Raises:
        SampleCountError: If ``n_particles`` is negative.
        KeyError: If ``controls`` lacks ``"v"`` or ``"w"``.
        ValueError: If every particle has zero weight.
    """
    if n_particles < 0:
        raise SampleCountError(f"{n_particles} is not a valid number of particles")
    rng = resolve_rng(rng)
    v, w = controls["v"], controls["w"]
    if n_particles == 0:
        return []

    if particles is None:
        particles = [grid_map.sample(rng) for _ in range(n_particles)]

    proposed = [motion_sample(state, v, w) for state in particles]
    weights = np.ones(len(proposed))
    for i, state in enumerate(proposed):
        for j, observed in enumerate(readings):
            weights[i] *= sensor_likelihood(observed, ray_cast(grid_map, j, state))

    if weights.sum() > 0:
        logger.debug(
            "MCL update: %d particles, effective sample size %.1f",
            len(proposed),
            effective_sample_size(weights),
        )
    return weighted_resample(proposed, weights, n_particles, rng)
