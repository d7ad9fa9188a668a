"""
Batch evaluation of the calculator over a grid of distances.

Failed points are kept in the result (NaN values plus the error kind) so a
sweep across the edge of the representable range still returns every row.
"""

from dataclasses import dataclass, field
from typing import List
import logging

import numpy as np
from tqdm import tqdm

from relcalc import constants as const
from relcalc.calculator import calculate
from relcalc.config import PhysicalConstants

logger = logging.getLogger(__name__)


@dataclass
class SweepResult:
    """
    Calculator outputs for one acceleration and flag over many distances.

    Arrays share shape (n_points,). `error_kinds` holds the ErrorKind value
    for failed points and "" for successful ones.
    """

    acceleration_g: float
    decelerate: bool
    distances_ly: np.ndarray
    years_ship: np.ndarray
    years_earth: np.ndarray
    velocity_fraction: np.ndarray
    error_kinds: List[str] = field(default_factory=list)

    @property
    def n_points(self) -> int:
        return len(self.distances_ly)

    @property
    def succeeded(self) -> np.ndarray:
        """Boolean mask of points that produced a result."""
        return np.array([kind == "" for kind in self.error_kinds], dtype=bool)

    @property
    def n_failed(self) -> int:
        return int(np.sum(~self.succeeded))

    def is_monotonic(self) -> bool:
        """True if both times never decrease with distance over successful points."""
        mask = self.succeeded
        order = np.argsort(self.distances_ly[mask], kind='stable')
        ship = self.years_ship[mask][order]
        earth = self.years_earth[mask][order]
        return bool(np.all(np.diff(ship) >= 0) and np.all(np.diff(earth) >= 0))


def sweep_distances(
    acceleration_g: float,
    distances_ly,
    decelerate_at_target: bool,
    constants: PhysicalConstants,
    max_acceleration_g: float = const.DEFAULT_MAX_ACCELERATION_G,
    show_progress: bool = False
) -> SweepResult:
    """
    Run the calculator for every distance in `distances_ly`.

    Args:
        acceleration_g: Proper acceleration [g]
        distances_ly: Iterable of distances [ly]
        decelerate_at_target: Deceleration flag applied to every point
        constants: Physical constants bundle
        max_acceleration_g: Input-sanity ceiling for acceleration
        show_progress: Whether to show progress bar (tqdm)

    Returns:
        SweepResult with one row per distance, in input order
    """
    distances = np.asarray(distances_ly, dtype=np.float64)
    n_points = len(distances)

    years_ship = np.full(n_points, np.nan)
    years_earth = np.full(n_points, np.nan)
    velocity = np.full(n_points, np.nan)
    error_kinds = [""] * n_points

    iterator = range(n_points)
    if show_progress:
        iterator = tqdm(iterator, desc="Sweeping distances", unit="points")

    for i in iterator:
        outcome = calculate(acceleration_g, distances[i], decelerate_at_target, constants,
                            max_acceleration_g=max_acceleration_g)
        if outcome.ok:
            years_ship[i] = outcome.value.years_passed_ship
            years_earth[i] = outcome.value.years_passed_earth
            velocity[i] = outcome.value.max_velocity_fraction_of_c
        else:
            error_kinds[i] = outcome.kind.value

    result = SweepResult(
        acceleration_g=float(acceleration_g),
        decelerate=bool(decelerate_at_target),
        distances_ly=distances,
        years_ship=years_ship,
        years_earth=years_earth,
        velocity_fraction=velocity,
        error_kinds=error_kinds
    )

    if result.n_failed:
        logger.warning("Sweep at %g g: %d of %d points failed", acceleration_g, result.n_failed, n_points)

    return result
