"""
Flight profile sampling along a constant-proper-acceleration trajectory.

Where relcalc.calculator returns only the end-of-trip summary, this module
samples the whole hyperbolic world line on a uniform grid of ship proper
time τ. For one acceleration leg with rapidity φ = a·τ/c:

    t(τ) = (c/a) · sinh φ
    x(τ) = (c²/a) · (cosh φ - 1) = (2c²/a) · sinh²(φ/2)
    v(τ) = c · tanh φ

With deceleration the second leg mirrors the first about the midpoint: the
ship keeps covering distance while its velocity falls back to zero.

The sampling kernel is JIT-compiled with Numba and must stay
Numba-compatible (scalars and NumPy arrays only).
"""

from dataclasses import dataclass

import numpy as np
from numba import jit

from relcalc import constants as const
from relcalc.calculator import calculate, acosh_argument, one_way_proper_time
from relcalc.config import PhysicalConstants
from relcalc.errors import ErrorKind, Outcome


@jit(nopython=True)
def sample_hyperbolic_motion(a, c, leg_proper_time, decelerate, n_samples,
                             seconds_per_year, light_year_m):
    """
    Sample proper time, coordinate time, distance and velocity.

    Args:
        a: Proper acceleration [m/s²]
        c: Speed of light [m/s]
        leg_proper_time: Ship proper time of one acceleration leg [s]
        decelerate: Whether a mirrored deceleration leg follows
        n_samples: Number of samples (>= 2), including both endpoints
        seconds_per_year: Seconds in one year
        light_year_m: Meters in one light-year

    Returns:
        Tuple of arrays (proper_time [yr], coordinate_time [yr],
        distance [ly], velocity [fraction of c]), each of shape (n_samples,)

    Notes:
        - cosh φ - 1 is computed as 2 sinh²(φ/2) to keep precision at small φ
        - Samples on the second leg are measured back from arrival
    """
    total_proper_time = 2.0 * leg_proper_time if decelerate else leg_proper_time

    proper_time = np.empty(n_samples)
    coordinate_time = np.empty(n_samples)
    distance = np.empty(n_samples)
    velocity = np.empty(n_samples)

    phi_leg = a * leg_proper_time / c
    t_leg = (c / a) * np.sinh(phi_leg)
    x_leg = (2.0 * c * c / a) * np.sinh(0.5 * phi_leg) ** 2

    for i in range(n_samples):
        tau = total_proper_time * i / (n_samples - 1)

        if not decelerate or tau <= leg_proper_time:
            phi = a * tau / c
            t = (c / a) * np.sinh(phi)
            x = (2.0 * c * c / a) * np.sinh(0.5 * phi) ** 2
            v = np.tanh(phi)
        else:
            # Mirror image of the first leg, counted back from arrival
            phi = a * (total_proper_time - tau) / c
            t = 2.0 * t_leg - (c / a) * np.sinh(phi)
            x = 2.0 * x_leg - (2.0 * c * c / a) * np.sinh(0.5 * phi) ** 2
            v = np.tanh(phi)

        proper_time[i] = tau / seconds_per_year
        coordinate_time[i] = t / seconds_per_year
        distance[i] = x / light_year_m
        velocity[i] = v

    return proper_time, coordinate_time, distance, velocity


@dataclass
class FlightProfile:
    """
    Sampled trajectory of one flight.

    Arrays share shape (n_samples,):
    - proper_time_yr: ship clock [yr]
    - coordinate_time_yr: Earth clock [yr]
    - distance_ly: distance covered [ly]
    - velocity_fraction: velocity as fraction of c
    """

    proper_time_yr: np.ndarray
    coordinate_time_yr: np.ndarray
    distance_ly: np.ndarray
    velocity_fraction: np.ndarray
    decelerate: bool

    @property
    def n_samples(self) -> int:
        return len(self.proper_time_yr)

    @property
    def max_velocity_fraction(self) -> float:
        return float(np.max(self.velocity_fraction))

    @property
    def total_ship_years(self) -> float:
        return float(self.proper_time_yr[-1])

    @property
    def total_earth_years(self) -> float:
        return float(self.coordinate_time_yr[-1])


def flight_profile(
    acceleration_g: float,
    distance_ly: float,
    decelerate_at_target: bool,
    constants: PhysicalConstants,
    n_samples: int = 201,
    max_acceleration_g: float = const.DEFAULT_MAX_ACCELERATION_G
) -> Outcome:
    """
    Sample the trajectory of a flight.

    Inputs are validated exactly as by calculate(); any flight it rejects is
    rejected here with the same error.

    Returns:
        Outcome holding a FlightProfile
    """
    if n_samples < 2:
        return Outcome.failure(ErrorKind.INVALID_INPUT, "n_samples must be at least 2")

    summary = calculate(acceleration_g, distance_ly, decelerate_at_target, constants,
                        max_acceleration_g=max_acceleration_g)
    if not summary.ok:
        return summary

    a = acceleration_g * constants.g
    d = distance_ly * constants.light_year_m
    leg_distance = d * 0.5 if decelerate_at_target else d
    leg_proper_time = one_way_proper_time(acosh_argument(a, leg_distance, constants.c), a, constants.c)

    proper_time, coordinate_time, distance, velocity = sample_hyperbolic_motion(
        float(a), float(constants.c), float(leg_proper_time), bool(decelerate_at_target),
        int(n_samples), const.SECONDS_PER_YEAR, float(constants.light_year_m)
    )

    return Outcome.success(FlightProfile(
        proper_time_yr=proper_time,
        coordinate_time_yr=coordinate_time,
        distance_ly=distance,
        velocity_fraction=velocity,
        decelerate=bool(decelerate_at_target)
    ))
