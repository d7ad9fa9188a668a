"""
Relativistic flight calculator.

Closed-form relativistic rocket equations for a ship under constant proper
acceleration a, starting from rest:

    τ(d) = (c/a) · acosh(1 + a·d/c²)      ship proper time to cover d
    t(τ) = (c/a) · sinh(a·τ/c)            Earth coordinate time
    v(τ) = c · tanh(a·τ/c)                velocity

With deceleration the ship accelerates over the first half of the distance
and flips for a mirror-image second half, so both times are twice the
one-way values over d/2 and the peak velocity is reached at the midpoint.

All evaluation is done in numpy float64 with overflow warnings silenced;
non-finite intermediates are detected explicitly and reported as OVERFLOW.
The functions here are pure and safe to call concurrently.
"""

from dataclasses import dataclass

import numpy as np

from relcalc import constants as const
from relcalc.config import PhysicalConstants
from relcalc.errors import ErrorKind, Outcome


@dataclass(frozen=True)
class CalculationResult:
    """
    Summary of one flight.

    - years_passed_ship: total ship proper time [yr], rounded to 3 decimals
    - years_passed_earth: total Earth coordinate time [yr], rounded to 3 decimals
    - max_velocity_fraction_of_c: peak velocity as fraction of c, full precision
    """

    years_passed_ship: float
    years_passed_earth: float
    max_velocity_fraction_of_c: float

    def as_dict(self) -> dict:
        return {
            'yearsPassedShip': self.years_passed_ship,
            'yearsPassedEarth': self.years_passed_earth,
            'maxVelocityFractionOfC': self.max_velocity_fraction_of_c,
        }


def acosh_argument(a, distance_m, c):
    """1 + a·d/c², the argument of acosh in the proper-time equation."""
    return 1.0 + (a * distance_m) / (c * c)


def one_way_proper_time(arg, a, c):
    """
    Ship proper time [s] for one acceleration leg.

    acosh(x) is evaluated as ln(x + sqrt(x² - 1)), which stays well behaved
    until x² itself overflows (the result is then inf, not an exception).
    """
    return (c / a) * np.log(arg + np.sqrt(arg * arg - 1.0))


def rapidity(a, proper_time, c):
    """Hyperbolic angle a·τ/c reached after proper time τ."""
    return a * proper_time / c


def calculate(
    acceleration_g: float,
    distance_ly: float,
    decelerate_at_target: bool,
    constants: PhysicalConstants,
    max_acceleration_g: float = const.DEFAULT_MAX_ACCELERATION_G
) -> Outcome:
    """
    Calculate ship time, Earth time and peak velocity for a one-way flight.

    Args:
        acceleration_g: Proper acceleration in units of standard gravity
        distance_ly: Distance to the target in light-years
        decelerate_at_target: Flip at the midpoint and arrive at rest
        constants: Physical constants bundle
        max_acceleration_g: Input-sanity ceiling for acceleration

    Returns:
        Outcome holding a CalculationResult, or a CalcError of kind
        INVALID_INPUT, PHYSICALLY_INVALID or OVERFLOW.
    """
    # Validation order matters: first failure wins
    if not np.isfinite(acceleration_g) or acceleration_g <= 0:
        return Outcome.failure(ErrorKind.INVALID_INPUT, "acceleration must be positive")
    if acceleration_g > max_acceleration_g:
        return Outcome.failure(ErrorKind.INVALID_INPUT, "acceleration too large")
    if not np.isfinite(distance_ly) or distance_ly <= 0:
        return Outcome.failure(ErrorKind.INVALID_INPUT, "distance must be positive")

    with np.errstate(over='ignore', invalid='ignore'):
        c = np.float64(constants.c)
        a = np.float64(acceleration_g) * constants.g  # m/s²
        d = np.float64(distance_ly) * constants.light_year_m  # m

        leg_distance = d * 0.5 if decelerate_at_target else d

        arg = acosh_argument(a, leg_distance, c)
        if not arg > 1.0:
            return Outcome.failure(ErrorKind.PHYSICALLY_INVALID, "parameters yield no valid solution")

        proper_time_one_way = one_way_proper_time(arg, a, c)
        if not np.isfinite(proper_time_one_way):
            return Outcome.failure(ErrorKind.OVERFLOW, "distance or acceleration too large")

        total_proper_time = 2.0 * proper_time_one_way if decelerate_at_target else proper_time_one_way

        phi = rapidity(a, proper_time_one_way, c)
        if not np.isfinite(phi):
            return Outcome.failure(ErrorKind.OVERFLOW, "parameters too extreme")
        sinh_phi = np.sinh(phi)
        if not np.isfinite(sinh_phi):
            return Outcome.failure(ErrorKind.OVERFLOW, "parameters too extreme")

        coordinate_time_one_way = (c / a) * sinh_phi
        total_coordinate_time = (
            2.0 * coordinate_time_one_way if decelerate_at_target else coordinate_time_one_way
        )

        # Peak velocity: at the flip point, or at arrival without deceleration
        max_velocity_fraction = np.tanh(phi)

    # Consistency checks, only reachable through floating-point pathologies
    if total_coordinate_time < total_proper_time:
        return Outcome.failure(ErrorKind.PHYSICALLY_INVALID, "coordinate time less than proper time")
    if max_velocity_fraction >= 1.0:
        return Outcome.failure(ErrorKind.PHYSICALLY_INVALID, "velocity exceeded light speed")

    return Outcome.success(CalculationResult(
        years_passed_ship=round(float(total_proper_time / const.SECONDS_PER_YEAR), const.TIME_DECIMALS),
        years_passed_earth=round(float(total_coordinate_time / const.SECONDS_PER_YEAR), const.TIME_DECIMALS),
        max_velocity_fraction_of_c=float(max_velocity_fraction)
    ))
