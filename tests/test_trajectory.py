"""
Tests for flight profile sampling.

Tests cover:
- Agreement with the calculator's end-of-trip summary
- Mirror-image deceleration leg
- Physical bounds along the trajectory
- Numba kernel directly
"""

import pytest
import numpy as np

from relcalc.calculator import calculate
from relcalc.errors import ErrorKind
from relcalc.trajectory import FlightProfile, flight_profile, sample_hyperbolic_motion
from relcalc import constants as const


@pytest.mark.parametrize("acceleration_g, distance_ly, decelerate", [
    (1.0, 4.2, True),
    (1.0, 4.2, False),
    (0.3, 550.0, True),
    (10.0, 863.0, False),
])
def test_endpoints_match_calculator(constants, acceleration_g, distance_ly, decelerate):
    profile = flight_profile(acceleration_g, distance_ly, decelerate, constants).unwrap()
    summary = calculate(acceleration_g, distance_ly, decelerate, constants).unwrap()

    assert isinstance(profile, FlightProfile)
    assert profile.total_ship_years == pytest.approx(summary.years_passed_ship, abs=1e-3)
    assert profile.total_earth_years == pytest.approx(summary.years_passed_earth, abs=1e-3)
    assert profile.distance_ly[-1] == pytest.approx(distance_ly, rel=1e-6)
    assert profile.max_velocity_fraction == pytest.approx(summary.max_velocity_fraction_of_c, rel=1e-9)


def test_starts_at_rest(constants):
    profile = flight_profile(1.0, 4.2, False, constants).unwrap()
    assert profile.proper_time_yr[0] == 0.0
    assert profile.coordinate_time_yr[0] == 0.0
    assert profile.distance_ly[0] == 0.0
    assert profile.velocity_fraction[0] == 0.0


def test_decelerating_flight_arrives_at_rest(constants):
    profile = flight_profile(1.0, 4.2, True, constants, n_samples=101).unwrap()

    assert profile.velocity_fraction[-1] == pytest.approx(0.0, abs=1e-9)
    # Odd sample count puts the flip point on the middle sample
    assert np.argmax(profile.velocity_fraction) == 50
    assert profile.distance_ly[50] == pytest.approx(2.1, rel=1e-6)


def test_deceleration_leg_mirrors_acceleration_leg(constants):
    profile = flight_profile(1.0, 10.0, True, constants, n_samples=201).unwrap()
    assert np.allclose(profile.velocity_fraction, profile.velocity_fraction[::-1], atol=1e-9)


def test_physical_bounds(constants):
    profile = flight_profile(10.0, 863.0, False, constants, n_samples=500).unwrap()

    assert profile.n_samples == 500
    assert np.all(profile.velocity_fraction >= 0.0)
    assert np.all(profile.velocity_fraction < 1.0)
    assert np.all(np.diff(profile.proper_time_yr) > 0)
    assert np.all(np.diff(profile.coordinate_time_yr) > 0)
    assert np.all(np.diff(profile.distance_ly) >= 0)
    # Earth clock never runs behind the ship clock
    assert np.all(profile.coordinate_time_yr >= profile.proper_time_yr)


def test_invalid_inputs_rejected_like_calculator(constants):
    assert flight_profile(0.0, 4.2, True, constants).kind == ErrorKind.INVALID_INPUT
    assert flight_profile(1e-15, 1e-15, True, constants).kind == ErrorKind.PHYSICALLY_INVALID
    assert flight_profile(1.0, 1e200, False, constants).kind == ErrorKind.OVERFLOW


def test_too_few_samples(constants):
    outcome = flight_profile(1.0, 4.2, True, constants, n_samples=1)
    assert outcome.kind == ErrorKind.INVALID_INPUT


def test_kernel_one_year_at_one_g():
    """One year of ship time at 1 g, sampled directly."""
    a = const.G_STANDARD
    proper_time, coordinate_time, distance, velocity = sample_hyperbolic_motion(
        a, const.C_LIGHT, const.SECONDS_PER_YEAR, False, 3,
        const.SECONDS_PER_YEAR, const.LIGHT_YEAR_M
    )

    phi = a * const.SECONDS_PER_YEAR / const.C_LIGHT
    assert proper_time[-1] == pytest.approx(1.0)
    assert velocity[-1] == pytest.approx(np.tanh(phi))
    assert coordinate_time[-1] == pytest.approx(np.sinh(phi) / phi)
    expected_distance = const.C_LIGHT ** 2 / a * (np.cosh(phi) - 1.0) / const.LIGHT_YEAR_M
    assert distance[-1] == pytest.approx(expected_distance)
