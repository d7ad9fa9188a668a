"""
Tests for distance sweeps.
"""

import numpy as np
import pytest

from relcalc.calculator import calculate
from relcalc.errors import ErrorKind
from relcalc.sweep import SweepResult, sweep_distances


def test_sweep_matches_single_calculations(constants):
    distances = [1.0, 4.2, 100.0]
    sweep = sweep_distances(1.0, distances, True, constants)

    assert sweep.n_points == 3
    assert sweep.n_failed == 0
    for i, distance in enumerate(distances):
        result = calculate(1.0, distance, True, constants).unwrap()
        assert sweep.years_ship[i] == result.years_passed_ship
        assert sweep.years_earth[i] == result.years_passed_earth
        assert sweep.velocity_fraction[i] == result.max_velocity_fraction_of_c


@pytest.mark.parametrize("decelerate", [True, False])
def test_sweep_is_monotonic(constants, decelerate):
    sweep = sweep_distances(1.0, np.geomspace(0.01, 1.0e5, 200), decelerate, constants)
    assert sweep.n_failed == 0
    assert sweep.is_monotonic()


def test_failed_points_kept(constants):
    sweep = sweep_distances(1.0, [4.2, -1.0, 1e200], False, constants)

    assert sweep.n_failed == 2
    assert list(sweep.succeeded) == [True, False, False]
    assert sweep.error_kinds == ["", ErrorKind.INVALID_INPUT.value, ErrorKind.OVERFLOW.value]
    assert np.isnan(sweep.years_ship[1]) and np.isnan(sweep.years_earth[2])
    assert sweep.is_monotonic()


def test_failures_logged(constants, caplog):
    sweep_distances(1.0, [-1.0], False, constants)
    assert "1 of 1 points failed" in caplog.text


def test_unsorted_input_order_preserved(constants):
    sweep = sweep_distances(1.0, [100.0, 1.0, 10.0], True, constants)
    assert list(sweep.distances_ly) == [100.0, 1.0, 10.0]
    assert sweep.years_ship[0] > sweep.years_ship[2] > sweep.years_ship[1]
    assert sweep.is_monotonic()


def test_non_monotonic_detected():
    sweep = SweepResult(
        acceleration_g=1.0,
        decelerate=False,
        distances_ly=np.array([1.0, 2.0]),
        years_ship=np.array([2.0, 1.0]),
        years_earth=np.array([2.0, 3.0]),
        velocity_fraction=np.array([0.5, 0.6]),
        error_kinds=["", ""]
    )
    assert not sweep.is_monotonic()


def test_progress_bar(constants, capsys):
    sweep = sweep_distances(1.0, [1.0, 2.0], True, constants, show_progress=True)
    assert sweep.n_points == 2
    assert "Sweeping distances" in capsys.readouterr().err
