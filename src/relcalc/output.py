"""
HDF5 storage for sweeps and flight profiles.

Sweep file structure:
/config (group) - Constants and sweep settings as attributes
/sweep (group)
    /distance_ly (dataset) - Distances [ly]
    /years_ship (dataset) - Ship proper time [yr], NaN where failed
    /years_earth (dataset) - Earth coordinate time [yr], NaN where failed
    /velocity_fraction (dataset) - Peak velocity [fraction of c], NaN where failed
    /error_kind (dataset) - Error kind per point, "" where succeeded

Profile file structure:
/profile (group) - `decelerate` attribute
    /proper_time_yr, /coordinate_time_yr, /distance_ly, /velocity_fraction
"""

import logging
from pathlib import Path

import h5py
import numpy as np

from relcalc.config import PhysicalConstants
from relcalc.sweep import SweepResult
from relcalc.trajectory import FlightProfile

logger = logging.getLogger(__name__)

PROFILE_DATASETS = ('proper_time_yr', 'coordinate_time_yr', 'distance_ly', 'velocity_fraction')


def save_sweep(filepath: str, sweep: SweepResult, constants: PhysicalConstants):
    """
    Write a sweep and the constants it was computed with.

    Args:
        filepath: Path to HDF5 output file (parent directories are created)
        sweep: Sweep to store
        constants: Constants used for the sweep
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with h5py.File(str(path), 'w') as f:
        config_group = f.create_group('config')
        config_group.attrs['g'] = constants.g
        config_group.attrs['c'] = constants.c
        config_group.attrs['light_year_m'] = constants.light_year_m
        config_group.attrs['acceleration_g'] = sweep.acceleration_g
        config_group.attrs['decelerate'] = sweep.decelerate

        sweep_group = f.create_group('sweep')
        sweep_group.create_dataset('distance_ly', data=sweep.distances_ly, compression='gzip')
        sweep_group.create_dataset('years_ship', data=sweep.years_ship, compression='gzip')
        sweep_group.create_dataset('years_earth', data=sweep.years_earth, compression='gzip')
        sweep_group.create_dataset('velocity_fraction', data=sweep.velocity_fraction, compression='gzip')
        sweep_group.create_dataset('error_kind', data=list(sweep.error_kinds), dtype=h5py.string_dtype())

    logger.info("Saved sweep (%d points) to %s", sweep.n_points, path)


def load_sweep(filepath: str) -> SweepResult:
    """
    Read a sweep written by save_sweep().

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Sweep file not found: {filepath}")

    with h5py.File(str(path), 'r') as f:
        config_group = f['config']
        sweep_group = f['sweep']
        return SweepResult(
            acceleration_g=float(config_group.attrs['acceleration_g']),
            decelerate=bool(config_group.attrs['decelerate']),
            distances_ly=sweep_group['distance_ly'][:],
            years_ship=sweep_group['years_ship'][:],
            years_earth=sweep_group['years_earth'][:],
            velocity_fraction=sweep_group['velocity_fraction'][:],
            error_kinds=[str(kind) for kind in sweep_group['error_kind'].asstr()[:]]
        )


def load_sweep_constants(filepath: str) -> PhysicalConstants:
    """Constants stored alongside a sweep."""
    with h5py.File(str(filepath), 'r') as f:
        attrs = f['config'].attrs
        return PhysicalConstants(
            g=float(attrs['g']),
            c=float(attrs['c']),
            light_year_m=float(attrs['light_year_m'])
        )


def save_profile(filepath: str, profile: FlightProfile):
    """Write a flight profile to HDF5 (parent directories are created)."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    with h5py.File(str(path), 'w') as f:
        group = f.create_group('profile')
        group.attrs['decelerate'] = profile.decelerate
        for name in PROFILE_DATASETS:
            group.create_dataset(name, data=getattr(profile, name), compression='gzip')

    logger.info("Saved flight profile (%d samples) to %s", profile.n_samples, path)


def load_profile(filepath: str) -> FlightProfile:
    """
    Read a flight profile written by save_profile().

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Profile file not found: {filepath}")

    with h5py.File(str(path), 'r') as f:
        group = f['profile']
        arrays = {name: np.asarray(group[name][:]) for name in PROFILE_DATASETS}
        return FlightProfile(decelerate=bool(group.attrs['decelerate']), **arrays)
