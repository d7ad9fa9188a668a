"""
Plots for flight profiles and distance sweeps.

All plots are saved as PNG files using the non-interactive Agg backend.
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')  # Use non-interactive backend for saving files
import matplotlib.pyplot as plt
from pathlib import Path

from relcalc.sweep import SweepResult
from relcalc.trajectory import FlightProfile


plt.rcParams['font.size'] = 10
plt.rcParams['axes.labelsize'] = 12
plt.rcParams['axes.titlesize'] = 14
plt.rcParams['legend.fontsize'] = 10


def plot_flight_profile(profile: FlightProfile, output_path: str, dpi: int = 150):
    """
    Plot velocity and Earth time against ship proper time.

    Args:
        profile: Sampled flight
        output_path: Path to save PNG plot
        dpi: Output resolution

    Creates a two-panel figure:
    - Top: velocity as fraction of c
    - Bottom: Earth coordinate time, with the ship clock as reference line
    """
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    fig, (ax_v, ax_t) = plt.subplots(2, 1, figsize=(10, 8), sharex=True)

    ax_v.plot(profile.proper_time_yr, profile.velocity_fraction, color='tab:blue', linewidth=2)
    ax_v.set_ylabel('Velocity (v/c)')
    ax_v.set_ylim(0.0, 1.05)
    ax_v.axhline(1.0, color='gray', linestyle='--', linewidth=1)
    mode = 'accelerate, flip, decelerate' if profile.decelerate else 'accelerate to arrival'
    ax_v.set_title(f'Flight profile ({mode}), peak {profile.max_velocity_fraction:.6f}c')
    ax_v.grid(True, alpha=0.3)

    ax_t.plot(profile.proper_time_yr, profile.coordinate_time_yr, color='tab:red',
              linewidth=2, label='Earth time')
    ax_t.plot(profile.proper_time_yr, profile.proper_time_yr, color='gray',
              linestyle='--', linewidth=1, label='Ship time')
    ax_t.set_xlabel('Ship proper time (years)')
    ax_t.set_ylabel('Earth time (years)')
    ax_t.legend(loc='upper left')
    ax_t.grid(True, alpha=0.3)

    fig.tight_layout()
    fig.savefig(output_path, dpi=dpi)
    plt.close(fig)


def plot_sweep(sweep: SweepResult, output_path: str, dpi: int = 150):
    """
    Plot ship and Earth years against distance on log-log axes.

    Failed points are left out of the curves and counted in the title.
    """
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)

    mask = sweep.succeeded
    fig, ax = plt.subplots(figsize=(10, 6))

    if np.any(mask):
        ax.loglog(sweep.distances_ly[mask], sweep.years_earth[mask], color='tab:red',
                  linewidth=2, label='Earth time')
        ax.loglog(sweep.distances_ly[mask], sweep.years_ship[mask], color='tab:blue',
                  linewidth=2, label='Ship time')
        ax.legend(loc='upper left')

    title = f'{sweep.acceleration_g:g} g, ' + ('decelerate at target' if sweep.decelerate else 'no deceleration')
    if sweep.n_failed:
        title += f' ({sweep.n_failed} points failed)'
    ax.set_title(title)
    ax.set_xlabel('Distance (light-years)')
    ax.set_ylabel('Elapsed time (years)')
    ax.grid(True, which='both', alpha=0.3)

    fig.tight_layout()
    fig.savefig(output_path, dpi=dpi)
    plt.close(fig)
