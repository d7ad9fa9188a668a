"""
Evaluate the calculator over a logarithmic grid of distances.

Usage:
    python scripts/run_sweep.py --acceleration 1.0 --min 0.1 --max 10000 --points 200 \
        --decelerate --output results/sweep_1g.h5 --plot results/sweep_1g.png

This script:
1. Loads configuration from YAML file
2. Runs the calculator at every grid point with a progress bar
3. Saves results to HDF5 file
4. Optionally plots ship and Earth time against distance
"""

import sys
import argparse
from pathlib import Path

import numpy as np

# Add src to path so we can import relcalc package
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from relcalc.config import CalculatorConfig, configure_logging
from relcalc.sweep import sweep_distances
from relcalc.output import save_sweep
from relcalc.visualization import plot_sweep

DEFAULT_CONFIG = Path(__file__).parent.parent / 'configs' / 'default_config.yaml'


def main():
    parser = argparse.ArgumentParser(
        description='Sweep flight calculations over a range of distances'
    )
    parser.add_argument('--config', type=str, default=str(DEFAULT_CONFIG),
                        help='Path to YAML configuration file')
    parser.add_argument('--acceleration', type=float, required=True,
                        help='Proper acceleration in g')
    parser.add_argument('--min', dest='min_ly', type=float, default=0.1,
                        help='Smallest distance in light-years')
    parser.add_argument('--max', dest='max_ly', type=float, default=1.0e4,
                        help='Largest distance in light-years')
    parser.add_argument('--points', type=int, default=100,
                        help='Number of grid points')
    parser.add_argument('--decelerate', action='store_true',
                        help='Flip at the midpoint and arrive at rest')
    parser.add_argument('--output', type=str, default='results/sweep.h5',
                        help='Output HDF5 file path')
    parser.add_argument('--plot', type=str, default=None,
                        help='Optional PNG path for a plot')

    args = parser.parse_args()

    if args.min_ly <= 0 or args.max_ly <= args.min_ly or args.points < 2:
        print("[ERROR] Need 0 < --min < --max and --points >= 2")
        sys.exit(1)

    try:
        config = CalculatorConfig.from_yaml(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] {e}")
        sys.exit(1)
    configure_logging(config.log_level)

    distances = np.geomspace(args.min_ly, args.max_ly, args.points)
    sweep = sweep_distances(args.acceleration, distances, args.decelerate, config.constants,
                            max_acceleration_g=config.max_acceleration_g, show_progress=True)

    print()
    print("=" * 70)
    print(f"Acceleration: {sweep.acceleration_g:g} g, decelerate: {sweep.decelerate}")
    print(f"Points: {sweep.n_points} ({sweep.n_failed} failed)")
    print(f"Monotonic: {sweep.is_monotonic()}")
    print("=" * 70)

    save_sweep(args.output, sweep, config.constants)
    print(f"Results saved to: {args.output}")

    if args.plot:
        plot_sweep(sweep, args.plot)
        print(f"Plot saved to: {args.plot}")


if __name__ == '__main__':
    main()
