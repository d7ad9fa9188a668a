"""
Run a single relativistic flight calculation.

Usage:
    python scripts/run_calculation.py --acceleration 1.0 --distance 4.2 --decelerate
    python scripts/run_calculation.py --acceleration 0.3 --star Betelgeuse --decelerate
    python scripts/run_calculation.py --acceleration 1.0 --distance 4.2 --profile profile.png

Exit codes:
    0  success
    1  configuration could not be loaded
    2  invalid input
    3  physically invalid scenario
    4  numeric overflow
    5  star not found
"""

import sys
import argparse
from pathlib import Path

# Add src to path so we can import relcalc package
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from relcalc.config import CalculatorConfig, configure_logging
from relcalc.service import FlightCalculatorService

DEFAULT_CONFIG = Path(__file__).parent.parent / 'configs' / 'default_config.yaml'


def main():
    parser = argparse.ArgumentParser(
        description='Calculate ship time, Earth time and peak velocity for a relativistic flight'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=str(DEFAULT_CONFIG),
        help='Path to YAML configuration file'
    )
    parser.add_argument(
        '--acceleration',
        type=float,
        required=True,
        help='Proper acceleration in g'
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        '--distance',
        type=float,
        help='Distance in light-years'
    )
    target.add_argument(
        '--star',
        type=str,
        help='Star name from the catalog'
    )
    parser.add_argument(
        '--decelerate',
        action='store_true',
        help='Flip at the midpoint and arrive at rest'
    )
    parser.add_argument(
        '--profile',
        type=str,
        default=None,
        help='Also plot the flight profile to this PNG path'
    )

    args = parser.parse_args()

    try:
        config = CalculatorConfig.from_yaml(args.config)
        configure_logging(config.log_level)
        service = FlightCalculatorService.from_config(config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] {e}")
        sys.exit(1)

    if args.star is not None:
        outcome = service.calculate_by_name(args.star, args.acceleration, args.decelerate)
        distance = service.catalog.get(args.star).distance_ly if outcome.ok else None
    else:
        outcome = service.calculate_by_value(args.acceleration, args.distance, args.decelerate)
        distance = args.distance

    if not outcome.ok:
        print(f"[ERROR] {outcome.error}")
        sys.exit(outcome.kind.exit_code)

    for key, value in outcome.value.as_dict().items():
        print(f"{key}: {value}")

    if args.profile:
        from relcalc.trajectory import flight_profile
        from relcalc.visualization import plot_flight_profile

        profile = flight_profile(args.acceleration, distance, args.decelerate, config.constants,
                                 max_acceleration_g=config.max_acceleration_g).unwrap()
        plot_flight_profile(profile, args.profile)
        print(f"Profile saved to: {args.profile}")


if __name__ == '__main__':
    main()
