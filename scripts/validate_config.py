"""
Validate a configuration file and report any issues.

Usage:
    python scripts/validate_config.py configs/default_config.yaml
"""

import sys
from pathlib import Path

# Add src to path so we can import relcalc package
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from relcalc.config import CalculatorConfig
from relcalc.catalog import StarCatalog


def main():
    if len(sys.argv) < 2:
        print("Usage: python scripts/validate_config.py <config_file.yaml>")
        sys.exit(1)

    config_path = sys.argv[1]

    print(f"Validating configuration: {config_path}")
    print("=" * 70)

    try:
        config = CalculatorConfig.from_yaml(config_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"[ERROR] {e}")
        sys.exit(1)

    print("[OK] Configuration loaded successfully")
    print()

    warnings = config.validate()

    # Only load the catalog if the path check passed
    if config.catalog_path is not None and not any(w.startswith("ERROR: Star catalog") for w in warnings):
        try:
            catalog = StarCatalog.from_yaml(config.catalog_path)
            print(f"[OK] Star catalog loaded: {len(catalog)} stars")
            print()
        except ValueError as e:
            warnings.append(f"ERROR: Star catalog invalid: {e}")

    if not warnings:
        print("[OK] All validation checks passed!")
        print()
        print("Configuration summary:")
        print(config)
        sys.exit(0)

    errors = [w for w in warnings if w.startswith("ERROR")]
    warns = [w for w in warnings if w.startswith("WARNING")]

    if errors:
        print(f"[ERROR] {len(errors)} ERROR(S) found:")
        for error in errors:
            print(f"  {error}")
        print()

    if warns:
        print(f"[WARN] {len(warns)} WARNING(S):")
        for warn in warns:
            print(f"  {warn}")
        print()

    if errors:
        print("Configuration has ERRORS and should not be used.")
        sys.exit(1)
    else:
        print("Configuration has warnings but may be usable.")
        sys.exit(0)


if __name__ == "__main__":
    main()
