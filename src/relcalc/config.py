"""
Configuration management for the relativistic flight calculator.

This module handles loading and parsing YAML configuration files into
read-only settings that are built once at startup and shared by every
calculation. All physical constants are stored in SI units.
"""

from dataclasses import dataclass, field
from typing import List, Any, Optional
import logging
import yaml
from pathlib import Path
import numpy as np

from relcalc import constants as const

logger = logging.getLogger(__name__)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class PhysicalConstants:
    """
    Constants bundle consumed by the calculator.

    All values in SI units and strictly positive:
    - g: standard gravity [m/s²], the unit of acceleration inputs
    - c: speed of light [m/s]
    - light_year_m: length of one light-year [m]
    """

    g: float = const.G_STANDARD
    c: float = const.C_LIGHT
    light_year_m: float = const.LIGHT_YEAR_M

    def __post_init__(self):
        for name in ('g', 'c', 'light_year_m'):
            value = getattr(self, name)
            if not np.isfinite(value) or value <= 0:
                raise ValueError(f"Physical constant '{name}' must be positive and finite, got {value}")

    @classmethod
    def reference(cls) -> 'PhysicalConstants':
        """Reference values: g = 9.80665, c = 299792458, ly = 9.4607304725808e15."""
        return cls(g=const.G_STANDARD, c=const.C_LIGHT, light_year_m=const.LIGHT_YEAR_M)

    def __repr__(self):
        return (f"PhysicalConstants(g={self.g} m/s², c={self.c:.0f} m/s, "
                f"ly={self.light_year_m:.6e} m)")


@dataclass
class CalculatorConfig:
    """
    Container for all process-level settings.

    The constants bundle is immutable; the config object itself is only
    mutated while it is being built (tests override fields directly).
    """

    constants: PhysicalConstants = field(default_factory=PhysicalConstants.reference)

    # Limits
    max_acceleration_g: float = const.DEFAULT_MAX_ACCELERATION_G

    # Star catalog (YAML), None disables lookups by name
    catalog_path: Optional[str] = None

    # Diagnostics
    log_level: str = "INFO"

    def validate(self) -> List[str]:
        """
        Perform sanity checks on configuration parameters.

        Returns:
            List of warning/error messages. Empty list if all checks pass.
        """
        warnings = []

        if not np.isfinite(self.max_acceleration_g) or self.max_acceleration_g <= 0:
            warnings.append(
                f"ERROR: max_acceleration_g must be positive and finite, got {self.max_acceleration_g}"
            )
        elif self.max_acceleration_g > 1.0e6:
            warnings.append(
                f"WARNING: max_acceleration_g ({self.max_acceleration_g:.3g} g) is very large. "
                f"Most inputs near the ceiling will overflow."
            )

        if str(self.log_level).upper() not in LOG_LEVELS:
            warnings.append(f"ERROR: log_level must be one of {', '.join(LOG_LEVELS)}, got '{self.log_level}'")

        if self.catalog_path is not None and not Path(self.catalog_path).exists():
            warnings.append(f"ERROR: Star catalog not found: {self.catalog_path}")

        # Non-reference constants are legal but flagged
        reference = PhysicalConstants.reference()
        for name in ('g', 'c', 'light_year_m'):
            value = getattr(self.constants, name)
            expected = getattr(reference, name)
            if abs(value - expected) / expected > 1e-6:
                warnings.append(
                    f"WARNING: Constant '{name}' = {value:.10g} differs from the reference "
                    f"value {expected:.10g}"
                )

        return warnings

    @classmethod
    def from_yaml(cls, filepath: str) -> 'CalculatorConfig':
        """
        Load configuration from a YAML file.

        Every section is optional; anything missing falls back to the
        reference values in relcalc.constants.

        Args:
            filepath: Path to YAML configuration file

        Returns:
            CalculatorConfig object

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        def to_float(key: str, value: Any) -> float:
            """Convert value to float, handling YAML quirks with scientific notation."""
            if isinstance(value, bool):
                raise ValueError(f"{key}: expected a number, got {value!r}")
            try:
                return float(value)
            except (TypeError, ValueError):
                raise ValueError(f"{key}: expected a number, got {value!r}") from None

        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError(f"Configuration file must contain a mapping: {filepath}")

        # Physical constants (SI)
        constants_data = config.get('physical_constants') or {}
        constants = PhysicalConstants(
            g=to_float('standard_gravity_m_s2',
                       constants_data.get('standard_gravity_m_s2', const.G_STANDARD)),
            c=to_float('speed_of_light_m_s',
                       constants_data.get('speed_of_light_m_s', const.C_LIGHT)),
            light_year_m=to_float('light_year_m',
                                  constants_data.get('light_year_m', const.LIGHT_YEAR_M)),
        )

        # Limits
        limits = config.get('limits') or {}
        max_acceleration_g = to_float(
            'max_acceleration_g',
            limits.get('max_acceleration_g', const.DEFAULT_MAX_ACCELERATION_G)
        )
        if not np.isfinite(max_acceleration_g) or max_acceleration_g <= 0:
            raise ValueError(f"max_acceleration_g must be positive and finite, got {max_acceleration_g}")

        # Star catalog, relative paths are resolved against the config file
        catalog = config.get('catalog') or {}
        catalog_path = catalog.get('path')
        if catalog_path is not None:
            catalog_file = Path(catalog_path)
            if not catalog_file.is_absolute():
                catalog_file = config_path.parent / catalog_file
            catalog_path = str(catalog_file)

        # Diagnostics
        diagnostics = config.get('diagnostics') or {}
        log_level = str(diagnostics.get('log_level', 'INFO')).upper()

        logger.debug("Loaded configuration from %s", config_path)

        return cls(
            constants=constants,
            max_acceleration_g=max_acceleration_g,
            catalog_path=catalog_path,
            log_level=log_level
        )

    def __repr__(self):
        """Human-readable representation."""
        lines = [
            f"Constants: {self.constants!r}",
            f"Max acceleration: {self.max_acceleration_g:g} g",
            f"Star catalog: {self.catalog_path or '(none)'}",
            f"Log level: {self.log_level}",
        ]
        return "\n".join(lines)


def configure_logging(level: str = "INFO"):
    """Configure root logging for scripts. Library code only creates loggers."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
