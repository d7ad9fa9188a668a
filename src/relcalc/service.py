"""
Entry points for the two calculation call shapes: by distance value and by
star name. Both end in relcalc.calculator.calculate; the by-name shape adds
a catalog lookup that can fail with NOT_FOUND.
"""

import logging
from typing import Optional

import numpy as np

from relcalc.calculator import calculate
from relcalc.catalog import StarCatalog
from relcalc.config import CalculatorConfig
from relcalc.errors import ErrorKind, Outcome

logger = logging.getLogger(__name__)


class FlightCalculatorService:
    """
    Binds a configuration (constants, limits) and an optional star catalog.

    Holds no mutable state after construction, so one instance can serve
    any number of concurrent callers.
    """

    def __init__(self, config: CalculatorConfig, catalog: Optional[StarCatalog] = None):
        if not np.isfinite(config.max_acceleration_g) or config.max_acceleration_g <= 0:
            raise ValueError(f"max_acceleration_g must be positive and finite, got {config.max_acceleration_g}")
        self.config = config
        self.catalog = catalog

    @classmethod
    def from_config(cls, config: CalculatorConfig) -> 'FlightCalculatorService':
        """Build the service, loading the catalog named in the config if any."""
        catalog = None
        if config.catalog_path is not None:
            catalog = StarCatalog.from_yaml(config.catalog_path)
        return cls(config, catalog)

    def calculate_by_value(self, acceleration_g: float, distance_ly: float,
                           decelerate_at_target: bool) -> Outcome:
        outcome = calculate(
            acceleration_g,
            distance_ly,
            decelerate_at_target,
            self.config.constants,
            max_acceleration_g=self.config.max_acceleration_g
        )
        self._log_outcome(outcome, f"{acceleration_g} g, {distance_ly} ly, decelerate={decelerate_at_target}")
        return outcome

    def calculate_by_name(self, name: str, acceleration_g: float,
                          decelerate_at_target: bool) -> Outcome:
        star = self.catalog.get(name) if self.catalog is not None else None
        if star is None:
            logger.warning("Star not found: %r", name)
            return Outcome.failure(ErrorKind.NOT_FOUND, "star not found")

        return self.calculate_by_value(acceleration_g, star.distance_ly, decelerate_at_target)

    @staticmethod
    def _log_outcome(outcome: Outcome, description: str):
        if outcome.ok:
            logger.debug("Calculated %s: %s", description, outcome.value)
        else:
            logger.warning("Calculation failed (%s) for %s: %s",
                           outcome.kind.value, description, outcome.error.message)
