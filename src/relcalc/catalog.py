"""
Read-only star catalog: resolves a star name to its distance.

The catalog is loaded once from YAML and never written. Names are matched
exactly (case-sensitive).

YAML layout:

    stars:
      - name: Proxima Centauri
        distance_ly: 4.2465
      - name: Sirius
        distance_ly: 8.6
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional
import logging
from pathlib import Path

import numpy as np
import yaml

from relcalc import constants as const

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Star:
    name: str
    distance_ly: float

    def __repr__(self):
        return f"Star({self.name!r}, {self.distance_ly:g} ly)"


class StarCatalog:
    """Name → Star mapping with the catalog's entity constraints enforced."""

    def __init__(self, stars: Iterable[Star] = ()):
        self._stars: Dict[str, Star] = {}
        for star in stars:
            if not 1 <= len(star.name) <= const.MAX_STAR_NAME_LENGTH:
                raise ValueError(
                    f"Star name must be between 1 and {const.MAX_STAR_NAME_LENGTH} characters, "
                    f"got {star.name!r}"
                )
            if not np.isfinite(star.distance_ly) or star.distance_ly <= 0:
                raise ValueError(f"{star.name}: distance must be a positive number, got {star.distance_ly}")
            if star.name in self._stars:
                raise ValueError(f"Duplicate star name in catalog: {star.name!r}")
            self._stars[star.name] = star

    def get(self, name: str) -> Optional[Star]:
        return self._stars.get(name)

    def names(self) -> List[str]:
        return sorted(self._stars)

    def __contains__(self, name) -> bool:
        return name in self._stars

    def __len__(self) -> int:
        return len(self._stars)

    def __iter__(self):
        return iter(self._stars.values())

    @classmethod
    def from_yaml(cls, filepath: str) -> 'StarCatalog':
        """
        Load a catalog from YAML.

        Raises:
            FileNotFoundError: If the catalog file doesn't exist
            ValueError: If an entry is malformed or a name repeats
        """
        catalog_path = Path(filepath)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Star catalog not found: {filepath}")

        with open(catalog_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Star catalog must contain a mapping with a 'stars' list: {filepath}")

        entries = data.get('stars') or []
        stars = []
        for i, entry in enumerate(entries):
            if not isinstance(entry, dict) or 'name' not in entry or 'distance_ly' not in entry:
                raise ValueError(f"Catalog entry {i} must have 'name' and 'distance_ly'")
            message = f"Catalog entry {i} ({entry['name']}): distance_ly must be a number"
            if isinstance(entry['distance_ly'], bool):
                raise ValueError(message)
            try:
                distance = float(entry['distance_ly'])
            except (TypeError, ValueError):
                raise ValueError(message) from None
            stars.append(Star(name=str(entry['name']), distance_ly=distance))

        catalog = cls(stars)
        logger.info("Loaded %d stars from %s", len(catalog), catalog_path)
        return catalog
