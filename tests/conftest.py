"""
Pytest configuration for the relativistic flight calculator tests.

This file ensures the relcalc package is importable from tests and provides
shared fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src/ to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / 'src'))

from relcalc.config import PhysicalConstants, CalculatorConfig  # noqa: E402
from relcalc.catalog import Star, StarCatalog  # noqa: E402


@pytest.fixture
def constants():
    """Reference constants: g=9.80665, c=299792458, ly=9.4607304725808e15."""
    return PhysicalConstants.reference()


@pytest.fixture
def default_config_path():
    return project_root / 'configs' / 'default_config.yaml'


@pytest.fixture
def catalog():
    """Small in-memory catalog."""
    return StarCatalog([
        Star('Proxima Centauri', 4.2),
        Star('Betelgeuse', 550.0),
        Star('Rigel', 863.0),
    ])


@pytest.fixture
def config():
    return CalculatorConfig()
