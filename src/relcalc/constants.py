"""
Physical reference values and limits used by the flight calculator.

UNITS:
- Acceleration inputs: standard gravity (g)
- Distance inputs: light-years (ly)
- Internal arithmetic: SI (m, s, m/s, m/s²)
- Time outputs: Julian years (365.25 days)
- Velocity outputs: fraction of the speed of light (dimensionless, 0 to 1)

These are defaults only. The values actually used by a running process come
from the configuration file (see relcalc.config) and are passed into the
calculator explicitly.
"""

# Standard gravity (CGPM 1901, exact)
G_STANDARD = 9.80665  # m/s²

# Speed of light in vacuum (SI, exact)
C_LIGHT = 299792458.0  # m/s

# Julian light-year: c × 365.25 days
LIGHT_YEAR_M = 9.4607304725808e15  # m

# Julian year in seconds: 365.25 × 24 × 3600 = 31 557 600 s
SECONDS_PER_YEAR = 365.25 * 24.0 * 3600.0

# Input-sanity ceiling for acceleration. Not a physical limit; overridable
# through `limits.max_acceleration_g` in the config file.
DEFAULT_MAX_ACCELERATION_G = 1000.0

# Time outputs are rounded to this many decimal places (years)
TIME_DECIMALS = 3

# Star names follow the catalog's column width
MAX_STAR_NAME_LENGTH = 100
