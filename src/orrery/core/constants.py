from __future__ import annotations

import math

# Julian Date of the Unix epoch (1970-01-01T00:00:00Z)
JD_UNIX_EPOCH: float = 2440587.5

# Julian Date of the J2000.0 reference epoch (2000-01-01T12:00:00)
JD_J2000: float = 2451545.0

SECONDS_PER_DAY: float = 86400.0

# Days in a Julian century
DAYS_PER_JULIAN_CENTURY: float = 36525.0

DEG_PER_RAD: float = 180.0 / math.pi

# Kepler iteration stops once successive eccentric anomalies differ by
# less than 1e-4 rad, expressed in degrees (~0.0057 deg)
KEPLER_TOL_DEG: float = 1.0 / 10000.0 * DEG_PER_RAD

# Iteration cap for the fixed-point Kepler solver
KEPLER_MAX_ITER: int = 1000
