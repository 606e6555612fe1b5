from __future__ import annotations

# Milliseconds in one day
MS_PER_DAY: float = 86_400_000.0

# Julian Date of the Unix epoch (1970-01-01T00:00:00Z)
JD_UNIX_EPOCH: float = 2440587.5

# Julian Date of J2000.0 (2000-01-01T12:00:00 TT)
JD_J2000: float = 2451545.0

# Days in one Julian century
DAYS_PER_CENTURY: float = 36525.0

# Scene length units per astronomical unit (shared by every body)
AU_SCENE_UNITS: float = 1000.0

# Sidereal year implied by the Gaussian gravitational constant, in days.
# P = YEAR_GAUSS_DAYS * a^1.5 with a in AU.
YEAR_GAUSS_DAYS: float = 365.256898326
