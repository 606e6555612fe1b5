"""
Time conversions between simulation timestamps and astronomical time scales.

Simulation timestamps are milliseconds since the Unix epoch. Element drift
is measured in Julian centuries since J2000.
"""

from __future__ import annotations

import math
import time
from datetime import datetime, timezone

from orrery.core.constants import DAYS_PER_CENTURY, JD_J2000, JD_UNIX_EPOCH, MS_PER_DAY


def julian_date(epoch_ms: float) -> float:
    """JD = ms / 86_400_000 + 2440587.5."""
    return epoch_ms / MS_PER_DAY + JD_UNIX_EPOCH


def centuries_since_j2000(jd: float) -> float:
    """T = (JD - 2451545.0) / 36525.0."""
    return (jd - JD_J2000) / DAYS_PER_CENTURY


def centuries_since_j2000_ms(epoch_ms: float) -> float:
    return centuries_since_j2000(julian_date(epoch_ms))


def deg_to_rad(deg: float) -> float:
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    return rad * (180.0 / math.pi)


def now_ms() -> float:
    """Current wall-clock time in milliseconds since the Unix epoch."""
    return time.time() * 1000.0


def datetime_to_epoch_ms(dt: datetime) -> float:
    """
    Convert a datetime to milliseconds since the Unix epoch.
    Naive datetimes are taken to be UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.timestamp() * 1000.0
