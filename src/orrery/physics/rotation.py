"""
Body spin and axis orientation for renderers.

Spin is measured from J2000 using the same epoch math as the element drift,
so a body's surface orientation stays consistent with its orbital position.
"""

from __future__ import annotations

import math
from typing import Tuple

from orrery.core.constants import JD_J2000
from orrery.core.timeconv import deg_to_rad, julian_date
from orrery.physics.elements import OrbitalElementSet
from orrery.physics.kepler import wrap_to_2pi


def hours_since_j2000(time_ms: float) -> float:
    return (julian_date(time_ms) - JD_J2000) * 24.0


def spin_angle_rad(element_set: OrbitalElementSet, time_ms: float) -> float:
    """
    Rotation about the body's own axis, wrapped to [0, 2π).
    A negative rotation period spins retrograde. The angle is zero
    spin_phase_hours after J2000.
    """
    hours = hours_since_j2000(time_ms) - element_set.spin_phase_hours
    turns = hours / element_set.rotation_period_hours
    # Fractional turn only
    return wrap_to_2pi(2.0 * math.pi * math.fmod(turns, 1.0))


def axial_orientation(element_set: OrbitalElementSet) -> Tuple[float, float]:
    """(tilt, direction) of the spin axis in radians."""
    return deg_to_rad(element_set.axial_tilt_deg), deg_to_rad(element_set.axial_dir_deg)
