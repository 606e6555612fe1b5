# Elliptic Kepler equation

from __future__ import annotations

import math

from orrery.core.errors import ConvergenceFailure, InvalidEccentricity


def wrap_to_2pi(angle_rad: float) -> float:
    """Wrap angle to [0, 2π)."""
    two_pi = 2.0 * math.pi
    return angle_rad % two_pi


def wrap_to_pi(angle_rad: float) -> float:
    """Wrap angle to (-π, π]."""
    two_pi = 2.0 * math.pi
    wrapped = (angle_rad + math.pi) % two_pi - math.pi
    if wrapped <= -math.pi:
        wrapped += two_pi
    return wrapped


def kepler_residual(E_rad: float, M_rad: float, e: float) -> float:
    """E - e sin(E) - M."""
    return E_rad - e * math.sin(E_rad) - M_rad


def solve_keplers_equation(M_rad: float, e: float, tol: float = 1e-6, max_iter: int = 30) -> float:
    """
    Solve Kepler's equation for elliptic orbits:
        M = E - e sin(E)
    using Newton-Raphson.

    M is first reduced to (-π, π]; the returned E satisfies the equation for
    the reduced M, so it lies in the same range.

    Args:
        M_rad: Mean anomaly (rad), any real value
        e: eccentricity (0 <= e < 1)
        tol: convergence tolerance on the Newton step
        max_iter: iteration cap

    Returns:
        E_rad: Eccentric anomaly (rad)

    Raises:
        InvalidEccentricity: e outside [0, 1)
        ConvergenceFailure: tolerance not met within max_iter steps
    """
    if not (0.0 <= e < 1.0):
        raise InvalidEccentricity(e)

    M = wrap_to_pi(M_rad)

    if e == 0.0:
        return M

    if e < 0.8:
        E = M + e * math.sin(M) * (1.0 + e * math.cos(M))
    else:
        # f is convex on [0, π] and concave on [-π, 0]: iterates from ±π
        # approach the root monotonically
        E = math.copysign(math.pi, M)

    for _ in range(max_iter):
        f = E - e * math.sin(E) - M
        fp = 1.0 - e * math.cos(E)
        dE = -f / fp
        E += dE
        if abs(dE) < tol:
            return E

    raise ConvergenceFailure(E, kepler_residual(E, M, e), max_iter)
