"""
Error types raised by the ephemeris engine.

The host application decides what to do with them: a ConvergenceFailure
carries a usable estimate, the other two indicate bad configuration.
"""

from __future__ import annotations

from typing import Any, Optional


class EphemerisError(Exception):
    """Base class for ephemeris errors."""


class ConvergenceFailure(EphemerisError, RuntimeError):
    """Kepler solver hit its iteration cap before meeting the tolerance."""

    def __init__(self, last_estimate: float, residual: float, iterations: int):
        self.last_estimate = last_estimate
        self.residual = residual
        self.iterations = iterations
        super().__init__(
            f"Kepler solver did not converge within {iterations} iterations "
            f"(E={last_estimate!r}, residual={residual:.3e})."
        )


class InvalidEccentricity(EphemerisError, ValueError):
    """Eccentricity outside [0, 1): no parabolic or hyperbolic solving."""

    def __init__(self, eccentricity: float, T: Optional[float] = None, body: Any = None):
        self.eccentricity = eccentricity
        self.T = T
        self.body = body
        where = ""
        if body is not None:
            where += f" for {body}"
        if T is not None:
            where += f" at T={T:.6f} centuries"
        super().__init__(f"Eccentricity must be in [0, 1){where}. Got: {eccentricity}")


class UnknownBody(EphemerisError, LookupError):
    """Body identifier has no element set."""

    def __init__(self, body: Any):
        self.body = body
        super().__init__(f"Unknown body: {body!r}")
