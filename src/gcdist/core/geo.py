"""
Great-circle distance on a spherical Earth.

Uses the spherical law of cosines:
https://en.wikipedia.org/wiki/Great-circle_distance

Coordinates are taken as given (no range validation); e.g. a latitude of 100 degrees is
still a well-defined point for the trigonometry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import acos, cos, radians, sin

logger = logging.getLogger(__name__)

Meters = float

EARTH_RADIUS_M: Meters = 6_371_000.0

# Rounding noise allowed around [-1, 1] before the cosine is treated as a real error.
ACOS_DOMAIN_TOLERANCE = 1e-11


class AcosDomainError(ArithmeticError):
    """Cosine of the central angle fell outside [-1, 1] by more than rounding noise.

    This signals a bug in the caller or the formula, not bad input; do not catch it.
    """

    def __init__(self, value: float):
        super().__init__(f"cosine outside of acos domain ({value!r})")
        self.value = value


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float

    def to_radians(self) -> tuple[float, float]:
        return radians(self.lat), radians(self.lon)


def check_acos_domain(x: float, *, tolerance: float = ACOS_DOMAIN_TOLERANCE) -> float:
    """Return `x` clamped into [-1, 1], allowing `tolerance` of floating point error.

    Raises `AcosDomainError` when `x` is further out than that (or NaN).
    """
    if -1.0 <= x <= 1.0:
        return x
    if -1.0 - tolerance <= x < -1.0:
        return -1.0
    if 1.0 < x <= 1.0 + tolerance:
        return 1.0
    raise AcosDomainError(x)


def central_angle(p1: Coordinates, p2: Coordinates, *, log: logging.Logger | None = None) -> float:
    """Angle (radians) subtended at the sphere's center by `p1` and `p2`."""
    log = log or logger
    lat1, lon1 = p1.to_radians()
    lat2, lon2 = p2.to_radians()
    delta_lon = abs(lon1 - lon2)

    cos_central = sin(lat1) * sin(lat2) + cos(lat1) * cos(lat2) * cos(delta_lon)
    log.debug("cos_central = %r", cos_central)
    central = acos(check_acos_domain(cos_central))
    log.debug("central = %r", central)
    return central


def great_circle_distance(
    p1: Coordinates, p2: Coordinates, *, log: logging.Logger | None = None
) -> Meters:
    """Compute great-circle distance in meters between two points.

    `log` receives DEBUG diagnostics (intermediate cosine and angle); it defaults to
    this module's logger, which is silent unless logging is configured for it.
    """
    return central_angle(p1, p2, log=log) * EARTH_RADIUS_M
