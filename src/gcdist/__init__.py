"""Great-circle distance between two lat/lon points on a spherical Earth."""

from gcdist.config.settings import get_settings
from gcdist.core.geo import (
    ACOS_DOMAIN_TOLERANCE,
    EARTH_RADIUS_M,
    AcosDomainError,
    Coordinates,
    Meters,
    central_angle,
    check_acos_domain,
    great_circle_distance,
)
from gcdist.core.logging import configure_logging

__all__ = [
    "ACOS_DOMAIN_TOLERANCE",
    "EARTH_RADIUS_M",
    "AcosDomainError",
    "Coordinates",
    "Meters",
    "central_angle",
    "check_acos_domain",
    "configure_logging",
    "get_settings",
    "great_circle_distance",
]
