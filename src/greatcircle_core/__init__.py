"""
Great Circle Core - Spherical-Earth Navigation Geometry

Distances, bearings, midpoints, intersections, cross-track/along-track
offsets, latitude extrema and parallel crossings between latitude/longitude
points on a spherical Earth.
"""

from .geometry import (
    Coordinate,
    GreatCircle,
    ParallelCrossings,
    EARTH_RADIUS_KM,
    KM_TO_NM,
)
from .utils import (
    to_radians,
    to_degrees,
    WrapTo180,
    WrapTo360,
    configure_logging,
)
from .config import Settings, get_settings


__version__ = "0.1.0"

__all__ = [
    # Main classes
    "GreatCircle",
    "Coordinate",

    # Result types
    "ParallelCrossings",

    # Constants
    "EARTH_RADIUS_KM",
    "KM_TO_NM",

    # Angle utilities
    "to_radians",
    "to_degrees",
    "WrapTo180",
    "WrapTo360",

    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
]
