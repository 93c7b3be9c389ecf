"""
Spherical-Earth geometry: coordinate value type and great circle engine
"""

from .coordinate import Coordinate

from .great_circle import (
    GreatCircle,
    EARTH_RADIUS_KM,
    KM_TO_NM,
)

from .types import (
    ParallelCrossings,
    CrossingResult,
)

__all__ = [
    # coordinate
    'Coordinate',
    # great_circle
    'GreatCircle',
    'EARTH_RADIUS_KM',
    'KM_TO_NM',
    # types
    'ParallelCrossings',
    'CrossingResult',
]
