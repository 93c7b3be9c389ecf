"""
Angle conversion and normalization utilities.

All functions operate on plain floats. Degrees in, degrees out unless the
function name says otherwise.
"""
import numpy as np
from math import pi


def to_radians(deg: float) -> float:
    """Convert an angle from degrees to radians."""
    return deg * pi / 180


def to_degrees(rad: float) -> float:
    """Convert an angle from radians to degrees."""
    return rad * 180 / pi


def WrapTo360(deg: float) -> float:
    """
    Transform an angle in degrees to the range [0, 360).

    Values already inside the range are returned unchanged.

    Args:
        deg: Angle in degrees (any real value)

    Returns:
        Equivalent angle in [0, 360)
    """
    if 0 <= deg < 360:
        return deg
    return (deg % 360 + 360) % 360


def WrapTo180(deg: float) -> float:
    """
    Transform an angle in degrees to the range [-180, 180).

    Used for longitudes and longitude differences that may span the
    antimeridian.

    Args:
        deg: Angle in degrees (any real value)

    Returns:
        Equivalent angle in [-180, 180)
    """
    if 0 <= deg < 180:
        return deg
    return (deg + 540) % 360 - 180


def clamp_unit(value: float) -> float:
    """
    Clamp a sine/cosine value into [-1, 1] before it is passed to asin/acos.

    Floating-point round-off can push an exact +-1 a few ulps outside the
    domain, which would otherwise raise a math domain error.
    """
    return float(np.clip(value, -1.0, 1.0))
