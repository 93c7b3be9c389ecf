"""
Great Circle Calculations on a Spherical Earth

A great circle (orthodrome) is the intersection of the sphere with a plane
through its centre. Formulas follow Chris Veness' "Movable Type" spherical
geodesy scripts (https://www.movable-type.co.uk/scripts/latlong.html).

Conventions:
-------------
- Coordinates in decimal degrees, positive north / east
- Bearings in degrees from North, clockwise
- Distances in kilometres unless the method name says otherwise
- All trigonometry is done in radians internally
"""
import logging
from math import acos, asin, atan2, cos, pi, sin, sqrt
from typing import Optional

import numpy as np

from ..config import DEFAULT_EARTH_RADIUS_KM, get_settings
from ..utils import WrapTo180, WrapTo360, clamp_unit, to_degrees, to_radians
from .coordinate import Coordinate
from .types import CrossingResult, ParallelCrossings

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = DEFAULT_EARTH_RADIUS_KM
KM_TO_NM = 1 / 1.852

# cos(asin(+-1)) is ~6e-17, never exactly 0
POLE_TOLERANCE = 1e-12


class GreatCircle:
    """
    Spherical-Earth great circle calculator.

    Instances hold only the Earth radius, so a single instance can be shared
    freely between threads.

    References:
        - Haversine formula (distance)
        - Spherical law of cosines / sines (bearings, intersections)
        - Clairaut's formula (maximum latitude)
    """

    def __init__(self, earth_radius: Optional[float] = None):
        """
        Args:
            earth_radius: Sphere radius in kilometres. Defaults to the
                configured `earth_radius_km` (6372.8 unless overridden).

        Raises:
            ValueError: If the radius is not positive
        """
        if earth_radius is None:
            earth_radius = get_settings().earth_radius_km
        if not earth_radius > 0:
            raise ValueError(f"earth_radius must be positive. Got {earth_radius}")
        self.earth_radius = float(earth_radius)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(earth_radius={self.earth_radius})"

    # ========================================
    # Distances and bearings
    # ========================================

    def distance(self, start_point: Coordinate, end_point: Coordinate) -> float:
        """
        Great circle distance between two points (Haversine formula).

        Args:
            start_point: Initial coordinates
            end_point: Final coordinates

        Returns:
            Distance in kilometres
        """
        lat1 = start_point.latitude_in_radians
        lat2 = end_point.latitude_in_radians
        d_lat = to_radians(end_point.latitude - start_point.latitude)
        d_lon = to_radians(end_point.longitude - start_point.longitude)

        a = sin(d_lat / 2) ** 2 + sin(d_lon / 2) ** 2 * cos(lat1) * cos(lat2)
        c = 2 * asin(sqrt(min(a, 1.0)))
        return self.earth_radius * c

    def distance_in_nm(self, start_point: Coordinate, end_point: Coordinate) -> float:
        """Great circle distance in nautical miles."""
        return self.distance(start_point, end_point) * KM_TO_NM

    def bearing(self, start_point: Coordinate, end_point: Coordinate) -> float:
        """
        Initial bearing (forward azimuth) from start_point towards end_point.

        Followed in a straight line along the great circle arc this heading
        takes you from the start point to the end point, although the heading
        itself changes along the way.

        Args:
            start_point: Initial coordinates
            end_point: Final coordinates

        Returns:
            Bearing in degrees, [0, 360). 0.0 when both points are equal.
        """
        if start_point == end_point:
            return 0.0

        lat1 = start_point.latitude_in_radians
        lat2 = end_point.latitude_in_radians
        d_lon = end_point.longitude_in_radians - start_point.longitude_in_radians

        y = sin(d_lon) * cos(lat2)
        x = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(d_lon)
        return WrapTo360(to_degrees(atan2(y, x)))

    def final_bearing(self, start_point: Coordinate, end_point: Coordinate) -> float:
        """
        Bearing on arrival at end_point when travelling from start_point.

        Returns:
            Bearing in degrees, [0, 360)
        """
        return WrapTo360(self.bearing(end_point, start_point) + 180)

    # ========================================
    # Points along the path
    # ========================================

    def midpoint(self, start_point: Coordinate, end_point: Coordinate) -> Coordinate:
        """
        Half-way point along the great circle between two points.

        Args:
            start_point: Initial coordinates
            end_point: Final coordinates

        Returns:
            Midpoint coordinates
        """
        lat1 = start_point.latitude_in_radians
        lat2 = end_point.latitude_in_radians
        lon1 = start_point.longitude_in_radians
        d_lon = end_point.longitude_in_radians - lon1

        b_x = cos(lat2) * cos(d_lon)
        b_y = cos(lat2) * sin(d_lon)

        lat = atan2(sin(lat1) + sin(lat2), sqrt((cos(lat1) + b_x) ** 2 + b_y ** 2))
        lon = lon1 + atan2(b_y, cos(lat1) + b_x)
        return Coordinate(to_degrees(lat), to_degrees(lon))

    def intermediate(
        self,
        start_point: Coordinate,
        end_point: Coordinate,
        fraction: float
    ) -> Coordinate:
        """
        Point at the given fraction of the way from start_point to end_point.

        Args:
            start_point: Initial coordinates
            end_point: Final coordinates
            fraction: 0 = start_point, 1 = end_point. Values outside [0, 1]
                extrapolate along the same great circle.

        Returns:
            Intermediate coordinates
        """
        if start_point == end_point:
            return start_point

        lat1 = start_point.latitude_in_radians
        lat2 = end_point.latitude_in_radians
        lon1 = start_point.longitude_in_radians
        lon2 = end_point.longitude_in_radians

        d_lat = lat2 - lat1
        d_lon = lon2 - lon1
        a = sin(d_lat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(d_lon / 2) ** 2
        a = min(a, 1.0)
        c = 2 * atan2(sqrt(a), sqrt(1 - a))

        # Distinct values whose separation underflows, e.g. longitudes 1e-300 apart
        if sin(c) == 0.0:
            logger.debug("intermediate: zero angular distance between %s and %s", start_point, end_point)
            return start_point

        weight_a = sin((1 - fraction) * c) / sin(c)
        weight_b = sin(fraction * c) / sin(c)
        x = weight_a * cos(lat1) * cos(lon1) + weight_b * cos(lat2) * cos(lon2)
        y = weight_a * cos(lat1) * sin(lon1) + weight_b * cos(lat2) * sin(lon2)
        z = weight_a * sin(lat1) + weight_b * sin(lat2)

        lat = atan2(z, sqrt(x * x + y * y))
        lon = atan2(y, x)
        return Coordinate(to_degrees(lat), to_degrees(lon))

    def destination(
        self,
        start_point: Coordinate,
        bearing: float,
        distance: float
    ) -> Coordinate:
        """
        Destination reached after travelling `distance` km along a great
        circle from start_point on the given initial bearing.

        Args:
            start_point: Initial coordinates
            bearing: Initial bearing (degrees, 0=North, CW)
            distance: Distance travelled (km)

        Returns:
            Destination coordinates
        """
        lat1 = start_point.latitude_in_radians
        lon1 = start_point.longitude_in_radians
        theta = to_radians(bearing)
        delta = distance / self.earth_radius

        sin_lat = sin(lat1) * cos(delta) + cos(lat1) * sin(delta) * cos(theta)
        lat = asin(clamp_unit(sin_lat))

        y = sin(theta) * sin(delta) * cos(lat1)
        x = cos(delta) - sin(lat1) * sin(lat)
        lon = lon1 + atan2(y, x)
        return Coordinate(to_degrees(lat), to_degrees(lon))

    def intersection(
        self,
        first_point: Coordinate,
        first_bearing: float,
        second_point: Coordinate,
        second_bearing: float
    ) -> Optional[Coordinate]:
        """
        Intersection of two paths given by start points and initial bearings.

        Args:
            first_point: Start of the first path
            first_bearing: Initial bearing of the first path (degrees)
            second_point: Start of the second path
            second_bearing: Initial bearing of the second path (degrees)

        Returns:
            Intersection coordinates, or None when the paths coincide along
            the connecting great circle or diverge without meeting ahead
        """
        if first_point == second_point:
            logger.debug("intersection: coincident start points %s", first_point)
            return first_point

        lat1 = first_point.latitude_in_radians
        lon1 = first_point.longitude_in_radians
        lat2 = second_point.latitude_in_radians
        lon2 = second_point.longitude_in_radians
        theta13 = to_radians(first_bearing)
        theta23 = to_radians(second_bearing)

        d_lat = lat2 - lat1
        d_lon = lon2 - lon1

        # Angular distance between the two start points
        haversine = sin(d_lat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(d_lon / 2) ** 2
        delta12 = 2 * asin(sqrt(min(haversine, 1.0)))
        if sin(delta12) == 0.0:
            logger.debug("intersection: start points %s and %s are not separable", first_point, second_point)
            return first_point

        # Bearings between the start points; near a pole the ratios overshoot +-1
        cos_theta_a = (sin(lat2) - sin(lat1) * cos(delta12)) / (sin(delta12) * cos(lat1))
        cos_theta_b = (sin(lat1) - sin(lat2) * cos(delta12)) / (sin(delta12) * cos(lat2))
        theta_a = acos(clamp_unit(cos_theta_a))
        theta_b = acos(clamp_unit(cos_theta_b))

        if sin(d_lon) > 0:
            theta12 = theta_a
            theta21 = 2 * pi - theta_b
        else:
            theta12 = 2 * pi - theta_a
            theta21 = theta_b

        alpha1 = theta13 - theta12  # angle 2-1-3
        alpha2 = theta21 - theta23  # angle 1-2-3

        if sin(alpha1) == 0.0 and sin(alpha2) == 0.0:
            logger.debug("intersection: infinite solutions along the connecting great circle")
            return None
        if sin(alpha1) * sin(alpha2) < 0:
            logger.debug("intersection: paths diverge, no intersection ahead")
            return None

        cos_alpha3 = -cos(alpha1) * cos(alpha2) + sin(alpha1) * sin(alpha2) * cos(delta12)
        delta13 = atan2(
            sin(delta12) * sin(alpha1) * sin(alpha2),
            cos(alpha2) + cos(alpha1) * cos_alpha3
        )

        lat = asin(clamp_unit(sin(lat1) * cos(delta13) + cos(lat1) * sin(delta13) * cos(theta13)))
        d_lon13 = atan2(
            sin(theta13) * sin(delta13) * cos(lat1),
            cos(delta13) - sin(lat1) * sin(lat)
        )
        lon = lon1 + d_lon13
        return Coordinate(to_degrees(lat), to_degrees(lon))

    # ========================================
    # Track offsets
    # ========================================

    def cross_track_distance(
        self,
        current_point: Coordinate,
        start_point: Coordinate,
        end_point: Coordinate
    ) -> float:
        """
        Signed distance from current_point to the great circle path running
        from start_point to end_point.

        Args:
            current_point: Point whose offset from the path is wanted
            start_point: Start of the path
            end_point: End of the path

        Returns:
            Distance in km. Positive: right of the path, Negative: left of the path.
        """
        if current_point == start_point:
            return 0.0

        delta13 = self.distance(start_point, current_point) / self.earth_radius
        theta13 = to_radians(self.bearing(start_point, current_point))
        theta12 = to_radians(self.bearing(start_point, end_point))

        delta_xt = asin(clamp_unit(sin(delta13) * sin(theta13 - theta12)))
        return delta_xt * self.earth_radius

    def along_track_distance_to(
        self,
        current_point: Coordinate,
        start_point: Coordinate,
        end_point: Coordinate
    ) -> float:
        """
        How far current_point is along the path from start_point towards
        end_point.

        If a perpendicular is dropped from current_point onto the path, this
        is the distance from start_point to the foot of that perpendicular.

        Args:
            current_point: Point projected onto the path
            start_point: Start of the path
            end_point: End of the path

        Returns:
            Distance in km. Negative when the foot lies behind start_point.
        """
        if current_point == start_point:
            return 0.0

        delta13 = self.distance(start_point, current_point) / self.earth_radius
        theta13 = to_radians(self.bearing(start_point, current_point))
        theta12 = to_radians(self.bearing(start_point, end_point))

        delta_xt = asin(clamp_unit(sin(delta13) * sin(theta12 - theta13)))
        cos_xt = abs(cos(delta_xt))
        if cos_xt < POLE_TOLERANCE:
            # current_point is a pole of the path; every foot is a quarter circle away
            logger.debug("along_track_distance_to: %s is a pole of the path", current_point)
            delta_at = pi / 2
        else:
            delta_at = acos(clamp_unit(cos(delta13) / cos_xt))

        return delta_at * float(np.sign(cos(theta12 - theta13))) * self.earth_radius

    # ========================================
    # Latitude extrema and parallels
    # ========================================

    def max_latitude(self, start_point: Coordinate, bearing: float) -> float:
        """
        Maximum latitude reached travelling on a great circle from start_point
        on the given bearing (Clairaut's formula).

        Negate the result for the minimum latitude in the southern hemisphere.
        The sine of the bearing is used as is, so bearings with a negative sine
        give a value above 90.

        Args:
            start_point: Initial coordinates
            bearing: Initial bearing (degrees)

        Returns:
            Latitude in degrees
        """
        return to_degrees(acos(sin(to_radians(bearing)) * cos(start_point.latitude_in_radians)))

    def crossing_parallels(
        self,
        start_point: Coordinate,
        end_point: Coordinate,
        latitude: float
    ) -> CrossingResult:
        """
        Pair of meridians at which the great circle through two points
        crosses the given latitude.

        Args:
            start_point: Initial coordinates
            end_point: Final coordinates
            latitude: Parallel to cross (degrees)

        Returns:
            ParallelCrossings(first, second) in degrees [-180, 180), or an
            empty tuple when the great circle never reaches the latitude
        """
        if start_point == end_point:
            return ()

        lat = to_radians(latitude)
        lat1 = start_point.latitude_in_radians
        lat2 = end_point.latitude_in_radians
        lon1 = start_point.longitude_in_radians
        d_lon = end_point.longitude_in_radians - lon1

        x = sin(lat1) * cos(lat2) * cos(lat) * sin(d_lon)
        y = sin(lat1) * cos(lat2) * cos(lat) * cos(d_lon) - cos(lat1) * sin(lat2) * cos(lat)
        z = cos(lat1) * cos(lat2) * sin(lat) * sin(d_lon)

        if z * z > x * x + y * y:
            logger.debug("crossing_parallels: latitude %s is never reached", latitude)
            return ()
        if x == 0.0 and y == 0.0:
            logger.debug("crossing_parallels: degenerate great circle for latitude %s", latitude)
            return ()

        d_lon_m = atan2(-y, x)
        d_lon_i = acos(clamp_unit(z / sqrt(x * x + y * y)))

        first = lon1 + d_lon_m - d_lon_i
        # Anchored on the start latitude, matching the published reference values
        second = lat1 + d_lon_m + d_lon_i

        return ParallelCrossings(WrapTo180(to_degrees(first)), WrapTo180(to_degrees(second)))
