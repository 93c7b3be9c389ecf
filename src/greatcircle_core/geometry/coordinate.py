"""
Latitude/longitude value type
"""
from dataclasses import dataclass

from ..utils import to_radians


@dataclass(frozen=True)
class Coordinate:
    """
    A point on the sphere in decimal degrees.

    Ranges are not enforced; |latitude| > 90 is accepted and simply produces
    whatever the formulas produce. Equality is exact, component by component,
    and only between Coordinates.
    """
    latitude: float   # degrees, positive north
    longitude: float  # degrees, positive east

    @classmethod
    def from_string(cls, text: str) -> "Coordinate":
        """
        Parse a "lat, lon" string.

        Args:
            text: Two decimal numbers separated by a comma, e.g. "41.28, 28.75"

        Returns:
            Coordinate

        Raises:
            ValueError: If the string is empty, has no comma, or either part
                is not a number
        """
        if not text or not text.strip():
            raise ValueError("Coordinate string must not be empty.")
        if "," not in text:
            raise ValueError(f"Coordinate string must be 'lat, lon'. Got {text!r}")

        lat_text, lon_text = text.split(",", 1)
        try:
            latitude = float(lat_text)
            longitude = float(lon_text)
        except ValueError:
            raise ValueError(
                f"Coordinate string must contain two decimal numbers. Got {text!r}"
            ) from None
        return cls(latitude, longitude)

    @property
    def latitude_in_radians(self) -> float:
        return to_radians(self.latitude)

    @property
    def longitude_in_radians(self) -> float:
        return to_radians(self.longitude)

    def __str__(self) -> str:
        return f"{self.latitude:.6f}, {self.longitude:.6f}"
