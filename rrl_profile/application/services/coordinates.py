import math

import numpy as np
from numpy.typing import NDArray

from rrl_profile.domain.constants import EARTH_RADIUS_M
from rrl_profile.domain.models.coordinates import GeoPoint
from rrl_profile.domain.models.units import Meters
from rrl_profile.domain.validators import validate_coordinates


class CoordinatesService:
    """
    Provides great circle distance and intermediate points between two sites
    on a spherical Earth.
    More info: https://www.movable-type.co.uk/scripts/latlong.html
    """

    def __init__(self, coord_a: GeoPoint, coord_b: GeoPoint):
        """
        Precompute values for two coordinates given in decimal degrees.
        """
        validate_coordinates(coord_a, "Site A")
        validate_coordinates(coord_b, "Site B")

        self.earth_radius: Meters = Meters(EARTH_RADIUS_M)
        self.coord_a = coord_a
        self.coord_b = coord_b

        self.lat_1 = math.radians(coord_a.lat)
        self.lat_2 = math.radians(coord_b.lat)
        self.lon_1 = math.radians(coord_a.lon)
        self.lon_2 = math.radians(coord_b.lon)

    def get_angle(self) -> float:
        """
        Calculates the angular separation (in radians) between two coordinates.

        Uses the haversine form, which stays accurate for paths of a few meters.
        """
        d_lat = self.lat_2 - self.lat_1
        d_lon = self.lon_2 - self.lon_1
        h = (
            math.sin(d_lat / 2) ** 2
            + math.cos(self.lat_1) * math.cos(self.lat_2) * math.sin(d_lon / 2) ** 2
        )
        # Protect against floating-point errors pushing h outside [0, 1]
        h = min(1.0, max(0.0, h))
        return 2 * math.asin(math.sqrt(h))

    def get_distance(self) -> Meters:
        """
        Calculates the distance between two coordinates in meters.
        """
        return Meters(self.earth_radius * self.get_angle())

    def interpolate(self, fractions: NDArray[np.float64]) -> NDArray[np.float64]:
        """
        Points on the great circle from A to B at the given fractions of the path.

        Args:
            fractions: 1D array of values in [0, 1].

        Returns:
            Array of shape (n, 2) with [lat, lon] in decimal degrees.
        """
        delta = self.get_angle()
        if delta == 0:
            return np.tile([self.coord_a.lat, self.coord_a.lon], (fractions.size, 1))

        sin_delta = math.sin(delta)
        a = np.sin((1 - fractions) * delta) / sin_delta
        b = np.sin(fractions * delta) / sin_delta

        x = a * math.cos(self.lat_1) * math.cos(self.lon_1) + b * math.cos(
            self.lat_2
        ) * math.cos(self.lon_2)
        y = a * math.cos(self.lat_1) * math.sin(self.lon_1) + b * math.cos(
            self.lat_2
        ) * math.sin(self.lon_2)
        z = a * math.sin(self.lat_1) + b * math.sin(self.lat_2)

        lat = np.degrees(np.arctan2(z, np.sqrt(x**2 + y**2)))
        lon = np.degrees(np.arctan2(y, x))
        return np.column_stack((lat, self.normalize_longitude_180(lon)))

    @staticmethod
    def normalize_longitude_180(lon):
        """
        Normalize a longitude value (or array) to the range [-180, 180).
        """
        return ((lon + 180) % 360) - 180
