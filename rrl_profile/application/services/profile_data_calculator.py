from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from rrl_profile.domain import geometry
from rrl_profile.domain.constants import FRESNEL_CLEARANCE_RATIO
from rrl_profile.domain.curvature import apply_geometric_curvature
from rrl_profile.domain.exceptions import CalculationError
from rrl_profile.domain.fresnel import first_fresnel_radius
from rrl_profile.domain.models.path import ElevationPoint, ProfilePoint, ProfileSeries
from rrl_profile.domain.models.units import GigaHertz, Meters
from rrl_profile.domain.validators import (
    ensure_finite,
    validate_distances,
    validate_elevation_array,
    validate_profile_inputs,
)


class ProfileCalculator:
    """
    Calculates the radio path profile: curved terrain, line of sight,
    first Fresnel zone and clearances at every sample.
    """

    def __init__(self, distances: NDArray[np.float64], elevations: NDArray[np.float64]):
        """
        Initialize with distances and elevations arrays.

        Args:
            distances: 1D array of distances from site A in meters.
            elevations: 1D array of corresponding terrain elevations.

        Raises:
            CalculationError: if inputs are not 1D arrays of equal length >= 2,
                distances do not increase strictly from 0, or elevations are
                not finite.
        """
        self.distances: NDArray[np.float64] = np.atleast_1d(
            np.asarray(distances, dtype=np.float64)
        )
        self.elevations: NDArray[np.float64] = np.atleast_1d(
            np.asarray(elevations, dtype=np.float64)
        )

        if self.distances.ndim != 1 or self.elevations.ndim != 1:
            raise CalculationError("`distances` and `elevations` must be 1D arrays.")
        if self.distances.size != self.elevations.size:
            raise CalculationError(
                "Point/elevation count mismatch: "
                f"{self.distances.size} distances, {self.elevations.size} elevations"
            )
        if self.distances.size < 2:
            raise CalculationError(
                "`distances` and `elevations` must contain at least two elements."
            )

        validate_distances(self.distances)
        validate_elevation_array(self.elevations)

        # Path length is taken from the sampler, never re-derived here
        self.total_distance = float(self.distances[-1])

    @classmethod
    def from_points(
        cls, points: Sequence[ProfilePoint], elevations: Sequence[ElevationPoint]
    ) -> "ProfileCalculator":
        validate_profile_inputs(points, elevations)
        return cls(
            np.array([p.distance_meters for p in points], dtype=np.float64),
            np.array([e.elevation for e in elevations], dtype=np.float64),
        )

    def curved_profile(
        self, k_factor: float
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        Terrain raised by the Earth bulge.

        Returns:
            Tuple (terrain_eff, bulge).
        """
        bulge = apply_geometric_curvature(self.distances, self.total_distance, k_factor)
        return self.elevations + bulge, bulge

    def line_of_sight(self, antenna_a: Meters, antenna_b: Meters) -> NDArray[np.float64]:
        top_a = self.elevations[0] + antenna_a
        top_b = self.elevations[-1] + antenna_b
        return geometry.line_of_sight(self.distances, self.total_distance, top_a, top_b)

    def fresnel_zone(self, freq_ghz: GigaHertz) -> NDArray[np.float64]:
        return first_fresnel_radius(self.distances, self.total_distance, freq_ghz)

    def calculate_all(
        self,
        antenna_a: Meters,
        antenna_b: Meters,
        freq_ghz: GigaHertz,
        k_factor: float,
    ) -> ProfileSeries:
        """
        Run the complete per-sample calculation.

        Raises:
            CalculationError: if any computed value is NaN or infinite.
        """
        terrain_eff, bulge = self.curved_profile(k_factor)
        los = self.line_of_sight(antenna_a, antenna_b)
        fresnel_r1 = self.fresnel_zone(freq_ghz)
        fresnel_limit_line = los - FRESNEL_CLEARANCE_RATIO * fresnel_r1

        series = ProfileSeries(
            distances=self.distances,
            terrain=self.elevations,
            bulge=bulge,
            terrain_eff=terrain_eff,
            los=los,
            fresnel_r1=fresnel_r1,
            fresnel_limit_line=fresnel_limit_line,
            clearance=geometry.clearance_above(los, terrain_eff),
            clearance60=geometry.clearance_above(fresnel_limit_line, terrain_eff),
        )

        for name in ("bulge", "terrain_eff", "los", "fresnel_r1", "clearance", "clearance60"):
            ensure_finite(name, getattr(series, name))

        return series
