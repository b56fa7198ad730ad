from collections.abc import Sequence

import numpy as np

from rrl_profile.domain.exceptions import CalculationError
from rrl_profile.domain.models.analysis import CriticalPoint
from rrl_profile.domain.models.path import ProfilePoint, ProfileSeries
from rrl_profile.domain.models.units import Clearance, Meters


class ObstructionAnalyzer:
    """
    Finds the worst point of a calculated profile.
    """

    def __init__(self, series: ProfileSeries, points: Sequence[ProfilePoint]):
        if len(series) != len(points):
            raise CalculationError(
                "Point/elevation count mismatch: "
                f"{len(points)} points, {len(series)} profile samples"
            )
        self.series = series
        self.points = points

    @property
    def min_clearance(self) -> Clearance:
        return Clearance(float(np.min(self.series.clearance)))

    @property
    def min_clearance60(self) -> Clearance:
        return Clearance(float(np.min(self.series.clearance60)))

    @property
    def los_ok(self) -> bool:
        return bool(np.all(self.series.clearance >= 0))

    @property
    def fresnel_ok(self) -> bool:
        return bool(np.all(self.series.clearance60 >= 0))

    def find_critical_point(self) -> CriticalPoint:
        """
        Sample with the least 60% Fresnel clearance.

        np.argmin returns the first occurrence, so ties go to the point
        closest to site A.
        """
        idx = int(np.argmin(self.series.clearance60))
        point = self.points[idx]
        return CriticalPoint(
            index=point.index,
            distance_meters=Meters(float(self.series.distances[idx])),
            lat=point.lat,
            lon=point.lon,
            clearance60=Clearance(float(self.series.clearance60[idx])),
        )
