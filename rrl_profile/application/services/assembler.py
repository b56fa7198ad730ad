from collections.abc import Sequence

from rrl_profile.domain.models.analysis import (
    CriticalPoint,
    ProfileResult,
    ProfileSample,
    ProfileSummary,
    RecommendedLift,
)
from rrl_profile.domain.models.coordinates import ProfileRequest
from rrl_profile.domain.models.path import ProfilePoint, ProfileSeries
from rrl_profile.domain.models.units import Clearance, Elevation, Meters


class ResultAssembler:
    """
    Packages the profile arrays and summary figures into immutable result models.
    """

    @staticmethod
    def build_samples(
        series: ProfileSeries, points: Sequence[ProfilePoint]
    ) -> tuple[ProfileSample, ...]:
        return tuple(
            ProfileSample(
                index=point.index,
                distance_meters=Meters(float(series.distances[i])),
                lat=point.lat,
                lon=point.lon,
                terrain=Elevation(float(series.terrain[i])),
                bulge=Meters(float(series.bulge[i])),
                terrain_eff=Elevation(float(series.terrain_eff[i])),
                los=Meters(float(series.los[i])),
                fresnel_r1=Meters(float(series.fresnel_r1[i])),
                fresnel_limit_line=Meters(float(series.fresnel_limit_line[i])),
                clearance=Clearance(float(series.clearance[i])),
                clearance60=Clearance(float(series.clearance60[i])),
            )
            for i, point in enumerate(points)
        )

    def assemble(
        self,
        request: ProfileRequest,
        points: Sequence[ProfilePoint],
        series: ProfileSeries,
        los_ok: bool,
        fresnel_ok: bool,
        min_clearance: Clearance,
        min_clearance60: Clearance,
        critical_point: CriticalPoint,
        recommended_lift: RecommendedLift,
    ) -> ProfileResult:
        summary = ProfileSummary(
            distance_meters=Meters(series.total_distance),
            los_ok=los_ok,
            fresnel_ok=fresnel_ok,
            min_clearance=min_clearance,
            min_clearance60=min_clearance60,
            critical_point=critical_point,
            recommended_lift=recommended_lift,
        )
        return ProfileResult(
            input=request,
            summary=summary,
            samples=self.build_samples(series, points),
        )
