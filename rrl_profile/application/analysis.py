from collections.abc import Sequence

from rrl_profile.domain.models.analysis import ProfileResult
from rrl_profile.domain.models.coordinates import ProfileRequest
from rrl_profile.domain.models.path import ElevationPoint, ProfilePoint
from rrl_profile.domain.validators import validate_request
from rrl_profile.application.services.assembler import ResultAssembler
from rrl_profile.application.services.lift import LiftRecommender
from rrl_profile.application.services.obstruction import ObstructionAnalyzer
from rrl_profile.application.services.profile_data_calculator import (
    ProfileCalculator,
)

from rrl_profile.logging_config import get_logger

logger = get_logger(__name__)


class ProfileAnalysisService:
    """
    Pure path profile analysis.

    Combines the calculator, obstruction search and lift solver. Holds no
    state between calls, so one instance can serve concurrent requests.
    """

    def __init__(self, assembler: ResultAssembler | None = None):
        self.assembler = assembler or ResultAssembler()

    def analyze(
        self,
        request: ProfileRequest,
        points: Sequence[ProfilePoint],
        elevations: Sequence[ElevationPoint],
    ) -> ProfileResult:
        validate_request(request)
        calculator = ProfileCalculator.from_points(points, elevations)
        series = calculator.calculate_all(
            antenna_a=request.antenna_a,
            antenna_b=request.antenna_b,
            freq_ghz=request.freq_ghz,
            k_factor=request.k_factor,
        )

        obstruction = ObstructionAnalyzer(series, points)
        critical_point = obstruction.find_critical_point()
        recommended_lift = LiftRecommender(series.total_distance).recommend(
            critical_point
        )

        logger.debug(
            f"Profile over {series.total_distance:.1f} m: "
            f"min clearance {obstruction.min_clearance:.2f} m, "
            f"min 60% clearance {obstruction.min_clearance60:.2f} m "
            f"at {critical_point.distance_meters:.1f} m"
        )

        return self.assembler.assemble(
            request=request,
            points=points,
            series=series,
            los_ok=obstruction.los_ok,
            fresnel_ok=obstruction.fresnel_ok,
            min_clearance=obstruction.min_clearance,
            min_clearance60=obstruction.min_clearance60,
            critical_point=critical_point,
            recommended_lift=recommended_lift,
        )


def calculate_profile(
    request: ProfileRequest,
    points: Sequence[ProfilePoint],
    elevations: Sequence[ElevationPoint],
) -> ProfileResult:
    """Compute a path profile from already sampled points and their elevations."""
    return ProfileAnalysisService().analyze(request, points, elevations)
