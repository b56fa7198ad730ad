from rrl_profile.domain import geometry
from rrl_profile.domain.constants import INFLUENCE_EPS
from rrl_profile.domain.exceptions import CalculationError
from rrl_profile.domain.models.analysis import CriticalPoint, RecommendedLift
from rrl_profile.domain.models.units import Meters


class LiftRecommender:
    """
    Solves for the mast height increases that bring the 60% Fresnel boundary
    back above the critical point.

    Raising mast A by dA lifts the line of sight at fraction f of the path by
    dA * (1 - f); raising mast B by dB lifts it by dB * f.
    """

    def __init__(self, total_distance: Meters):
        if not total_distance > 0:
            raise CalculationError(f"Invalid path length: {total_distance} m")
        self.total_distance = total_distance

    @staticmethod
    def _solve(obstruction: float, influence: float) -> Meters | None:
        # The mast has no leverage over a point sitting on the opposite site
        if influence <= INFLUENCE_EPS:
            return None
        return Meters(obstruction / influence)

    def recommend(self, critical_point: CriticalPoint) -> RecommendedLift:
        obstruction = max(0.0, -critical_point.clearance60)
        if obstruction == 0:
            return RecommendedLift(
                only_a=Meters(0.0), only_b=Meters(0.0), both_equal=Meters(0.0)
            )

        influence_a, influence_b = geometry.mast_influence(
            critical_point.distance_meters, self.total_distance
        )
        return RecommendedLift(
            only_a=self._solve(obstruction, influence_a),
            only_b=self._solve(obstruction, influence_b),
            # dA * (1 - f) + dA * f = obstruction
            both_equal=Meters(obstruction),
        )
