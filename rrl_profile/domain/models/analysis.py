"""Domain models for path profile results"""

from dataclasses import dataclass, replace

from .coordinates import ProfileRequest
from .path import BaseModel
from .units import Clearance, Elevation, Meters


@dataclass(frozen=True, slots=True)
class ProfileSample(BaseModel):
    """Geometry of the link at a single sampled point (immutable)"""

    index: int
    distance_meters: Meters
    lat: float
    lon: float
    terrain: Elevation
    bulge: Meters  # Earth-curvature correction
    terrain_eff: Elevation  # terrain + bulge
    los: Meters  # line of sight height above sea level
    fresnel_r1: Meters  # first Fresnel zone radius
    fresnel_limit_line: Meters  # los - 0.6 * fresnel_r1
    clearance: Clearance
    clearance60: Clearance


@dataclass(frozen=True, slots=True)
class CriticalPoint(BaseModel):
    """Sample with the least 60% Fresnel clearance"""

    index: int
    distance_meters: Meters
    lat: float
    lon: float
    clearance60: Clearance


@dataclass(frozen=True, slots=True)
class RecommendedLift(BaseModel):
    """
    Mast height increases that clear the critical point.

    ``None`` means raising that mast alone cannot move the line of sight at
    the critical point (it coincides with the opposite site).
    """

    only_a: Meters | None
    only_b: Meters | None
    both_equal: Meters


@dataclass(frozen=True, slots=True)
class ProfileSummary(BaseModel):
    distance_meters: Meters
    los_ok: bool
    fresnel_ok: bool
    min_clearance: Clearance
    min_clearance60: Clearance
    critical_point: CriticalPoint
    recommended_lift: RecommendedLift


@dataclass(frozen=True, slots=True)
class ProfileResult(BaseModel):
    """
    Result of a path profile calculation.

    The calculator leaves ``elevation_provider`` empty; the pipeline annotates
    it with the name of the terrain source that served the elevations.
    """

    input: ProfileRequest
    summary: ProfileSummary
    samples: tuple[ProfileSample, ...]
    elevation_provider: str | None = None

    def with_provider(self, provider_name: str) -> "ProfileResult":
        return replace(self, elevation_provider=provider_name)
