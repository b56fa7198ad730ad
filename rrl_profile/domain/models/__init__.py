# rrl_profile/domain/models/__init__.py
from .units import Meters, Degrees, GigaHertz, Elevation, Clearance
from .coordinates import GeoPoint, ProfileRequest
from .path import ProfilePoint, ElevationPoint, ElevationResolution, ProfileSeries
from .analysis import (
    CriticalPoint,
    ProfileResult,
    ProfileSample,
    ProfileSummary,
    RecommendedLift,
)
from .outcome import Failure, Outcome, Success

__all__ = [
    "Meters",
    "Degrees",
    "GigaHertz",
    "Elevation",
    "Clearance",
    "GeoPoint",
    "ProfileRequest",
    "ProfilePoint",
    "ElevationPoint",
    "ProfileSeries",
    "ElevationResolution",
    "CriticalPoint",
    "ProfileResult",
    "ProfileSample",
    "ProfileSummary",
    "RecommendedLift",
    "Failure",
    "Outcome",
    "Success",
]
