import math

import numpy as np

from rrl_profile.domain.constants import DEFAULT_MAX_PROFILE_SAMPLES, MIN_SEGMENTS
from rrl_profile.domain.models.coordinates import GeoPoint
from rrl_profile.domain.models.path import ProfilePoint
from rrl_profile.domain.models.units import Meters
from rrl_profile.domain.validators import validate_path_length
from .base import BasePathSampler
from .coordinates import CoordinatesService

from rrl_profile.logging_config import get_logger

logger = get_logger(__name__)


class PathSampler(BasePathSampler):
    """
    Generates equally spaced points along the great circle between two sites.

    The first point is site A at distance 0, the last point is site B at the
    full path length, and distances increase strictly in between.
    """

    def __init__(self, max_samples: int = DEFAULT_MAX_PROFILE_SAMPLES):
        self.max_samples = max_samples

    def sample(self, a: GeoPoint, b: GeoPoint, step_meters: float) -> list[ProfilePoint]:
        coordinates_service = CoordinatesService(a, b)
        full_distance: Meters = coordinates_service.get_distance()

        # Reject oversized requests before anything is fetched for them
        validate_path_length(full_distance, step_meters, self.max_samples)

        segments = max(MIN_SEGMENTS, math.ceil(full_distance / step_meters))
        fractions = np.arange(segments + 1, dtype=np.float64) / segments
        coord_vect = coordinates_service.interpolate(fractions)
        distances = fractions * full_distance

        logger.debug(
            f"Sampling {full_distance:.1f} m path into {segments} segments "
            f"(step {step_meters} m)"
        )

        points = [ProfilePoint(0, float(a.lat), float(a.lon), Meters(0.0))]
        points.extend(
            ProfilePoint(
                index=i,
                lat=float(coord_vect[i, 0]),
                lon=float(coord_vect[i, 1]),
                distance_meters=Meters(float(distances[i])),
            )
            for i in range(1, segments)
        )
        # Pin the last point to site B exactly
        points.append(
            ProfilePoint(
                index=segments,
                lat=float(b.lat),
                lon=float(b.lon),
                distance_meters=full_distance,
            )
        )
        return points
