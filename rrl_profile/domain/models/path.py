from dataclasses import dataclass, fields
from typing import Any, NamedTuple

import numpy as np
from numpy.typing import NDArray

from .units import Elevation, Meters


class BaseModel:
    def to_dict(self):
        """Converts a dataclass instance to a dictionary, handling nested dataclasses,
        NamedTuples, and numpy values.
        """
        result = {}
        for f in fields(self):
            value = self._convert_value(getattr(self, f.name))
            result[f.name] = value
        return result

    def _convert_value(self, value: Any) -> Any:
        if hasattr(value, "to_dict"):
            return value.to_dict()
        if isinstance(value, tuple) and hasattr(value, "_asdict"):  # Handle NamedTuple
            return {k: self._convert_value(v) for k, v in value._asdict().items()}
        if isinstance(value, np.ndarray):
            return value.tolist()
        if isinstance(value, np.generic):
            return value.item()
        if isinstance(value, (list, tuple)):
            return [self._convert_value(v) for v in value]
        return value


class ProfilePoint(NamedTuple):
    """
    Point sampled along the path between the sites.
    """

    index: int
    lat: float
    lon: float
    distance_meters: Meters


class ElevationPoint(NamedTuple):
    """
    Terrain elevation resolved for a sampled point.
    """

    lat: float
    lon: float
    elevation: Elevation


@dataclass(slots=True)
class ProfileSeries(BaseModel):
    """
    Per-sample profile arrays, index-aligned with the sampled points.

    :param distances: Distances from site A, meters
    :param terrain: Terrain elevations
    :param bulge: Earth-curvature correction
    :param terrain_eff: Terrain raised by the curvature correction
    :param los: Line of sight between the mast tops
    :param fresnel_r1: First Fresnel zone radius
    :param fresnel_limit_line: Lower boundary of the 60% Fresnel clearance
    :param clearance: los - terrain_eff
    :param clearance60: fresnel_limit_line - terrain_eff
    """

    distances: NDArray[np.float64]
    terrain: NDArray[np.float64]
    bulge: NDArray[np.float64]
    terrain_eff: NDArray[np.float64]
    los: NDArray[np.float64]
    fresnel_r1: NDArray[np.float64]
    fresnel_limit_line: NDArray[np.float64]
    clearance: NDArray[np.float64]
    clearance60: NDArray[np.float64]

    @property
    def total_distance(self) -> float:
        return float(self.distances[-1])

    def __len__(self) -> int:
        return int(self.distances.size)


class ElevationResolution(NamedTuple):
    """
    Elevations for a set of points together with the name of the source that served them.
    """

    elevations: list[ElevationPoint]
    provider_name: str
