from abc import ABC, abstractmethod
from collections.abc import Sequence

from rrl_profile.domain.models.coordinates import GeoPoint
from rrl_profile.domain.models.path import (
    ElevationPoint,
    ElevationResolution,
    ProfilePoint,
)


class BaseElevationProvider(ABC):
    """
    Terrain data source. Must return one elevation per input point, in input
    order, or raise ElevationError.
    """

    name: str

    @abstractmethod
    async def fetch_elevations(
        self, points: Sequence[GeoPoint | ProfilePoint]
    ) -> list[ElevationPoint]:
        pass

    async def resolve(
        self, points: Sequence[GeoPoint | ProfilePoint]
    ) -> ElevationResolution:
        """Fetch elevations and report which source served them."""
        return ElevationResolution(await self.fetch_elevations(points), self.name)


class BasePathSampler(ABC):
    @abstractmethod
    def sample(
        self, a: GeoPoint, b: GeoPoint, step_meters: float
    ) -> list[ProfilePoint]:
        pass
