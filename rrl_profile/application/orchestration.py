"""Orchestration service (coordinates the profile pipeline with dependency injection)"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from rrl_profile.domain.models.analysis import ProfileResult
from rrl_profile.domain.models.coordinates import ProfileRequest
from rrl_profile.domain.models.outcome import Outcome, capture, capture_async
from rrl_profile.domain.models.path import ElevationPoint, ProfilePoint
from rrl_profile.domain.validators import parse_request, validate_request
from rrl_profile.application.analysis import ProfileAnalysisService
from rrl_profile.application.services.base import BaseElevationProvider, BasePathSampler
from rrl_profile.application.services.profile import PathSampler

from rrl_profile.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SampledPath:
    request: ProfileRequest
    points: list[ProfilePoint]


@dataclass(frozen=True, slots=True)
class ResolvedPath:
    request: ProfileRequest
    points: list[ProfilePoint]
    elevations: list[ElevationPoint]
    provider_name: str


@dataclass(frozen=True, slots=True)
class ComputedProfile:
    result: ProfileResult
    provider_name: str


class OrchestrationService:
    """
    Runs the profile pipeline: validate -> sample -> fetch elevations ->
    compute -> assemble.

    Every stage returns a Success or Failure outcome; the first failure ends
    the chain and is handed back to the caller unchanged. Validation and
    request-size checks run before any elevation is fetched.
    """

    def __init__(
        self,
        elevation_provider: BaseElevationProvider,
        path_sampler: BasePathSampler | None = None,
        analysis_service: ProfileAnalysisService | None = None,
    ):
        """
        Initialize orchestration service with injected dependencies.

        Args:
            elevation_provider: Terrain source (usually a fallback chain)
            path_sampler: Generates the sampled points between the sites
            analysis_service: Pure profile calculation
        """
        self.elevation_provider = elevation_provider
        self.path_sampler = path_sampler or PathSampler()
        self.analysis_service = analysis_service or ProfileAnalysisService()

    def validate(self, request: ProfileRequest) -> Outcome[ProfileRequest]:
        return capture(validate_request, request)

    def sample(self, request: ProfileRequest) -> Outcome[SampledPath]:
        def stage() -> SampledPath:
            points = self.path_sampler.sample(request.a, request.b, request.step_meters)
            logger.debug(f"Sampled {len(points)} points")
            return SampledPath(request, points)

        return capture(stage)

    async def fetch_elevations(self, path: SampledPath) -> Outcome[ResolvedPath]:
        async def stage() -> ResolvedPath:
            resolution = await self.elevation_provider.resolve(path.points)
            logger.debug(
                f"Got {len(resolution.elevations)} elevations from {resolution.provider_name}"
            )
            return ResolvedPath(
                path.request, path.points, resolution.elevations, resolution.provider_name
            )

        return await capture_async(stage)

    def compute(self, path: ResolvedPath) -> Outcome[ComputedProfile]:
        def stage() -> ComputedProfile:
            result = self.analysis_service.analyze(path.request, path.points, path.elevations)
            return ComputedProfile(result, path.provider_name)

        return capture(stage)

    def assemble(self, computed: ComputedProfile) -> Outcome[ProfileResult]:
        return capture(computed.result.with_provider, computed.provider_name)

    async def process(self, request: ProfileRequest) -> Outcome[ProfileResult]:
        """
        Execute the complete pipeline for a validated or raw request.

        Returns:
            Success with the annotated ProfileResult, or Failure with a typed error.
        """
        sampled = self.validate(request).then(self.sample)
        resolved = await sampled.then_async(self.fetch_elevations)
        return resolved.then(self.compute).then(self.assemble)

    async def process_payload(self, payload: Mapping[str, Any]) -> Outcome[ProfileResult]:
        """Same as ``process`` but starts from a decoded JSON request body."""
        parsed = capture(parse_request, payload)
        return await parsed.then_async(self.process)
