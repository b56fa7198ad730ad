"""Facade adapter for simplified API integration."""

from collections.abc import Mapping, Sequence
from typing import Any

from environs import Env

from rrl_profile.domain.constants import DEFAULT_MAX_PROFILE_SAMPLES
from rrl_profile.domain.models.analysis import ProfileResult
from rrl_profile.domain.models.coordinates import GeoPoint, ProfileRequest
from rrl_profile.domain.models.outcome import Outcome
from rrl_profile.domain.models.path import ElevationPoint, ProfilePoint
from rrl_profile.domain.models.units import GigaHertz, Meters
from rrl_profile.application.analysis import calculate_profile
from rrl_profile.application.orchestration import OrchestrationService
from rrl_profile.application.services.base import BaseElevationProvider
from rrl_profile.application.services.profile import PathSampler
from rrl_profile.infrastructure.api.clients import (
    FallbackElevationProvider,
    create_elevation_providers,
)


class RrlProfileAPI:
    """
    Simplified facade for external integration.

    Hides the pipeline wiring and offers plain call semantics: ``calculate``
    returns a ProfileResult or raises the typed package error, while
    ``calculate_outcome`` returns the Success/Failure outcome unchanged.
    """

    def __init__(
        self,
        elevation_provider: BaseElevationProvider,
        max_samples: int = DEFAULT_MAX_PROFILE_SAMPLES,
    ):
        """
        Initialize facade with required dependencies.

        Args:
            elevation_provider: Terrain source used for every request
            max_samples: Request-size limit for the path sampler
        """
        self._orchestrator = OrchestrationService(
            elevation_provider=elevation_provider,
            path_sampler=PathSampler(max_samples=max_samples),
        )

    @classmethod
    def create_from_env(cls, env: Env) -> "RrlProfileAPI":
        """
        Factory method: one-line initialization from environment.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> facade = RrlProfileAPI.create_from_env(env)
        """
        provider = FallbackElevationProvider(create_elevation_providers(env))
        max_samples = env.int("MAX_PROFILE_SAMPLES", DEFAULT_MAX_PROFILE_SAMPLES)
        return cls(provider, max_samples=max_samples)

    @staticmethod
    def build_request(
        coord_a: Sequence[float],
        coord_b: Sequence[float],
        antenna_a: float,
        antenna_b: float,
        freq_ghz: float,
        k_factor: float = 1.33,
        step_meters: float = 30.0,
        name_a: str | None = None,
        name_b: str | None = None,
    ) -> ProfileRequest:
        if len(coord_a) != 2 or len(coord_b) != 2:
            raise ValueError("Coordinates must be given as [lat, lon]")
        return ProfileRequest(
            a=GeoPoint(coord_a[0], coord_a[1], name_a),
            b=GeoPoint(coord_b[0], coord_b[1], name_b),
            antenna_a=Meters(antenna_a),
            antenna_b=Meters(antenna_b),
            freq_ghz=GigaHertz(freq_ghz),
            k_factor=k_factor,
            step_meters=Meters(step_meters),
        )

    async def calculate_outcome(self, request: ProfileRequest) -> Outcome[ProfileResult]:
        return await self._orchestrator.process(request)

    async def calculate(self, request: ProfileRequest) -> ProfileResult:
        """
        Run the full pipeline for a request.

        Raises:
            ValidationError, ElevationError, CalculationError, InternalError
        """
        outcome = await self._orchestrator.process(request)
        return outcome.unwrap()

    async def calculate_payload(self, payload: Mapping[str, Any]) -> Outcome[ProfileResult]:
        """Run the pipeline for a decoded JSON request body."""
        return await self._orchestrator.process_payload(payload)

    @staticmethod
    def calculate_offline(
        request: ProfileRequest,
        points: Sequence[ProfilePoint],
        elevations: Sequence[ElevationPoint],
    ) -> ProfileResult:
        """Compute a profile from points and elevations the caller already has."""
        return calculate_profile(request, points, elevations)
