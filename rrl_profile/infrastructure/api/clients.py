import asyncio
import json
import math
from abc import abstractmethod
from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

import httpx
from environs import Env
from httpx import AsyncClient, Timeout

from rrl_profile.domain.exceptions import (
    ElevationError,
    InvalidElevationResponseError,
    TransientElevationError,
)
from rrl_profile.domain.models.coordinates import GeoPoint
from rrl_profile.domain.models.path import (
    ElevationPoint,
    ElevationResolution,
    ProfilePoint,
)
from rrl_profile.domain.models.units import Elevation
from rrl_profile.application.services.base import BaseElevationProvider

from .decorators import async_retry
from rrl_profile.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_BATCH_SIZE = 100
DEFAULT_TIMEOUT = 10.0

OPENTOPODATA_BASE_URL = "https://api.opentopodata.org/v1"
OPENTOPODATA_DATASET = "aster30m"
OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1/elevation"


class HttpElevationProvider(BaseElevationProvider):
    """
    Elevation provider backed by an HTTP JSON API.

    Points are sent in batches of ``batch_size``; batches run concurrently up
    to ``max_concurrency`` and are reassembled in input order.
    """

    name = "http"

    def __init__(
        self,
        base_url: str,
        batch_size: int = DEFAULT_BATCH_SIZE,
        timeout: float = DEFAULT_TIMEOUT,
        max_concurrency: int = 1,
    ):
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be positive, got {max_concurrency}")
        self.base_url = base_url.rstrip("/")
        self.batch_size = batch_size
        self.timeout = timeout
        self.max_concurrency = max_concurrency

    @abstractmethod
    def build_request_params(
        self, batch: Sequence[GeoPoint | ProfilePoint]
    ) -> tuple[str, dict[str, str]]:
        """Return the URL and query parameters for one batch."""

    @abstractmethod
    def parse_elevations(self, payload: Any, batch_size: int) -> list[float]:
        """Extract one elevation per point from a decoded response."""

    @staticmethod
    def _check_elevation(value: Any) -> float:
        # bool is an int subclass but never an elevation
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidElevationResponseError(f"Provider returned an empty elevation: {value!r}")
        if not math.isfinite(value):
            raise InvalidElevationResponseError(f"Provider returned a non-finite elevation: {value!r}")
        return float(value)

    @async_retry()
    async def elevations_api_request(
        self, batch: Sequence[GeoPoint | ProfilePoint], **kwargs
    ) -> list[float]:
        """Asynchronous API request with httpx"""
        url, params = self.build_request_params(batch)

        timeout = kwargs.get("timeout", self.timeout)
        # Configure timeout with connect and read timeouts
        timeout_config = Timeout(timeout, connect=5.0)

        async with AsyncClient(timeout=timeout_config, follow_redirects=True) as client:
            request = client.build_request("GET", url, params=params)
            logger.info(f"HTTP Request: {request.method} {request.url}")
            try:
                response = await client.send(request)
            except httpx.HTTPError as e:
                raise TransientElevationError(
                    f"{self.name}: request failed: {type(e).__name__}", details=str(e)
                ) from e
            logger.info(f"HTTP Response: {response.status_code}")

            if not response.is_success:
                message = f"{self.name}: HTTP {response.status_code}: {response.text or response.reason_phrase}"
                if response.status_code == 429 or response.status_code >= 500:
                    raise TransientElevationError(message)
                raise ElevationError(message)

            try:
                payload = response.json()
            except json.JSONDecodeError as e:
                raise InvalidElevationResponseError(
                    f"{self.name}: response is not valid JSON", details=str(e)
                ) from e

        return self.parse_elevations(payload, len(batch))

    async def fetch_elevations(
        self, points: Sequence[GeoPoint | ProfilePoint]
    ) -> list[ElevationPoint]:
        """
        Asynchronously retrieves elevation data in batches for the given points.
        """
        if len(points) == 0:
            return []

        batches = [
            points[n : n + self.batch_size] for n in range(0, len(points), self.batch_size)
        ]
        logger.info(
            f"Retrieving elevation data for {len(points)} points in {len(batches)} batches from {self.name}..."
        )

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def limited(batch):
            async with semaphore:
                return await self.elevations_api_request(batch)

        results = await asyncio.gather(*(limited(b) for b in batches), return_exceptions=True)

        errors = [(idx, r) for idx, r in enumerate(results) if isinstance(r, BaseException)]
        if errors:
            details = "; ".join(f"batch {idx}: {e}" for idx, e in errors)
            first = errors[0][1]
            error_cls = type(first) if isinstance(first, ElevationError) else ElevationError
            raise error_cls(
                f"{self.name}: {len(errors)} of {len(batches)} elevation batches failed",
                details=details,
            ) from first

        elevations: list[ElevationPoint] = []
        for batch, values in zip(batches, results):
            elevations.extend(
                ElevationPoint(lat=p.lat, lon=p.lon, elevation=Elevation(v))
                for p, v in zip(batch, values)
            )
        return elevations


class OpenTopoDataElevationProvider(HttpElevationProvider):
    """
    OpenTopoData API: GET {base}/{dataset}?locations=lat,lon|lat,lon
    """

    name = "opentopodata"

    def __init__(
        self,
        base_url: str = OPENTOPODATA_BASE_URL,
        dataset: str = OPENTOPODATA_DATASET,
        **kwargs: Any,
    ):
        super().__init__(base_url, **kwargs)
        self.dataset = dataset

    def build_request_params(self, batch):
        url = f"{self.base_url}/{quote(self.dataset)}"
        locations = "|".join(f"{p.lat},{p.lon}" for p in batch)
        return url, {"locations": locations}

    def parse_elevations(self, payload: Any, batch_size: int) -> list[float]:
        if not isinstance(payload, dict):
            raise InvalidElevationResponseError("OpenTopoData returned an unexpected response")
        results = payload.get("results")
        if payload.get("status") != "OK" or not isinstance(results, list):
            raise InvalidElevationResponseError(
                payload.get("error") or "OpenTopoData returned an unexpected response"
            )
        if len(results) != batch_size:
            raise InvalidElevationResponseError(
                f"OpenTopoData returned {len(results)} elevations for {batch_size} points"
            )
        return [
            self._check_elevation(item.get("elevation") if isinstance(item, dict) else None)
            for item in results
        ]


class OpenMeteoElevationProvider(HttpElevationProvider):
    """
    Open-Meteo elevation API: GET {base}?latitude=a,b&longitude=c,d
    """

    name = "openmeteo"

    def __init__(self, base_url: str = OPEN_METEO_BASE_URL, **kwargs: Any):
        super().__init__(base_url, **kwargs)

    def build_request_params(self, batch):
        return self.base_url, {
            "latitude": ",".join(str(p.lat) for p in batch),
            "longitude": ",".join(str(p.lon) for p in batch),
        }

    def parse_elevations(self, payload: Any, batch_size: int) -> list[float]:
        values = payload.get("elevation") if isinstance(payload, dict) else None
        if not isinstance(values, list) or len(values) != batch_size:
            raise InvalidElevationResponseError(
                "Open-Meteo returned an incomplete set of elevations"
            )
        return [self._check_elevation(v) for v in values]


class FallbackElevationProvider(BaseElevationProvider):
    """
    Tries providers in order and returns the first complete answer.
    """

    name = "fallback"

    def __init__(self, providers: Sequence[BaseElevationProvider]):
        if not providers:
            raise ValueError("At least one elevation provider is required")
        self.providers = list(providers)

    async def resolve(self, points) -> ElevationResolution:
        errors: list[str] = []
        for provider in self.providers:
            try:
                elevations = await provider.fetch_elevations(points)
            except ElevationError as e:
                logger.warning(f"Elevation provider {provider.name} failed: {e}")
                errors.append(f"{provider.name}: {e}")
                continue

            if len(elevations) != len(points):
                errors.append(
                    f"{provider.name}: returned {len(elevations)} elevations for {len(points)} points"
                )
                continue

            return ElevationResolution(elevations, provider.name)

        raise ElevationError("Failed to fetch the elevation profile.", details=" | ".join(errors))

    async def fetch_elevations(self, points) -> list[ElevationPoint]:
        return (await self.resolve(points)).elevations


def create_elevation_providers(env: Env) -> list[BaseElevationProvider]:
    """
    Build the provider chain from environment settings.

    ELEVATION_PROVIDER picks the provider tried first; the other one is kept
    as a fallback.
    """
    options = {
        "batch_size": env.int("ELEVATION_BATCH_SIZE", DEFAULT_BATCH_SIZE),
        "timeout": env.float("ELEVATION_TIMEOUT", DEFAULT_TIMEOUT),
        "max_concurrency": env.int("ELEVATION_CONCURRENCY", 1),
    }
    opentopodata = OpenTopoDataElevationProvider(
        base_url=env.str("OPENTOPODATA_BASE_URL", OPENTOPODATA_BASE_URL),
        dataset=env.str("OPENTOPODATA_DATASET", OPENTOPODATA_DATASET),
        **options,
    )
    openmeteo = OpenMeteoElevationProvider(
        base_url=env.str("OPEN_METEO_BASE_URL", OPEN_METEO_BASE_URL),
        **options,
    )

    selected = env.str("ELEVATION_PROVIDER", "opentopodata").strip().lower()
    if selected == "openmeteo":
        return [openmeteo, opentopodata]
    if selected != "opentopodata":
        raise ValueError(f"Unknown elevation provider: {selected}")
    return [opentopodata, openmeteo]
