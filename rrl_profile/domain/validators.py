"""Input validation utilities for path profile calculations."""

import math
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np
from numpy.typing import NDArray

from rrl_profile.domain.constants import (
    DEFAULT_MAX_PROFILE_SAMPLES,
    MAX_SITE_NAME_LENGTH,
    MAX_STEP_METERS,
    MIN_ROUTE_DISTANCE_METERS,
    MIN_SEGMENTS,
)
from rrl_profile.domain.exceptions import CalculationError, ValidationError
from rrl_profile.domain.models.coordinates import GeoPoint, ProfileRequest
from rrl_profile.domain.models.path import ElevationPoint, ProfilePoint
from rrl_profile.domain.models.units import GigaHertz, Meters


def _require_number(value: Any, name: str) -> float:
    # bool is an int subclass but never a valid measurement
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{name} must be numeric, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")
    return float(value)


def validate_coordinates(point: GeoPoint, name: str = "site") -> None:
    """Validate geographic coordinates.

    Args:
        point: Site to validate
        name: Name for error messages

    Raises:
        ValidationError: If coordinates are out of valid range
    """
    if not isinstance(point, GeoPoint):
        raise ValidationError(f"Expected GeoPoint for {name}, got {type(point).__name__}")

    lat = _require_number(point.lat, f"{name} latitude")
    lon = _require_number(point.lon, f"{name} longitude")

    if not -90 <= lat <= 90:
        raise ValidationError(f"Invalid {name} latitude {lat}°. Must be in range [-90, 90]")

    if not -180 <= lon <= 180:
        raise ValidationError(f"Invalid {name} longitude {lon}°. Must be in range [-180, 180]")

    if point.name is not None and len(point.name.strip()) > MAX_SITE_NAME_LENGTH:
        raise ValidationError(
            f"{name} name is longer than {MAX_SITE_NAME_LENGTH} characters"
        )


def validate_antenna_height(height_m: Meters, name: str = "antenna") -> None:
    """Validate antenna height parameter.

    Raises:
        ValidationError: If height is negative or not a number
    """
    height_m = _require_number(height_m, f"{name} height")
    if height_m < 0:
        raise ValidationError(f"{name} height must be non-negative, got {height_m} m")


def validate_frequency(freq_ghz: GigaHertz) -> None:
    freq_ghz = _require_number(freq_ghz, "Frequency")
    if freq_ghz <= 0:
        raise ValidationError(f"Frequency must be positive, got {freq_ghz} GHz")


def validate_k_factor(k_factor: float) -> None:
    k_factor = _require_number(k_factor, "k-factor")
    if k_factor <= 0:
        raise ValidationError(f"k-factor must be positive, got {k_factor}")


def validate_step(step_meters: Meters) -> None:
    step_meters = _require_number(step_meters, "Sampling step")
    if step_meters <= 0:
        raise ValidationError(f"Sampling step must be positive, got {step_meters} m")
    if step_meters > MAX_STEP_METERS:
        raise ValidationError(
            f"Sampling step {step_meters} m exceeds maximum of {MAX_STEP_METERS} m"
        )


def validate_request(request: ProfileRequest) -> ProfileRequest:
    """Validate every field of a profile request.

    Returns:
        The same request, so the function can be used as a pipeline stage.

    Raises:
        ValidationError: On the first invalid field
    """
    validate_coordinates(request.a, "Site A")
    validate_coordinates(request.b, "Site B")
    validate_antenna_height(request.antenna_a, "Antenna A")
    validate_antenna_height(request.antenna_b, "Antenna B")
    validate_frequency(request.freq_ghz)
    validate_k_factor(request.k_factor)
    validate_step(request.step_meters)

    if request.a.lat == request.b.lat and request.a.lon == request.b.lon:
        raise ValidationError("Sites A and B coincide. Use different coordinates.")

    return request


# Accepted payload keys: wire (camelCase) name first, then the Python name
_REQUEST_FIELDS = {
    "antenna_a": ("antennaA", "antenna_a"),
    "antenna_b": ("antennaB", "antenna_b"),
    "freq_ghz": ("freqGHz", "freq_ghz"),
    "k_factor": ("kFactor", "k_factor"),
    "step_meters": ("stepMeters", "step_meters"),
}


def _parse_site(payload: Any, key: str) -> GeoPoint:
    if not isinstance(payload, Mapping):
        raise ValidationError(f"Site {key.upper()} must be an object with lat and lon")
    if "lat" not in payload or "lon" not in payload:
        raise ValidationError(f"Site {key.upper()} requires lat and lon")
    name = payload.get("name")
    if name is not None and not isinstance(name, str):
        raise ValidationError(f"Site {key.upper()} name must be a string")
    return GeoPoint(
        lat=payload["lat"],
        lon=payload["lon"],
        name=name.strip() if name is not None else None,
    )


def parse_request(payload: Any) -> ProfileRequest:
    """Build and validate a request from a decoded JSON payload.

    Raises:
        ValidationError: If the payload is malformed or any field is invalid
    """
    if not isinstance(payload, Mapping):
        raise ValidationError("Request payload must be an object")

    values: dict[str, Any] = {}
    for field_name, aliases in _REQUEST_FIELDS.items():
        for alias in aliases:
            if alias in payload:
                values[field_name] = payload[alias]
                break
        else:
            raise ValidationError(f"Missing required field: {aliases[0]}")

    request = ProfileRequest(
        a=_parse_site(payload.get("a"), "a"),
        b=_parse_site(payload.get("b"), "b"),
        **values,
    )
    return validate_request(request)


def expected_sample_count(distance_m: float, step_meters: float) -> int:
    """Number of points the path sampler produces for a path (endpoints included)."""
    segments = max(MIN_SEGMENTS, math.ceil(distance_m / step_meters))
    return segments + 1


def validate_path_length(
    distance_m: float,
    step_meters: float,
    max_samples: int = DEFAULT_MAX_PROFILE_SAMPLES,
) -> int:
    """Check the path can be sampled within the request-size limit.

    Returns:
        Number of samples the path will produce.

    Raises:
        ValidationError: If the path is degenerate or needs too many samples
        CalculationError: If the path is shorter than the supported minimum
    """
    if not math.isfinite(distance_m) or distance_m <= 0:
        raise ValidationError(f"Invalid path length: {distance_m} m")

    if distance_m < MIN_ROUTE_DISTANCE_METERS:
        raise CalculationError(
            f"Path is too short ({distance_m:.2f} m). "
            f"Minimum: {MIN_ROUTE_DISTANCE_METERS:.0f} m."
        )

    count = expected_sample_count(distance_m, step_meters)
    if count > max_samples:
        raise ValidationError(
            f"Path of {distance_m:.0f} m with step {step_meters} m needs {count} samples, "
            f"limit is {max_samples}. Increase the sampling step."
        )
    return count


def validate_profile_inputs(
    points: Sequence[ProfilePoint], elevations: Sequence[ElevationPoint]
) -> None:
    """Check that sampled points and elevations can be combined into a profile.

    Raises:
        CalculationError: If the arrays are misaligned or the path is degenerate
    """
    if len(points) != len(elevations):
        raise CalculationError(
            "Point/elevation count mismatch: "
            f"{len(points)} points, {len(elevations)} elevations"
        )

    if len(points) < 2:
        raise CalculationError("Not enough points to calculate a profile")


def validate_distances(distances: NDArray[np.float64]) -> None:
    """Check that distances start at zero and increase strictly.

    Raises:
        CalculationError: If the distance array is not a valid path parameterisation
    """
    if not np.all(np.isfinite(distances)):
        raise CalculationError("Path distances contain non-finite values")

    if distances[0] != 0:
        raise CalculationError(f"Path must start at distance 0, got {distances[0]} m")

    steps = np.diff(distances)
    if np.any(steps <= 0):
        bad_indices = np.where(steps <= 0)[0]
        raise CalculationError(
            "Path distances must increase strictly. "
            f"First 5 offending indices: {bad_indices[:5].tolist()}"
        )


def validate_elevation_array(elevations: NDArray[np.float64]) -> None:
    """Reject NaN or Inf terrain elevations.

    Raises:
        CalculationError: If any elevation is not finite
    """
    invalid_mask = ~np.isfinite(elevations)
    if np.any(invalid_mask):
        invalid_indices = np.where(invalid_mask)[0]
        raise CalculationError(
            "Elevation array contains non-finite values at indices: "
            f"{invalid_indices[:10].tolist()}"
        )


def ensure_finite(name: str, values: NDArray[np.float64]) -> None:
    """Abort instead of returning NaN or Infinity to a caller.

    Raises:
        CalculationError: If any computed value is not finite
    """
    invalid_mask = ~np.isfinite(values)
    if np.any(invalid_mask):
        invalid_indices = np.where(invalid_mask)[0]
        raise CalculationError(
            f"Calculation of {name} produced non-finite values at indices: "
            f"{invalid_indices[:10].tolist()}"
        )
