from typing import Any


class RrlProfileException(Exception):
    """
    Base exception for all path profile errors.

    Carries a stable error ``code`` so that an outer request handler can map
    it to a transport status without inspecting messages.
    """

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"error": error}


class ValidationError(RrlProfileException, ValueError):
    """
    Raised when request fields are malformed or out of range.
    """

    code = "VALIDATION_ERROR"


class ElevationError(RrlProfileException):
    """
    Base exception for terrain data source failures.
    """

    code = "ELEVATION_ERROR"


class TransientElevationError(ElevationError):
    """
    Raised for temporary provider failures (HTTP 429, 5xx, timeouts, network errors).
    Safe to retry with exponential backoff.
    """


class InvalidElevationResponseError(ElevationError):
    """
    Raised when a provider returns malformed, incomplete or NaN data.
    Do NOT retry - indicates data quality issue.
    """


class CalculationError(RrlProfileException):
    """
    Raised when an engineering invariant is violated (misaligned arrays,
    degenerate geometry, non-finite results).
    """

    code = "CALCULATION_ERROR"


class InternalError(RrlProfileException):
    """
    Raised for anything unexpected.
    """

    code = "INTERNAL_ERROR"


# Status a transport boundary should answer with for each error code
ERROR_HTTP_STATUS = {
    ValidationError.code: 400,
    ElevationError.code: 502,
    CalculationError.code: 400,
    InternalError.code: 500,
}
