import pytest

from rrl_profile.domain.exceptions import (
    ERROR_HTTP_STATUS,
    CalculationError,
    ElevationError,
    InternalError,
    InvalidElevationResponseError,
    TransientElevationError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_cls, code, status",
    [
        (ValidationError, "VALIDATION_ERROR", 400),
        (ElevationError, "ELEVATION_ERROR", 502),
        (TransientElevationError, "ELEVATION_ERROR", 502),
        (InvalidElevationResponseError, "ELEVATION_ERROR", 502),
        (CalculationError, "CALCULATION_ERROR", 400),
        (InternalError, "INTERNAL_ERROR", 500),
    ],
)
def test_error_codes_and_statuses(error_cls, code, status):
    error = error_cls("message")

    assert error.code == code
    assert ERROR_HTTP_STATUS[error.code] == status


def test_payload_without_details():
    assert ValidationError("Frequency must be positive").to_payload() == {
        "error": {"code": "VALIDATION_ERROR", "message": "Frequency must be positive"}
    }


def test_payload_with_details():
    payload = ElevationError(
        "Failed to fetch the elevation profile.", details="opentopodata: HTTP 503"
    ).to_payload()

    assert payload["error"]["details"] == "opentopodata: HTTP 503"
    assert str(ElevationError("boom")) == "boom"
