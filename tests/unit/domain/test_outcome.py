import pytest

from rrl_profile.domain.exceptions import (
    CalculationError,
    ElevationError,
    InternalError,
    ValidationError,
)
from rrl_profile.domain.models.outcome import (
    Failure,
    Success,
    capture,
    capture_async,
)


def _double(value):
    return Success(value * 2)


def _reject(value):
    raise ValidationError(f"bad value {value}")


def test_success_chains_stages():
    outcome = Success(2).then(_double).then(_double)

    assert outcome.ok
    assert outcome.unwrap() == 8


def test_failure_short_circuits():
    calls = []

    def stage(value):
        calls.append(value)
        return Success(value)

    error = ElevationError("down")
    outcome = Failure(error).then(stage)

    assert not outcome.ok
    assert outcome.error is error
    assert calls == []


def test_failure_unwrap_raises_original_error():
    error = CalculationError("broken")

    with pytest.raises(CalculationError) as exc_info:
        Failure(error).unwrap()

    assert exc_info.value is error


def test_capture_keeps_package_error_type():
    outcome = capture(_reject, 3)

    assert isinstance(outcome, Failure)
    assert isinstance(outcome.error, ValidationError)
    assert outcome.error.message == "bad value 3"


def test_capture_wraps_unexpected_errors():
    outcome = capture(lambda: 1 / 0)

    assert isinstance(outcome.error, InternalError)
    assert outcome.error.code == "INTERNAL_ERROR"
    assert "ZeroDivisionError" in outcome.error.details


@pytest.mark.asyncio
async def test_then_async_and_capture_async():
    async def fetch(value):
        return await capture_async(_fetch, value)

    async def _fetch(value):
        return value + 1

    outcome = await Success(1).then_async(fetch)

    assert outcome == Success(2)


@pytest.mark.asyncio
async def test_then_async_skips_after_failure():
    async def fetch(value):
        raise AssertionError("must not run")

    failure = Failure(ValidationError("x"))

    assert await failure.then_async(fetch) is failure


@pytest.mark.asyncio
async def test_capture_async_turns_errors_into_failures():
    async def fetch():
        raise ElevationError("Failed to fetch the elevation profile.")

    outcome = await capture_async(fetch)

    assert outcome.error.code == "ELEVATION_ERROR"
