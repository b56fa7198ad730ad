import dataclasses

import numpy as np
import pytest

from rrl_profile.domain.models.analysis import (
    CriticalPoint,
    ProfileResult,
    ProfileSample,
    ProfileSummary,
    RecommendedLift,
)
from rrl_profile.domain.models.path import ProfileSeries
from tests.mocks import make_request


@pytest.fixture
def result():
    critical = CriticalPoint(
        index=1, distance_meters=500.0, lat=52.07, lon=113.38, clearance60=-2.5
    )
    summary = ProfileSummary(
        distance_meters=1000.0,
        los_ok=True,
        fresnel_ok=False,
        min_clearance=0.5,
        min_clearance60=-2.5,
        critical_point=critical,
        recommended_lift=RecommendedLift(only_a=5.0, only_b=None, both_equal=2.5),
    )
    sample = ProfileSample(
        index=0,
        distance_meters=0.0,
        lat=52.0,
        lon=113.0,
        terrain=np.float64(100.0),
        bulge=0.0,
        terrain_eff=100.0,
        los=130.0,
        fresnel_r1=0.0,
        fresnel_limit_line=130.0,
        clearance=30.0,
        clearance60=30.0,
    )
    return ProfileResult(input=make_request(), summary=summary, samples=(sample,))


def test_result_to_dict(result):
    data = result.to_dict()

    assert data["input"]["a"] == {"lat": 52.072472, "lon": 113.376417, "name": "A"}
    assert data["input"]["freq_ghz"] == 18
    assert data["summary"]["critical_point"]["index"] == 1
    assert data["summary"]["recommended_lift"] == {
        "only_a": 5.0,
        "only_b": None,
        "both_equal": 2.5,
    }
    assert isinstance(data["samples"], list)
    assert type(data["samples"][0]["terrain"]) is float
    assert data["elevation_provider"] is None


def test_with_provider_returns_annotated_copy(result):
    annotated = result.with_provider("openmeteo")

    assert annotated.elevation_provider == "openmeteo"
    assert result.elevation_provider is None
    assert annotated.summary is result.summary


def test_result_is_immutable(result):
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.summary.los_ok = False


def test_profile_series_length_and_total_distance():
    arrays = {f.name: np.zeros(3) for f in dataclasses.fields(ProfileSeries)}
    arrays["distances"] = np.array([0.0, 400.0, 812.5])

    series = ProfileSeries(**arrays)

    assert len(series) == 3
    assert series.total_distance == 812.5
    assert series.to_dict()["distances"] == [0.0, 400.0, 812.5]
